"""Provider utilities to fetch PPFAS monthly portfolio disclosure workbooks."""

from __future__ import annotations

import calendar
import random
from datetime import date
from pathlib import Path

import requests

from .defaults import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    REPORT_URL_TEMPLATE,
    USER_AGENTS,
)
from .errors import AcquisitionError
from .logging_utils import get_logger
from .settings import DisclosureSettings, get_settings

logger = get_logger()

CHUNK_SIZE = 64 * 1024


def report_date(month_offset: int, *, today: date | None = None) -> date:
    """Last calendar day of the month ``month_offset`` months before ``today``."""
    today = today or date.today()
    year, month_zero = divmod(today.year * 12 + today.month - 1 - month_offset, 12)
    month = month_zero + 1
    return date(year, month, calendar.monthrange(year, month)[1])


def report_url(
    month_offset: int,
    extension: str = "xls",
    *,
    today: date | None = None,
    template: str = REPORT_URL_TEMPLATE,
) -> str:
    as_of = report_date(month_offset, today=today)
    return template.format(
        year=as_of.year,
        month=as_of.strftime("%B"),
        day=f"{as_of.day:02d}",
        extension=extension,
    )


def _cache_path(url: str, cache_dir: Path) -> Path:
    filename = url.rsplit("/", 1)[-1].split("?", 1)[0]
    return cache_dir / filename


def _download_to(url: str, target: Path, *, timeout: int, connect_timeout: int) -> None:
    headers = {"User-Agent": random.choice(USER_AGENTS)}
    try:
        response = requests.get(url, timeout=(connect_timeout, timeout), headers=headers, stream=True)
    except requests.RequestException as exc:
        raise AcquisitionError(f"HTTP request failed: {exc}") from exc

    partial = target.with_name(f"{target.name}.part")
    with response:
        if response.status_code != 200:
            raise AcquisitionError(f"HTTP error code: {response.status_code}")
        try:
            with partial.open("wb") as file_obj:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        file_obj.write(chunk)
        except (requests.RequestException, OSError) as exc:
            partial.unlink(missing_ok=True)
            raise AcquisitionError(f"Download interrupted: {exc}") from exc
    partial.replace(target)


def download_report(
    url: str,
    *,
    cache_dir: str | Path,
    timeout: int = DEFAULT_TIMEOUT_SECONDS,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_SECONDS,
) -> Path | None:
    """Download ``url`` into ``cache_dir`` unless already cached; ``None`` when unavailable."""
    cache_root = Path(cache_dir)
    target = _cache_path(url, cache_root)
    if target.exists():
        logger.info("File already exists, using cache: %s", target)
        return target

    cache_root.mkdir(parents=True, exist_ok=True)
    logger.info("Downloading file: %s", url)
    try:
        _download_to(url, target, timeout=timeout, connect_timeout=connect_timeout)
    except AcquisitionError as exc:
        logger.error("Unable to download %s: %s", url, exc)
        return None
    logger.info("Downloaded file: %s", target)
    return target


def fetch_report(
    month_offset: int,
    *,
    settings: DisclosureSettings | None = None,
    today: date | None = None,
) -> Path | None:
    """Fetch the report for ``month_offset``, trying ``.xlsx`` before ``.xls``."""
    settings = settings or get_settings()
    for extension in ("xlsx", "xls"):
        url = report_url(month_offset, extension, today=today, template=settings.report_url_template)
        path = download_report(
            url,
            cache_dir=settings.cache_dir,
            timeout=settings.http_timeout,
            connect_timeout=settings.connect_timeout,
        )
        if path is not None:
            return path
        logger.info("No %s report available for month offset %d", extension, month_offset)
    return None
