"""Runtime settings for the disclosure toolkit, sourced from environment variables."""

from __future__ import annotations

import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_FUND_CODE,
    DEFAULT_TIMEOUT_SECONDS,
    HEADER_SCAN_ROWS,
    MAX_SCAN_ROWS,
    REPORT_URL_TEMPLATE,
    SHEET_MAP,
)


class DisclosureSettings(BaseSettings):
    """Settings for downloading and parsing disclosure workbooks."""

    report_url_template: str = Field(
        default=REPORT_URL_TEMPLATE,
        validation_alias=AliasChoices("ppfas_report_url_template", "PPFAS_REPORT_URL_TEMPLATE"),
    )
    cache_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        validation_alias=AliasChoices("ppfas_cache_dir", "PPFAS_CACHE_DIR"),
    )
    http_timeout: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=1,
        validation_alias=AliasChoices("ppfas_http_timeout", "PPFAS_HTTP_TIMEOUT"),
    )
    connect_timeout: int = Field(
        default=DEFAULT_CONNECT_TIMEOUT_SECONDS,
        ge=1,
        validation_alias=AliasChoices("ppfas_connect_timeout", "PPFAS_CONNECT_TIMEOUT"),
    )
    header_scan_rows: int = Field(
        default=HEADER_SCAN_ROWS,
        ge=1,
        validation_alias=AliasChoices("ppfas_header_scan_rows", "PPFAS_HEADER_SCAN_ROWS"),
    )
    max_scan_rows: int = Field(
        default=MAX_SCAN_ROWS,
        ge=1,
        validation_alias=AliasChoices("ppfas_max_scan_rows", "PPFAS_MAX_SCAN_ROWS"),
    )
    default_fund: str = Field(
        default=DEFAULT_FUND_CODE,
        validation_alias=AliasChoices("ppfas_default_fund", "PPFAS_DEFAULT_FUND"),
    )

    @field_validator("default_fund")
    @classmethod
    def _validate_fund(cls, value: str) -> str:
        code = value.strip().lower()
        if code not in SHEET_MAP:
            raise ValueError(f"default_fund must be one of: {', '.join(SHEET_MAP)}")
        return code

    @field_validator("report_url_template")
    @classmethod
    def _validate_template(cls, value: str) -> str:
        for placeholder in ("{year}", "{month}", "{day}", "{extension}"):
            if placeholder not in value:
                raise ValueError(f"report_url_template is missing {placeholder}")
        return value

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="", extra="ignore")


@lru_cache
def get_settings() -> DisclosureSettings:
    """Cached accessor so we only load settings once per process."""
    return DisclosureSettings()
