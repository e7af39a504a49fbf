"""Monthly diff: fetch two PPFAS portfolio disclosures, extract holdings, print ranked changes."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from toolkits.ppfas.disclosure import (
    DisclosureSettings,
    ParseOutcome,
    diff,
    fetch_report,
    get_settings,
    parse_report,
)

from .cli import parse_args
from .reporting import build_summary, render_markdown, write_summary_json

logger = logging.getLogger("ppfas_monthly_diff")


def _resolve_settings(args: argparse.Namespace) -> DisclosureSettings:
    settings = get_settings()
    if args.cache_dir:
        settings = settings.model_copy(update={"cache_dir": Path(args.cache_dir)})
    return settings


def _resolve_input(local_path: str | None, month_offset: int, settings: DisclosureSettings) -> Path | None:
    if local_path:
        path = Path(local_path)
        if not path.exists():
            logger.error("Local workbook not found: %s", path)
            return None
        return path
    return fetch_report(month_offset, settings=settings)


def _parse(path: Path, fund_code: str, settings: DisclosureSettings) -> ParseOutcome:
    outcome = parse_report(
        path,
        fund_code,
        scan_rows=settings.header_scan_rows,
        max_rows=settings.max_scan_rows,
    )
    logger.info(
        "Parsed %s: status=%s sheet=%s holdings=%d",
        path.name,
        outcome.status.value,
        outcome.sheet_name,
        outcome.holding_count,
    )
    return outcome


def run(args: argparse.Namespace) -> int:
    settings = _resolve_settings(args)
    fund_code = args.fund_name or settings.default_fund

    old_path = _resolve_input(args.old_file, args.month_old, settings)
    new_path = _resolve_input(args.new_file, args.month_new, settings)
    if old_path is None or new_path is None:
        print("Unable to download one or both files.", file=sys.stderr)
        return 1

    print("Processing Excel files...")
    old_outcome = _parse(old_path, fund_code, settings)
    new_outcome = _parse(new_path, fund_code, settings)
    if not old_outcome.sections or not new_outcome.sections:
        print("Unable to extract data from Excel files.", file=sys.stderr)
        return 1

    flat, by_section = diff(old_outcome.sections, new_outcome.sections)
    if not flat:
        print("No significant changes found between the two periods.")
        return 0

    markdown = render_markdown(flat, by_section, fund_code=fund_code)
    print(markdown)

    if args.summary_path:
        summary_path = Path(args.summary_path)
        summary_path.parent.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(markdown, encoding="utf-8")
        logger.info("Wrote summary markdown: %s", summary_path)
    if args.summary_json:
        summary = build_summary(
            fund_code=fund_code,
            old=(old_path, old_outcome),
            new=(new_path, new_outcome),
            flat=flat,
            by_section=by_section,
        )
        write_summary_json(summary, Path(args.summary_json))
        logger.info("Wrote summary json: %s", args.summary_json)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
