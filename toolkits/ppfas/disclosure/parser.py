"""Parse boundary for PPFAS monthly portfolio workbooks."""

from __future__ import annotations

from pathlib import Path

from .columns import detect_columns
from .defaults import HEADER_SCAN_ROWS, MAX_SCAN_ROWS, MAX_SHEET_ATTEMPTS, SHEET_MAP
from .domain import ParseOutcome, ParseStatus, SectionMap
from .errors import StructuralParseError
from .logging_utils import get_logger
from .sections import scan_sheet
from .sheet import open_sheet

logger = get_logger()


def candidate_sheet_names(fund_code: str) -> tuple[str, ...]:
    """Return worksheet names to try for ``fund_code`` in order."""
    code = fund_code.strip().lower()
    if code not in SHEET_MAP:
        raise ValueError(f"Unsupported fund code: {fund_code} (choose from {', '.join(SHEET_MAP)})")
    return SHEET_MAP[code]


def extract_sheet(
    file_path: str | Path,
    sheet_name: str,
    *,
    scan_rows: int = HEADER_SCAN_ROWS,
    max_rows: int = MAX_SCAN_ROWS,
) -> ParseOutcome:
    """Extract sections from one worksheet, converting structural failures into an outcome."""
    try:
        with open_sheet(file_path, sheet_name, max_rows=max_rows) as sheet:
            columns = detect_columns(sheet, scan_rows=scan_rows)
            logger.info(
                "Detected columns in %s: name=%s percent=%s quantity=%s market_value=%s",
                sheet_name,
                columns.name,
                columns.percent,
                columns.quantity,
                columns.market_value,
            )
            sections = scan_sheet(sheet, columns)
    except StructuralParseError as exc:
        logger.error("Error processing Excel file %s: %s", file_path, exc)
        return ParseOutcome(status=ParseStatus.FAILED, sheet_name=sheet_name, error=str(exc))
    except Exception as exc:  # corrupt workbooks surface loader-specific errors
        logger.error("Unexpected error processing Excel file %s: %s", file_path, exc)
        return ParseOutcome(status=ParseStatus.FAILED, sheet_name=sheet_name, error=f"{type(exc).__name__}: {exc}")

    status = ParseStatus.PARSED if sections else ParseStatus.NO_DATA
    logger.info("Extracted %d sections from %s", len(sections), sheet_name)
    return ParseOutcome(status=status, sections=sections, sheet_name=sheet_name, columns=columns)


def parse_report(
    file_path: str | Path,
    fund_code: str,
    attempt_index: int = 0,
    *,
    scan_rows: int = HEADER_SCAN_ROWS,
    max_rows: int = MAX_SCAN_ROWS,
) -> ParseOutcome:
    """Parse the fund's worksheet, moving to the next candidate sheet once if nothing was found."""
    try:
        sheet_names = candidate_sheet_names(fund_code)
    except ValueError as exc:
        logger.error("Cannot parse %s: %s", file_path, exc)
        return ParseOutcome(status=ParseStatus.FAILED, error=str(exc))

    candidates = sheet_names[attempt_index : attempt_index + MAX_SHEET_ATTEMPTS]
    if not candidates:
        return ParseOutcome(status=ParseStatus.FAILED, error=f"No sheet candidate at attempt {attempt_index}")

    outcome = ParseOutcome(status=ParseStatus.NO_DATA)
    for position, sheet_name in enumerate(candidates):
        if position:
            logger.warning("No sectioned data found in previous sheet, retrying with sheet %s", sheet_name)
        outcome = extract_sheet(file_path, sheet_name, scan_rows=scan_rows, max_rows=max_rows)
        if outcome.sections:
            return outcome
    return outcome


def parse(file_path: str | Path, fund_code: str, attempt_index: int = 0) -> SectionMap:
    """Return the section map for ``fund_code``; an empty map signals no extractable data."""
    return parse_report(file_path, fund_code, attempt_index).sections
