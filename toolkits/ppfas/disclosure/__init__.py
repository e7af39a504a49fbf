"""PPFAS monthly portfolio disclosure extraction and diff."""

from .columns import detect_columns
from .diff import DiffEntry, diff, diff_by_section, diff_portfolio
from .domain import (
    ColumnLayout,
    HoldingRecord,
    ParseOutcome,
    ParseStatus,
    Section,
    SectionMap,
    section_display_name,
)
from .errors import AcquisitionError, StructuralParseError
from .normalize import normalize_name, parse_market_value, parse_percent, parse_quantity
from .parser import candidate_sheet_names, parse, parse_report
from .provider import download_report, fetch_report, report_url
from .settings import DisclosureSettings, get_settings

__all__ = [
    "AcquisitionError",
    "ColumnLayout",
    "DiffEntry",
    "DisclosureSettings",
    "HoldingRecord",
    "ParseOutcome",
    "ParseStatus",
    "Section",
    "SectionMap",
    "StructuralParseError",
    "candidate_sheet_names",
    "detect_columns",
    "diff",
    "diff_by_section",
    "diff_portfolio",
    "download_report",
    "fetch_report",
    "get_settings",
    "normalize_name",
    "parse",
    "parse_market_value",
    "parse_percent",
    "parse_quantity",
    "parse_report",
    "report_url",
    "section_display_name",
]
