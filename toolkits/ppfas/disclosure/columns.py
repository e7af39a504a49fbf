"""Heuristic column detection for disclosure worksheets.

Report layouts shift between releases, so the columns holding the instrument
name, quantity, market value and percent of net assets are located by scanning
the leading rows for header keywords. When the name or percent header cannot
be found on a row, the same row is inspected for values that look like a
company name or a fractional weight. Anything still unresolved after the scan
window falls back to the historical default layout (B, G, E, F). Detection
never raises; a wrong guess only degrades the extracted data.
"""

from __future__ import annotations

import numbers
import re
from typing import Any

from .defaults import (
    CANDIDATE_COLUMNS,
    DEFAULT_MARKET_VALUE_COLUMN,
    DEFAULT_NAME_COLUMN,
    DEFAULT_PERCENT_COLUMN,
    DEFAULT_QUANTITY_COLUMN,
    HEADER_SCAN_ROWS,
)
from .domain import ColumnLayout
from .logging_utils import get_logger
from .sheet import SheetView

logger = get_logger()

NAME_KEYWORDS = ("company", "name", "security", "instrument")
QUANTITY_KEYWORDS = ("quantity",)
MARKET_VALUE_KEYWORDS = ("market", "value")
MARKET_VALUE_UNITS = ("rs.", "lakhs")
PERCENT_KEYWORDS = ("%", "percent", "weight", "assets")

FIELDS = ("name", "percent", "quantity", "market_value")

_COMPANY_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9\s&.\-(),]+$")


def header_fields(value: Any) -> set[str]:
    """Return the fields whose header keywords appear in ``value``."""
    if not isinstance(value, str):
        return set()
    lowered = value.lower()
    fields: set[str] = set()
    if any(keyword in lowered for keyword in NAME_KEYWORDS):
        fields.add("name")
    if any(keyword in lowered for keyword in QUANTITY_KEYWORDS):
        fields.add("quantity")
    if any(keyword in lowered for keyword in MARKET_VALUE_KEYWORDS) and any(
        unit in lowered for unit in MARKET_VALUE_UNITS
    ):
        fields.add("market_value")
    if any(keyword in lowered for keyword in PERCENT_KEYWORDS):
        fields.add("percent")
    return fields


def looks_like_company_name(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip()
    return len(text) > 3 and bool(_COMPANY_NAME_RE.match(text))


def looks_like_fraction(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return 0 < value <= 1


def detect_columns(sheet: SheetView, *, scan_rows: int = HEADER_SCAN_ROWS) -> ColumnLayout:
    headers: dict[str, str] = {}
    inferred: dict[str, str] = {}

    for row in range(1, min(scan_rows, sheet.row_count) + 1):
        values = sheet.row_values(row, CANDIDATE_COLUMNS)

        for column, value in values.items():
            for field in header_fields(value):
                headers.setdefault(field, column)

        if "name" not in headers or "percent" not in headers:
            for column, value in values.items():
                if "name" not in headers and looks_like_company_name(value):
                    inferred.setdefault("name", column)
                if "percent" not in headers and looks_like_fraction(value):
                    inferred.setdefault("percent", column)

        if all(field in headers or field in inferred for field in FIELDS):
            logger.debug("Column detection complete at row %d", row)
            break

    resolved = {**inferred, **headers}
    missing = [field for field in FIELDS if field not in resolved]
    if missing:
        logger.debug("Column detection fell back to defaults for: %s", ", ".join(missing))

    return ColumnLayout(
        name=resolved.get("name", DEFAULT_NAME_COLUMN),
        percent=resolved.get("percent", DEFAULT_PERCENT_COLUMN),
        quantity=resolved.get("quantity", DEFAULT_QUANTITY_COLUMN),
        market_value=resolved.get("market_value", DEFAULT_MARKET_VALUE_COLUMN),
    )
