"""Row classification for disclosure worksheets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .defaults import NOISE_TOKENS, SECTION_HEADERS, SECTION_TERMINATOR
from .domain import ColumnLayout, HoldingRecord
from .normalize import cell_text, parse_market_value, parse_percent, parse_quantity

_SECTION_LOOKUP = {header.lower(): key for header, key in SECTION_HEADERS.items()}
_NOISE_LOWER = tuple(token.lower() for token in NOISE_TOKENS)


class AnchorKind(str, Enum):
    TERMINATOR = "terminator"
    SECTION_HEADER = "section_header"
    OTHER = "other"


class RowRejection(str, Enum):
    EMPTY_NAME = "empty_name"
    SHORT_NAME = "short_name"
    NOISE = "noise"
    BAD_PERCENT = "bad_percent"


@dataclass(frozen=True)
class RowCells:
    """Raw values read from the detected columns of one row."""

    name: Any
    percent: Any
    quantity: Any
    market_value: Any

    @classmethod
    def from_values(cls, values: dict[str, Any], columns: ColumnLayout) -> RowCells:
        return cls(
            name=values.get(columns.name),
            percent=values.get(columns.percent),
            quantity=values.get(columns.quantity),
            market_value=values.get(columns.market_value),
        )


@dataclass(frozen=True)
class RowResult:
    record: HoldingRecord | None = None
    rejection: RowRejection | None = None

    @property
    def accepted(self) -> bool:
        return self.record is not None


def classify_anchor(raw: Any) -> tuple[AnchorKind, str | None]:
    """Classify the anchor cell of a row.

    The terminator is checked first so it always wins over a section header.
    """
    text = cell_text(raw).lower()
    if text == SECTION_TERMINATOR.lower():
        return AnchorKind.TERMINATOR, None
    key = _SECTION_LOOKUP.get(text)
    if key is not None:
        return AnchorKind.SECTION_HEADER, key
    return AnchorKind.OTHER, None


def is_noise(name: str) -> bool:
    lowered = name.lower()
    return any(token in lowered for token in _NOISE_LOWER)


def classify_row(cells: RowCells) -> RowResult:
    """Turn a row inside an open section into a holding, or say why it was skipped."""
    name = cell_text(cells.name)
    if not name:
        return RowResult(rejection=RowRejection.EMPTY_NAME)
    if len(name) <= 2:
        return RowResult(rejection=RowRejection.SHORT_NAME)
    if is_noise(name):
        return RowResult(rejection=RowRejection.NOISE)

    percent = parse_percent(cells.percent)
    if percent is None or percent <= 0 or percent > 1:
        return RowResult(rejection=RowRejection.BAD_PERCENT)

    record = HoldingRecord(
        name=name,
        percent=percent,
        quantity=parse_quantity(cells.quantity),
        market_value=parse_market_value(cells.market_value),
    )
    return RowResult(record=record)
