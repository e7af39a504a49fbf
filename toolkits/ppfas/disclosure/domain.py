"""Domain models for PPFAS monthly portfolio disclosures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .defaults import SECTION_DISPLAY_NAMES


class HoldingRecord(BaseModel):
    """Single holding row extracted from a disclosure worksheet."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Instrument name as printed in the report.")
    percent: float = Field(..., gt=0, le=1, description="Share of net assets as a fraction (0-1].")
    quantity: int = Field(default=0, ge=0, description="Units held.")
    market_value: float = Field(default=0.0, ge=0, description="Market value in lakhs of rupees.")


class Section(BaseModel):
    """Ordered holdings found under one section header."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Normalized section key, e.g. equity_and_equity_related.")
    holdings: tuple[HoldingRecord, ...] = Field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return section_display_name(self.key)

    def __len__(self) -> int:
        return len(self.holdings)


SectionMap = dict[str, Section]


def section_display_name(key: str) -> str:
    """Human label for a section key, falling back to a title-cased key."""
    if key in SECTION_DISPLAY_NAMES:
        return SECTION_DISPLAY_NAMES[key]
    return key.replace("_", " ").title()


@dataclass(frozen=True)
class ColumnLayout:
    """Column letters holding each field of a holding row."""

    name: str
    percent: str
    quantity: str
    market_value: str

    def letters(self) -> tuple[str, str, str, str]:
        return (self.name, self.percent, self.quantity, self.market_value)


class ParseStatus(str, Enum):
    PARSED = "parsed"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of extracting one workbook, separating empty sheets from unreadable ones."""

    status: ParseStatus
    sections: SectionMap = field(default_factory=dict)
    sheet_name: str | None = None
    columns: ColumnLayout | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.PARSED

    @property
    def holding_count(self) -> int:
        return sum(len(section) for section in self.sections.values())
