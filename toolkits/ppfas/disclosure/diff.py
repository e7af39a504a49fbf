"""Diff utilities to compare two periods of disclosed holdings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .defaults import LAKH, PERCENT_CHANGE_EPSILON
from .domain import HoldingRecord, SectionMap
from .normalize import normalize_name


@dataclass(frozen=True)
class Position:
    """Holdings of one entity summed across lots."""

    percent: float = 0.0
    quantity: int = 0
    market_value: float = 0.0

    def __add__(self, other: Position) -> Position:
        return Position(
            percent=self.percent + other.percent,
            quantity=self.quantity + other.quantity,
            market_value=self.market_value + other.market_value,
        )

    @property
    def price(self) -> float:
        """Per-unit price, with market value reported in lakhs."""
        if self.quantity > 0:
            return self.market_value * LAKH / self.quantity
        return 0.0


@dataclass(frozen=True)
class DiffEntry:
    name: str
    has_traded: bool
    percent_diff: float
    display_percent_diff: float
    old_percent: float
    new_percent: float
    quantity_diff: int
    old_price: float
    new_price: float


def aggregate(holdings: Iterable[HoldingRecord]) -> dict[str, Position]:
    """Sum holdings that share a normalized name, keeping first-seen order."""
    positions: dict[str, Position] = {}
    for holding in holdings:
        key = normalize_name(holding.name)
        lot = Position(percent=holding.percent, quantity=holding.quantity, market_value=holding.market_value)
        positions[key] = positions[key] + lot if key in positions else lot
    return positions


def _flatten(sections: SectionMap) -> list[HoldingRecord]:
    return [holding for section in sections.values() for holding in section.holdings]


def compare_positions(old: Mapping[str, Position], new: Mapping[str, Position]) -> list[DiffEntry]:
    """Compute ranked entries for every entity whose weight moved."""
    names = list(old) + [name for name in new if name not in old]
    empty = Position()
    entries: list[DiffEntry] = []

    for name in names:
        before = old.get(name, empty)
        after = new.get(name, empty)
        percent_diff = after.percent - before.percent
        if abs(percent_diff) <= PERCENT_CHANGE_EPSILON:
            continue
        quantity_diff = after.quantity - before.quantity
        has_traded = quantity_diff != 0
        entries.append(
            DiffEntry(
                name=name,
                has_traded=has_traded,
                percent_diff=percent_diff,
                display_percent_diff=percent_diff if has_traded else 0.0,
                old_percent=before.percent,
                new_percent=after.percent,
                quantity_diff=quantity_diff,
                old_price=before.price,
                new_price=after.price,
            )
        )

    return rank_entries(entries)


def rank_entries(entries: Iterable[DiffEntry]) -> list[DiffEntry]:
    """Traded entities first, then by absolute weight change, largest first."""
    return sorted(entries, key=lambda entry: (not entry.has_traded, -abs(entry.percent_diff)))


def diff_portfolio(old: SectionMap, new: SectionMap) -> list[DiffEntry]:
    """Whole-portfolio diff with sections flattened."""
    return compare_positions(aggregate(_flatten(old)), aggregate(_flatten(new)))


def diff_by_section(old: SectionMap, new: SectionMap) -> dict[str, list[DiffEntry]]:
    """Per-section diffs; sections without qualifying changes are omitted."""
    by_section: dict[str, list[DiffEntry]] = {}
    for key in sorted(set(old) | set(new)):
        before = aggregate(old[key].holdings) if key in old else {}
        after = aggregate(new[key].holdings) if key in new else {}
        entries = compare_positions(before, after)
        if entries:
            by_section[key] = entries
    return by_section


def diff(old: SectionMap, new: SectionMap) -> tuple[list[DiffEntry], dict[str, list[DiffEntry]]]:
    """Compare two periods, returning the flat ranking and the per-section rankings."""
    return diff_portfolio(old, new), diff_by_section(old, new)
