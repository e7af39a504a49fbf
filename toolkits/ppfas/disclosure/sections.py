"""Section-aware scanning of disclosure worksheets.

A worksheet is read top to bottom once. The anchor column (B) carries section
headers such as ``Equity & Equity related`` and the ``GRAND TOTAL`` marker
that ends extraction. Rows between headers are classified into holdings. The
scan is modelled as an immutable :class:`ParserState` that :func:`step`
advances one row at a time.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .classifier import AnchorKind, RowCells, classify_anchor, classify_row
from .defaults import ANCHOR_COLUMN
from .domain import ColumnLayout, HoldingRecord, Section, SectionMap
from .logging_utils import get_logger
from .sheet import SheetView

logger = get_logger()


class ScanPhase(str, Enum):
    SEEKING = "seeking"
    IN_SECTION = "in_section"
    DONE = "done"


@dataclass(frozen=True)
class ParserState:
    phase: ScanPhase = ScanPhase.SEEKING
    section_key: str | None = None
    accumulator: tuple[HoldingRecord, ...] = ()
    completed: Mapping[str, tuple[HoldingRecord, ...]] = field(default_factory=dict)

    @property
    def done(self) -> bool:
        return self.phase is ScanPhase.DONE


def _flush(state: ParserState) -> dict[str, tuple[HoldingRecord, ...]]:
    completed = dict(state.completed)
    if state.section_key is not None and state.accumulator:
        completed[state.section_key] = state.accumulator
    return completed


def step(state: ParserState, row: Mapping[str, Any], columns: ColumnLayout) -> ParserState:
    """Advance the scan by one row given as ``{column letter: raw value}``."""
    if state.done:
        return state

    kind, key = classify_anchor(row.get(ANCHOR_COLUMN))
    if kind is AnchorKind.TERMINATOR:
        logger.debug("Found terminator, stopping extraction")
        return ParserState(phase=ScanPhase.DONE, completed=_flush(state))

    if kind is AnchorKind.SECTION_HEADER:
        logger.debug("Found section header -> %s", key)
        return ParserState(phase=ScanPhase.IN_SECTION, section_key=key, completed=_flush(state))

    if state.phase is not ScanPhase.IN_SECTION:
        return state

    result = classify_row(RowCells.from_values(row, columns))
    if result.record is None:
        logger.debug("Skipping row in %s (%s): %s", state.section_key, result.rejection.value, row)
        return state
    logger.debug("Added to %s: %s (%s)", state.section_key, result.record.name, result.record.percent)
    return replace(state, accumulator=state.accumulator + (result.record,))


def finish(state: ParserState) -> SectionMap:
    """Close any open section and build the section map."""
    completed = _flush(state) if not state.done else dict(state.completed)
    return {key: Section(key=key, holdings=holdings) for key, holdings in completed.items()}


def scan_rows(rows: Iterable[Mapping[str, Any]], columns: ColumnLayout) -> SectionMap:
    state = ParserState()
    for row in rows:
        state = step(state, row, columns)
        if state.done:
            break
    return finish(state)


def scan_sheet(sheet: SheetView, columns: ColumnLayout) -> SectionMap:
    wanted = (ANCHOR_COLUMN, *columns.letters())
    return scan_rows((sheet.row_values(row, wanted) for row in sheet.rows()), columns)
