"""Worksheet access for disclosure workbooks."""

from __future__ import annotations

import zipfile
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from xml.etree.ElementTree import ParseError

import pandas as pd
from openpyxl.utils import column_index_from_string
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError

from .defaults import LAST_READ_COLUMN, MAX_SCAN_ROWS
from .errors import StructuralParseError
from .logging_utils import get_logger

logger = get_logger()

_WORKBOOK_ERRORS = (
    OSError,
    ValueError,
    KeyError,
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    ParseError,
    InvalidFileException,
    XLRDError,
)


class SheetView:
    """Read-only grid addressed by column letter and 1-based row number."""

    def __init__(self, frame: pd.DataFrame) -> None:
        self._frame = frame.reset_index(drop=True)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> SheetView:
        """Build a view from rows whose first value sits in column A."""
        return cls(pd.DataFrame([list(row) for row in rows], dtype=object))

    @property
    def row_count(self) -> int:
        return len(self._frame.index)

    def cell(self, column: str, row: int) -> Any:
        """Return the raw value at ``column``/``row``; blanks and out-of-range cells are ``None``."""
        col_idx = column_index_from_string(column) - 1
        if row < 1 or row > self.row_count or col_idx >= len(self._frame.columns):
            return None
        value = self._frame.iat[row - 1, col_idx]
        if value is None:
            return None
        if not isinstance(value, str) and pd.isna(value):
            return None
        return value

    def row_values(self, row: int, columns: Iterable[str]) -> dict[str, Any]:
        return {column: self.cell(column, row) for column in columns}

    def rows(self) -> Iterator[int]:
        return iter(range(1, self.row_count + 1))


@contextmanager
def open_sheet(path: str | Path, sheet_name: str, *, max_rows: int = MAX_SCAN_ROWS) -> Iterator[SheetView]:
    """Open ``sheet_name`` from the workbook at ``path``, reading columns A..L only.

    The workbook handle is released when the context exits.

    Raises:
        StructuralParseError: the workbook cannot be read or has no such sheet.
    """
    workbook_path = Path(path)
    try:
        workbook = pd.ExcelFile(workbook_path)
    except _WORKBOOK_ERRORS as exc:
        raise StructuralParseError(f"Unable to open workbook {workbook_path}: {exc}") from exc

    with workbook:
        if sheet_name not in workbook.sheet_names:
            raise StructuralParseError(
                f"Sheet {sheet_name!r} not found in {workbook_path.name} "
                f"(available: {', '.join(map(str, workbook.sheet_names))})"
            )
        try:
            frame = workbook.parse(sheet_name, header=None, dtype=object, nrows=max_rows)
        except _WORKBOOK_ERRORS as exc:
            raise StructuralParseError(f"Unable to read sheet {sheet_name!r} from {workbook_path}: {exc}") from exc
        frame = frame.iloc[:, : column_index_from_string(LAST_READ_COLUMN)]
        logger.debug("Loaded sheet %s from %s (rows=%d)", sheet_name, workbook_path.name, len(frame.index))
        yield SheetView(frame)
