from __future__ import annotations

import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

# Ensure the application package is importable when running tests directly via pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEADER_ROW = [
    None,
    "Name of the Instrument",
    "ISIN",
    "Industry / Rating",
    "Quantity",
    "Market value (Rs. in Lakhs)",
    "% to Net Assets",
]


def disclosure_rows(
    sections: Mapping[str, Sequence[tuple[str, int, float, Any]]],
    *,
    terminator: bool = True,
    trailing: Sequence[Sequence[Any]] = (),
) -> list[list[Any]]:
    """Rows of a disclosure sheet in the default B/E/F/G layout, starting at column A."""
    rows: list[list[Any]] = [
        [None, "PPFAS Mutual Fund"],
        [None, "Monthly Portfolio Statement"],
        HEADER_ROW,
    ]
    for header, holdings in sections.items():
        rows.append([None, header])
        for name, quantity, market_value, percent in holdings:
            rows.append([None, name, "INE000000000", "Finance", quantity, market_value, percent])
        rows.append([None, "Sub Total", None, None, None, 1.0, 0.5])
    rows.append([None, "Total", None, None, None, 1.0, 0.5])
    if terminator:
        rows.append([None, "GRAND TOTAL", None, None, None, 100.0, 1])
    rows.extend(list(row) for row in trailing)
    return rows


@pytest.fixture()
def make_workbook(tmp_path) -> Callable[..., Path]:
    def _make(sheets: Mapping[str, Sequence[Sequence[Any]]], filename: str = "report.xlsx") -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            sheet = workbook.create_sheet(title=title)
            for row in rows:
                sheet.append(list(row))
        path = tmp_path / filename
        workbook.save(path)
        return path

    return _make


@pytest.fixture()
def sheet_rows() -> Callable[..., list[list[Any]]]:
    return disclosure_rows
