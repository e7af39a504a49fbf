from __future__ import annotations

import argparse
from collections.abc import Sequence

from toolkits.ppfas.disclosure.defaults import SHEET_MAP


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the month-over-month diff of PPFAS mutual fund holdings (Y - X)."
    )
    parser.add_argument(
        "month_old",
        nargs="?",
        type=int,
        default=2,
        help="Months back for the old sheet X (default: 2).",
    )
    parser.add_argument(
        "-y",
        "--month-new",
        type=int,
        default=1,
        help="Months back for the new sheet Y (default: 1).",
    )
    parser.add_argument(
        "-f",
        "--fund-name",
        choices=sorted(SHEET_MAP),
        help="Fund to compare (default: PPFAS_DEFAULT_FUND or 'tax').",
    )
    parser.add_argument("--old-file", help="Use a local workbook for the old period instead of downloading.")
    parser.add_argument("--new-file", help="Use a local workbook for the new period instead of downloading.")
    parser.add_argument("--cache-dir", help="Directory for downloaded workbooks (default: PPFAS_CACHE_DIR or temp).")
    parser.add_argument("--summary-path", help="Path to write a Markdown summary of changes.")
    parser.add_argument("--summary-json", help="Path to write a machine-readable JSON summary.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)
