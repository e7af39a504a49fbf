from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import asdict
from pathlib import Path

from toolkits.ppfas.disclosure import DiffEntry, ParseOutcome, section_display_name

CHANGE_COLUMNS = ["Change (%)", "Old %", "New %", "Change (Shares)", "Old Price", "New Price"]


def entry_to_dict(entry: DiffEntry) -> dict[str, object]:
    payload = asdict(entry)
    payload["percent_diff_abs"] = abs(entry.percent_diff)
    payload["quantity_diff_abs"] = abs(entry.quantity_diff)
    return payload


def format_percent(value: float, *, signed: bool = False) -> str:
    sign = "+" if signed and value > 0 else ""
    return f"{sign}{value * 100:,.2f}%"


def format_shares(value: int) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{value:,}"


def format_price(value: float) -> str:
    return f"{value:,.2f}" if value > 0 else "N/A"


def _escape(text: str) -> str:
    return text.replace("|", "\\|")


def _build_table_rows(title: str, entries: Sequence[DiffEntry]) -> list[str]:
    columns = [title, *CHANGE_COLUMNS]
    lines = ["| " + " | ".join(_escape(column) for column in columns) + " |"]
    lines.append("| " + " | ".join(["---"] * len(columns)) + " |")
    for entry in entries:
        row = [
            _escape(entry.name),
            format_percent(entry.display_percent_diff, signed=True),
            format_percent(entry.old_percent),
            format_percent(entry.new_percent),
            format_shares(entry.quantity_diff),
            format_price(entry.old_price),
            format_price(entry.new_price),
        ]
        lines.append("| " + " | ".join(row) + " |")
    return lines


def render_markdown(
    flat: Sequence[DiffEntry],
    by_section: Mapping[str, Sequence[DiffEntry]],
    *,
    fund_code: str,
) -> str:
    lines = [f"# Portfolio changes ({fund_code})", ""]
    lines.extend(_build_table_rows("Company Name", flat))
    lines.append("")
    lines.append("## Section-wise Breakdown")
    for key, entries in by_section.items():
        lines.append("")
        lines.append(f"### {section_display_name(key)}")
        lines.extend(_build_table_rows(section_display_name(key), entries))
    return "\n".join(lines).strip() + "\n"


def _outcome_summary(path: Path, outcome: ParseOutcome) -> dict[str, object]:
    return {
        "path": str(path),
        "status": outcome.status.value,
        "sheet": outcome.sheet_name,
        "sections": {key: len(section) for key, section in outcome.sections.items()},
        "error": outcome.error,
    }


def build_summary(
    *,
    fund_code: str,
    old: tuple[Path, ParseOutcome],
    new: tuple[Path, ParseOutcome],
    flat: Sequence[DiffEntry],
    by_section: Mapping[str, Sequence[DiffEntry]],
) -> dict[str, object]:
    return {
        "fund": fund_code,
        "old": _outcome_summary(*old),
        "new": _outcome_summary(*new),
        "portfolio": [entry_to_dict(entry) for entry in flat],
        "sections": {
            key: {
                "display_name": section_display_name(key),
                "entries": [entry_to_dict(entry) for entry in entries],
            }
            for key, entries in by_section.items()
        },
    }


def write_summary_json(summary: Mapping[str, object], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding="utf-8")
