"""Value normalization for raw worksheet cells."""

from __future__ import annotations

import math
import numbers
import re
from typing import Any

import pandas as pd

from .defaults import LEGAL_SUFFIXES, NAME_ALIASES

_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_WHITESPACE_RE = re.compile(r"\s+")


def cell_text(raw: Any) -> str:
    """Render a raw cell as trimmed text; blanks become an empty string."""
    if raw is None:
        return ""
    if not isinstance(raw, str) and pd.isna(raw):
        return ""
    return str(raw).strip()


def is_numeric_text(text: str) -> bool:
    return bool(_NUMERIC_RE.match(text.strip()))


def parse_percent(raw: Any) -> float | None:
    """Parse a percent-of-assets cell into a fraction.

    ``"8.11%"`` is percentage-scale and becomes ``0.0811``. Without a ``%`` sign,
    values above 1 are treated as whole percentages (``15`` -> ``0.15``) and
    values up to and including 1 are taken as already fractional.
    """
    text = cell_text(raw)
    cleaned = text.replace("%", "").strip()
    if not is_numeric_text(cleaned):
        return None
    value = float(cleaned)
    if "%" in text:
        return value / 100.0
    if value > 1:
        return value / 100.0
    return value


def parse_quantity(raw: Any) -> int:
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, numbers.Real) and math.isfinite(raw):
        return max(int(raw), 0)
    cleaned = cell_text(raw).replace(",", "")
    if _INTEGER_RE.match(cleaned):
        return max(int(cleaned), 0)
    if is_numeric_text(cleaned):
        value = float(cleaned)
        return max(int(value), 0) if math.isfinite(value) else 0
    return 0


def parse_market_value(raw: Any) -> float:
    if isinstance(raw, bool):
        return 0.0
    if isinstance(raw, numbers.Real) and math.isfinite(raw):
        return max(float(raw), 0.0)
    cleaned = cell_text(raw).replace(",", "")
    if is_numeric_text(cleaned):
        value = float(cleaned)
        return max(value, 0.0) if math.isfinite(value) else 0.0
    return 0.0


def normalize_name(name: str) -> str:
    """Matching key for an instrument name across reporting periods."""
    normalized = _WHITESPACE_RE.sub(" ", name).strip()
    lowered = normalized.lower()
    for suffix in LEGAL_SUFFIXES:
        if lowered.endswith(suffix.lower()):
            normalized = normalized[: -len(suffix)].strip()
            break

    lowered = normalized.lower()
    for variation, canonical in NAME_ALIASES.items():
        if variation.lower() in lowered:
            return canonical
    return normalized
