from __future__ import annotations

import math
import numbers
import re
from typing import Any

import pandas as pd

# Longest leading numeric literal, e.g. "3 beds" -> "3", "1.2.3" -> "1.2"
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity))"
)
_NON_PRICE_CHARS = re.compile(r"[^0-9.]")


def column(df: pd.DataFrame, name: str) -> pd.Series:
    """Return a column, or a column of None when the records lack that field."""
    if name in df.columns:
        return df[name]
    return pd.Series([None] * len(df), index=df.index, dtype=object)


def parse_number(raw: Any) -> float | None:
    """
    Best-effort float parse of a raw cell value.

    Returns None for missing values and text without a leading number.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Real):
        value = float(raw)
        return None if math.isnan(value) else value
    if not isinstance(raw, str):
        return None

    match = _NUMBER_PREFIX.match(raw)
    if not match:
        return None
    return float(match.group(1))


def parse_price(raw: Any) -> float | None:
    """Parse currency text such as "$1,200.00" by keeping only digits and dots."""
    if not isinstance(raw, str):
        return parse_number(raw)
    return parse_number(_NON_PRICE_CHARS.sub("", raw))
