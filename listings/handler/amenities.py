from __future__ import annotations

import json
from typing import Any, Iterable


def _split_delimited(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def normalize_amenities(raw: Any) -> list:
    """
    Turn a raw amenities cell into a list of amenity names.

    The column comes in three shapes: a JSON array (``'["Wifi", "Pool"]'``),
    a plain comma separated string (``"Wifi, Pool"``) or nothing at all.
    A JSON array always wins; text that is not valid JSON falls back to
    comma splitting, and missing values give an empty list.
    """
    if isinstance(raw, list):
        return list(raw)
    if not isinstance(raw, str):
        return []

    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError):
        return _split_delimited(raw)

    if isinstance(decoded, list):
        return decoded
    if isinstance(decoded, str):
        return _split_delimited(decoded)
    if decoded is None:
        return []
    return _split_delimited(raw)


def has_amenities(raw: Any, required: Iterable[str]) -> bool:
    """Return True if every required amenity appears in the normalized cell."""
    available = normalize_amenities(raw)
    return all(amenity in available for amenity in required)
