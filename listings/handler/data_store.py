from __future__ import annotations

from ..data_ingestion.config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from ..data_ingestion.loader import load_listings
from .record_set import RecordSet

_record_set: RecordSet | None = None


def get_record_set(config: IngestionConfig | None = None) -> RecordSet:
    """Return the in-memory listings, loading them on first call."""
    global _record_set
    if _record_set is None:
        _record_set = load_listings(config=config or DEFAULT_INGESTION_CONFIG)
    return _record_set


def clear_record_set() -> None:
    global _record_set
    _record_set = None
