from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..errors import LoadError
from ..handler.record_set import RecordSet
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


def _read_frame(path: Path, config: IngestionConfig) -> pd.DataFrame:
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding=config.encoding,
        )
    except pd.errors.EmptyDataError:
        # Nothing at all in the file, not even a header row
        return pd.DataFrame()

    if config.strip_whitespace:
        df.columns = [str(col).strip() for col in df.columns]
        for col in df.columns:
            df[col] = df[col].str.strip()
    return df


def load_listings(
    path: str | Path | None = None,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> RecordSet:
    """
    Load the listings CSV into a RecordSet.

    Every cell is kept as text; blank cells become empty strings. Quoted
    fields may span lines or contain commas.

    Raises LoadError when the file cannot be read or is not valid CSV.
    """
    source = Path(path) if path is not None else config.csv_path

    try:
        df = _read_frame(source, config)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        logger.error("Failed to load listings from %s", source, exc_info=True)
        raise LoadError(f"Could not load listings from {source}: {exc}") from exc

    logger.info("Loaded %d listings from %s", len(df), source)
    return RecordSet(df)


if __name__ == "__main__":
    record_set = load_listings()
    print(f"Loaded {len(record_set)} listings from {DEFAULT_INGESTION_CONFIG.csv_path}")
