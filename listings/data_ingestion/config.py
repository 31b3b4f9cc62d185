from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for loading the listings CSV.
    """

    csv_path: Path = Path(os.getenv("LISTINGS_CSV_PATH", "listings.csv"))
    encoding: str = "utf-8"
    strip_whitespace: bool = True


DEFAULT_INGESTION_CONFIG = IngestionConfig()
