"""
Interactive console session over a listings CSV.

Usage:
    python -m listings.cli [CSV_PATH]
"""
from __future__ import annotations

import json
import logging
import math
import os
import sys
from pathlib import Path

from .data_ingestion.config import DEFAULT_INGESTION_CONFIG
from .data_ingestion.loader import load_listings
from .errors import ListingsError
from .export.exporter import export_results
from .handler.models import AnalysisResults, FilterCriteria, HostRanking, ListingStats
from .handler.record_set import RecordSet

logger = logging.getLogger(__name__)

_BOUND_PROMPTS: list[tuple[str, str]] = [
    ("min_price", "Enter minimum price (press Enter to skip): "),
    ("max_price", "Enter maximum price (press Enter to skip): "),
    ("min_bedrooms", "Enter minimum bedrooms (press Enter to skip): "),
    ("max_bedrooms", "Enter maximum bedrooms (press Enter to skip): "),
    ("min_review", "Enter minimum review score (press Enter to skip): "),
    ("max_review", "Enter maximum review score (press Enter to skip): "),
]


def _prompt(question: str) -> str:
    try:
        return input(question).strip()
    except EOFError:
        return ""


def _confirm(question: str) -> bool:
    return _prompt(question).lower() in ("yes", "y")


def _ask_criteria() -> FilterCriteria:
    bounds: dict[str, float] = {}
    for field_name, question in _BOUND_PROMPTS:
        answer = _prompt(question)
        if not answer:
            continue
        try:
            value = float(answer)
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            print(f"'{answer}' is not a number. Skipping this bound.")
            continue
        bounds[field_name] = value
    return FilterCriteria(**bounds)


def _print_summary(stats: ListingStats, rankings: list[HostRanking]) -> None:
    print("\nStatistics:")
    print(f"- Total listings: {stats.count}")
    print(f"- Average price per bedroom: ${stats.avg_price_per_bedroom:.2f}")

    print("\nHost rankings:")
    for index, host in enumerate(rankings, start=1):
        listing_word = "listing" if host.count == 1 else "listings"
        print(f"{index}. {host.host_name}: {host.count} {listing_word}")


def run_session(csv_path: Path) -> int:
    record_set: RecordSet = load_listings(csv_path)
    print("Data loaded successfully.")

    record_set = record_set.filter_by_range(_ask_criteria())
    print(f"\nNumber of listings after filtering: {len(record_set)}")
    _print_summary(record_set.compute_stats(), record_set.compute_host_rankings())

    if _confirm("\nWould you like to filter by amenities? (yes/no): "):
        answer = _prompt("Enter required amenities (comma separated): ")
        amenities = [item.strip() for item in answer.split(",") if item.strip()]
        if amenities:
            record_set = record_set.filter_by_amenities(amenities)
            print(f"\nNumber of listings after filtering by amenities: {len(record_set)}")
        else:
            print("No valid amenities entered. Skipping this filter.")

    if _confirm("\nShow all filtered listing details? (yes/no): "):
        print("\nDetails")
        for index, listing in enumerate(record_set.records, start=1):
            print(f"{index}. {json.dumps(listing, ensure_ascii=False)}")

    if _confirm("\nWould you like to export the results to a file? (yes/no): "):
        export_path = _prompt("Enter the export file path: ")
        results = AnalysisResults(
            stats=record_set.compute_stats(),
            host_rankings=record_set.compute_host_rankings(),
            filtered_listings=record_set.records,
        )
        export_results(results, export_path)
        print(f"Results exported to {export_path}")

    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=os.getenv("LISTINGS_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = sys.argv[1:] if argv is None else argv

    if args:
        csv_path = Path(args[0])
    else:
        csv_path = DEFAULT_INGESTION_CONFIG.csv_path
        print(f'CSV file path not provided. Using "{csv_path}".')

    try:
        return run_session(csv_path)
    except ListingsError as exc:
        logger.debug("Session aborted", exc_info=True)
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
