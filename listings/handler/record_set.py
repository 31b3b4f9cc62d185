from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

import pandas as pd

from ..analytics.aggregator import compute_host_rankings, compute_stats
from .amenities import has_amenities
from .coercion import column, parse_number, parse_price
from .models import FilterCriteria, HostRanking, ListingStats

logger = logging.getLogger(__name__)


class RecordSet:
    """
    Immutable, ordered collection of listing records.

    Every filter returns a new RecordSet over a subsequence of the current
    rows, so calls can be chained. Stats and rankings are read-only queries.
    """

    __slots__ = ("_df",)

    def __init__(self, records: pd.DataFrame | Iterable[Mapping[str, Any]] | None = None) -> None:
        if isinstance(records, pd.DataFrame):
            df = records.copy(deep=True)
        else:
            df = pd.DataFrame.from_records([dict(r) for r in records or []])
        object.__setattr__(self, "_df", df.reset_index(drop=True))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RecordSet is immutable")

    def __len__(self) -> int:
        return len(self._df)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.records)

    def __repr__(self) -> str:
        return f"RecordSet({len(self)} records)"

    @property
    def records(self) -> list[dict[str, Any]]:
        """Copies of the current records, missing cells as None."""
        cleaned = self._df.astype(object).where(self._df.notna(), None)
        return cleaned.to_dict(orient="records")

    def to_frame(self) -> pd.DataFrame:
        return self._df.copy(deep=True)

    # --- Filters ---

    def filter_by_range(self, criteria: FilterCriteria | Mapping[str, Any] | None = None) -> RecordSet:
        """
        Keep records whose price, bedrooms and review score fall inside the bounds.

        Records where any of the three values is not a number are always
        dropped, even when no bound applies to that field.
        """
        if criteria is None:
            criteria = FilterCriteria()
        elif not isinstance(criteria, FilterCriteria):
            criteria = FilterCriteria.model_validate(dict(criteria))

        prices = column(self._df, "price").map(parse_price).astype("float64")
        bedrooms = column(self._df, "bedrooms").map(parse_number).astype("float64")
        reviews = column(self._df, "review_scores_rating").map(parse_number).astype("float64")

        mask = prices.notna() & bedrooms.notna() & reviews.notna()

        bounds = [
            (prices, criteria.min_price, criteria.max_price),
            (bedrooms, criteria.min_bedrooms, criteria.max_bedrooms),
            (reviews, criteria.min_review, criteria.max_review),
        ]
        for values, lower, upper in bounds:
            if lower is not None:
                mask = mask & (values >= lower)
            if upper is not None:
                mask = mask & (values <= upper)

        filtered = RecordSet(self._df.loc[mask.astype(bool)])
        logger.debug("Range filter kept %d of %d records", len(filtered), len(self))
        return filtered

    def filter_by_amenities(self, amenities: Iterable[str]) -> RecordSet:
        """Keep records that list every one of the required amenities."""
        required = list(amenities)
        if not required:
            return RecordSet(self._df)

        mask = column(self._df, "amenities").map(lambda raw: has_amenities(raw, required))
        filtered = RecordSet(self._df.loc[mask.astype(bool)])
        logger.debug("Amenity filter %s kept %d of %d records", required, len(filtered), len(self))
        return filtered

    # --- Aggregations ---

    def compute_stats(self) -> ListingStats:
        return compute_stats(self._df)

    def compute_host_rankings(self) -> list[HostRanking]:
        return compute_host_rankings(self._df)
