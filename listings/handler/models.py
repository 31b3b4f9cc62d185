from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FilterCriteria(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    min_price: float | None = Field(default=None, description="Lowest nightly price to keep")
    max_price: float | None = Field(default=None, description="Highest nightly price to keep")
    min_bedrooms: float | None = None
    max_bedrooms: float | None = None
    min_review: float | None = Field(default=None, description="Lowest review_scores_rating to keep")
    max_review: float | None = None


class ListingStats(BaseModel):
    count: int
    avg_price_per_bedroom: float


class HostRanking(BaseModel):
    host_name: str
    count: int


class AnalysisResults(BaseModel):
    stats: ListingStats
    host_rankings: list[HostRanking]
    filtered_listings: list[dict[str, Any]] = Field(default_factory=list)


class SearchRequest(BaseModel):
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    amenities: list[str] = Field(
        default_factory=list,
        description='Amenities every listing must have, e.g. ["Wifi", "Kitchen"]',
    )
    include_listings: bool = False


class SearchResponse(BaseModel):
    total_listings: int
    stats: ListingStats
    host_rankings: list[HostRanking]
    listings: list[dict[str, Any]] | None = None
