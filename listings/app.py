from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from .errors import LoadError
from .handler.amenities import normalize_amenities
from .handler.data_store import get_record_set
from .handler.models import SearchRequest, SearchResponse
from .handler.record_set import RecordSet

logger = logging.getLogger(__name__)

app = FastAPI(title="Listings Analyzer API", version="1.0.0")


def _listings() -> RecordSet:
    try:
        return get_record_set()
    except LoadError as exc:
        logger.warning("Listings unavailable", exc_info=True)
        raise HTTPException(status_code=503, detail=str(exc)) from exc


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    record_set = _listings()
    amenities: set[str] = set()
    for record in record_set:
        for amenity in normalize_amenities(record.get("amenities")):
            if isinstance(amenity, str) and amenity:
                amenities.add(amenity)
    return {"total_listings": len(record_set), "amenities": sorted(amenities)}


# ── Search ───────────────────────────────────────────────────────────────


@app.post("/listings/search", response_model=SearchResponse)
def search(body: SearchRequest) -> SearchResponse:
    filtered = (
        _listings()
        .filter_by_range(body.criteria)
        .filter_by_amenities(body.amenities)
    )

    return SearchResponse(
        total_listings=len(filtered),
        stats=filtered.compute_stats(),
        host_rankings=filtered.compute_host_rankings(),
        listings=filtered.records if body.include_listings else None,
    )
