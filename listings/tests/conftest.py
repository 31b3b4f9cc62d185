from __future__ import annotations

from pathlib import Path

import pytest

from listings.handler.record_set import RecordSet

SAMPLE_LISTINGS = [
    {
        "id": "1",
        "host_name": "Alice",
        "price": "$120.00",
        "bedrooms": "2",
        "review_scores_rating": "4.8",
        "amenities": '["Wifi", "Kitchen", "Pool"]',
    },
    {
        "id": "2",
        "host_name": "Bob",
        "price": "$1,200.00",
        "bedrooms": "4",
        "review_scores_rating": "4.9",
        "amenities": "Wifi, Kitchen",
    },
    {
        "id": "3",
        "host_name": "Alice",
        "price": "$80.00",
        "bedrooms": "1",
        "review_scores_rating": "3.9",
        "amenities": '["Wifi"]',
    },
    {
        "id": "4",
        "host_name": "",
        "price": "$60.00",
        "bedrooms": "N/A",
        "review_scores_rating": "4.0",
        "amenities": "",
    },
    {
        "id": "5",
        "host_name": "Carol",
        "price": "$300.00",
        "bedrooms": "3",
        "review_scores_rating": "",
        "amenities": '["Pool", "Wifi"]',
    },
]

SAMPLE_CSV = """\
id,host_name,price,bedrooms,review_scores_rating,amenities
1,Alice,$120.00,2,4.8,"[""Wifi"", ""Kitchen"", ""Pool""]"
2,Bob,"$1,200.00",4,4.9,"Wifi, Kitchen"
3,Alice,$80.00,1,3.9,"[""Wifi""]"
4,,$60.00,N/A,4.0,
5,Carol,$300.00,3,,"[""Pool"", ""Wifi""]"
"""


@pytest.fixture
def sample_records() -> list[dict[str, str]]:
    return [dict(record) for record in SAMPLE_LISTINGS]


@pytest.fixture
def record_set(sample_records) -> RecordSet:
    return RecordSet(sample_records)


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "listings.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
