from __future__ import annotations

from collections import Counter

import pandas as pd

from ..handler.coercion import column, parse_number, parse_price
from ..handler.models import HostRanking, ListingStats

UNKNOWN_HOST = "Unknown"


def _is_blank(value) -> bool:
    if isinstance(value, str):
        return value == ""
    return value is None or (pd.api.types.is_scalar(value) and pd.isna(value))


def compute_stats(df: pd.DataFrame) -> ListingStats:
    """
    Count the listings and average the price per bedroom.

    Unparseable prices count as 0. Unparseable or zero bedroom counts are
    treated as a single bedroom so the ratio is always defined.
    """
    count = len(df)

    prices = column(df, "price").map(parse_price).astype("float64").fillna(0.0)
    bedrooms = column(df, "bedrooms").map(parse_number).astype("float64")
    bedrooms = bedrooms.where(bedrooms.notna() & (bedrooms != 0), 1.0)

    total_price = float(prices.sum())
    total_bedrooms = float(bedrooms.sum())
    avg = total_price / total_bedrooms if total_bedrooms > 0 else 0.0

    return ListingStats(count=count, avg_price_per_bedroom=avg)


def compute_host_rankings(df: pd.DataFrame) -> list[HostRanking]:
    """
    Count listings per host, most listings first.

    Hosts with equal counts keep the order in which they first appear.
    """
    host_counter: Counter[str] = Counter()
    for name in column(df, "host_name"):
        if _is_blank(name):
            host_counter[UNKNOWN_HOST] += 1
        else:
            host_counter[str(name)] += 1

    # most_common() is a stable sort, ties stay in first-seen order
    return [HostRanking(host_name=n, count=c) for n, c in host_counter.most_common()]
