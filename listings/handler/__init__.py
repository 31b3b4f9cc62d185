"""
Listing handler.

Responsibilities:
- Hold loaded listings in an immutable, chainable RecordSet.
- Filter by price / bedroom / review bounds and by required amenities.
- Coerce messy numeric and amenities text without raising.
- Expose stats and host rankings for the API and CLI.
"""
