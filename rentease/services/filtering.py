"""
Browse filter engine.
Narrows an in-memory listing collection by location, category and maximum rent.
"""

from typing import List, Sequence

from rentease.models.property import Listing
from rentease.schemas.property import PropertyFilterCriteria

ALL_CATEGORIES = "all"


def filter_properties(listings: Sequence[Listing], criteria: PropertyFilterCriteria) -> List[Listing]:
    """
    Apply browse filters conjunctively, preserving input order.

    - location: case-insensitive substring of the listing location (empty matches all)
    - category: exact match on the listing type, or "all"
    - max_rent: rent at or below the bound; empty or non-numeric means no bound

    Args:
        listings: Listings to filter
        criteria: Filter bar values

    Returns:
        New list with the matching listings
    """
    location = criteria.location.lower()
    category = criteria.category
    max_rent = criteria.max_rent_value

    filtered = []
    for listing in listings:
        if location and location not in listing.location.lower():
            continue
        if category != ALL_CATEGORIES and listing.type.value != category:
            continue
        if max_rent is not None and listing.rent > max_rent:
            continue
        filtered.append(listing)
    return filtered
