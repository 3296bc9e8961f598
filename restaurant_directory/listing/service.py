from __future__ import annotations

import math
from typing import Mapping

from ..backends.base import ListingQuery, RestaurantBackend
from ..errors import InvalidInput, NotFound
from ..geo_search.assembler import total_pages
from ..geo_search.validation import coerce_count, parse_number
from ..models import RestaurantRecord, parse_records
from .countries import COUNTRY_NAMES, codes_for_prefix
from .models import ListingFilters, ListingPage



def build_listing_query(
    filters: ListingFilters,
    countries: Mapping[int, str] = COUNTRY_NAMES,
    page_size: int = 10,
) -> tuple[ListingQuery, int]:
    """Translate user filters into a backend query. Returns the query and the page number."""
    page = coerce_count(filters.page)

    max_spend = None
    if filters.max_spend not in (None, ""):
        max_spend = parse_number(filters.max_spend)
        if max_spend is None or not math.isfinite(max_spend):
            raise InvalidInput("maxSpend must be a number.")

    # An unknown country name leaves the listing unfiltered
    country_codes = codes_for_prefix(filters.country_name, countries) if filters.country_name else []

    query = ListingQuery(
        offset=(page - 1) * page_size,
        limit=page_size,
        country_codes=country_codes,
        max_spend=max_spend,
        name=filters.name.strip(),
        cuisine=filters.cuisine.strip(),
        description=filters.description.strip(),
    )
    return query, page


def list_restaurants(
    backend: RestaurantBackend,
    filters: ListingFilters,
    countries: Mapping[int, str] = COUNTRY_NAMES,
    page_size: int = 10,
) -> ListingPage:
    query, page = build_listing_query(filters, countries, page_size)
    rows, count = backend.list_restaurants(query)
    return ListingPage(
        data=parse_records(rows),
        count=count,
        current_page=page,
        total_pages=total_pages(count, page_size),
    )


def get_restaurant(backend: RestaurantBackend, restaurant_id: str) -> RestaurantRecord:
    if not restaurant_id or not restaurant_id.strip():
        raise InvalidInput("Restaurant ID is required")

    row = backend.get_restaurant(restaurant_id.strip())
    if row is None:
        raise NotFound("Restaurant not found")
    return parse_records([row])[0]
