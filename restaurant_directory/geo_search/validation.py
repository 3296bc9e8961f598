from __future__ import annotations

import math
from typing import Any

from ..errors import InvalidCoordinate, InvalidRadius
from .models import DEFAULT_LIMIT, DEFAULT_PAGE, SearchQuery


def parse_number(value: Any) -> float | None:
    """Parse a float from a number or numeric string. Returns ``None`` when it can't."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def coerce_count(value: Any, default: int = 1) -> int:
    """
    Coerce a page number or page size to an int >= 1.

    Missing values take ``default``; anything malformed becomes 1. Fractions
    are truncated toward zero.
    """
    if value is None:
        return max(1, default)
    if isinstance(value, bool):
        return 1
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        parsed = parse_number(value)
        if parsed is None or not math.isfinite(parsed):
            return 1
        number = int(parsed)
    return max(1, number)


def parse_search_query(
    latitude: Any,
    longitude: Any,
    radius: Any,
    page: Any = DEFAULT_PAGE,
    limit: Any = DEFAULT_LIMIT,
) -> SearchQuery:
    lat = parse_number(latitude)
    lon = parse_number(longitude)
    if lat is None or lon is None or not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidCoordinate()

    radius_km = parse_number(radius)
    if radius_km is None or not math.isfinite(radius_km) or radius_km <= 0:
        raise InvalidRadius()

    return SearchQuery(
        latitude=lat,
        longitude=lon,
        radius_km=radius_km,
        page=coerce_count(page, DEFAULT_PAGE),
        limit=coerce_count(limit, DEFAULT_LIMIT),
    )
