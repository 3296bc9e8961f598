from __future__ import annotations

import math
from typing import Sequence

from ..models import RestaurantRecord
from .models import PagedResult, SearchQuery


def total_pages(total_count: int, limit: int) -> int:
    """Number of pages for ``total_count`` rows. Never less than 1, even with no rows."""
    return max(1, math.ceil(total_count / limit))


def assemble_page(
    records: Sequence[RestaurantRecord] | None,
    total_count: int | None,
    query: SearchQuery,
) -> PagedResult:
    count = max(0, total_count or 0)
    return PagedResult(
        results=list(records or []),
        total_count=count,
        current_page=query.page,
        total_pages=total_pages(count, query.limit),
    )
