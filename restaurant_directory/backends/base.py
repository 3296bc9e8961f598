from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

SUMMARY_COLUMNS = [
    "restaurant_id",
    "restaurant_name",
    "address",
    "cuisines",
    "city",
    "aggregate_rating",
]


@dataclass(frozen=True)
class ListingQuery:
    """Backend-level filters for the browse listing. Empty filters are not applied."""

    offset: int = 0
    limit: int = 10
    country_codes: list[int] = field(default_factory=list)
    max_spend: float | None = None
    name: str = ""
    cuisine: str = ""
    description: str = ""


class RestaurantBackend(ABC):
    """
    The restaurant database as seen by the directory.

    Implementations raise ``BackendError`` with the database's own message when
    a query fails. Rows are returned as plain dicts; callers validate them.
    """

    @abstractmethod
    def restaurants_within_radius(
        self,
        *,
        longitude: float,
        latitude: float,
        radius_km: float,
        page: int,
        limit: int,
    ) -> list[dict[str, Any]]:
        """One page of restaurants within ``radius_km`` of the point, nearest first."""

    @abstractmethod
    def restaurants_within_radius_count(
        self,
        *,
        longitude: float,
        latitude: float,
        radius_km: float,
    ) -> int | None:
        """Total restaurants within ``radius_km`` of the point."""

    @abstractmethod
    def list_restaurants(self, query: ListingQuery) -> tuple[list[dict[str, Any]], int]:
        """Rows for the requested range plus the exact count of all matching rows."""

    @abstractmethod
    def get_restaurant(self, restaurant_id: str) -> dict[str, Any] | None:
        """A single row by id, or ``None`` when no row matches."""

    @abstractmethod
    def restaurant_summaries(self) -> list[dict[str, Any]]:
        """Every restaurant, restricted to ``SUMMARY_COLUMNS``."""
