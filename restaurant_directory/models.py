from __future__ import annotations

import math
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import BackendError


class RestaurantRecord(BaseModel):
    """
    One restaurant row as returned by the database.

    Only ``restaurant_id`` is required; the database owns the rest of the shape,
    so unknown columns are carried through untouched.
    """

    model_config = ConfigDict(extra="allow")

    restaurant_id: int | str
    restaurant_name: str | None = None
    address: str | None = None
    city: str | None = None
    locality: str | None = None
    cuisines: str | None = None
    country_code: int | None = None
    average_cost_for_two: float | None = None
    aggregate_rating: float | None = None
    latitude: float | None = None
    longitude: float | None = None
    description: str | None = None
    distance_km: float | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, float) and math.isnan(value):
            return None
        return value


def parse_records(rows: Iterable[dict[str, Any]] | None) -> list[RestaurantRecord]:
    """Validate raw database rows, failing the whole batch on a malformed row."""
    try:
        return [RestaurantRecord.model_validate(row) for row in rows or []]
    except ValidationError as exc:
        raise BackendError(
            f"Malformed restaurant row ({exc.error_count()} validation errors)"
        ) from exc
