from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..models import RestaurantRecord

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class SearchQuery:
    latitude: float
    longitude: float
    radius_km: float
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class GeoSearchRequest(BaseModel):
    """Raw search trigger. Values may arrive as strings straight from form inputs."""

    latitude: Any = Field(default=None, validation_alias=AliasChoices("lat", "latitude"))
    longitude: Any = Field(
        default=None, validation_alias=AliasChoices("lon", "lng", "longitude")
    )
    radius: Any = Field(
        default=None, validation_alias=AliasChoices("radius", "radiusKm", "radius_km")
    )
    page: Any = DEFAULT_PAGE
    limit: Any = DEFAULT_LIMIT


class PagedResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    results: list[RestaurantRecord] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0, alias="totalCount")
    current_page: int = Field(default=1, ge=1, alias="currentPage")
    total_pages: int = Field(default=1, ge=1, alias="totalPages")
