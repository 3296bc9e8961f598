from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..models import RestaurantRecord


@dataclass(frozen=True)
class ListingFilters:
    """Raw browse filters as typed by the user."""

    country_name: str = ""
    max_spend: Any = ""
    name: str = ""
    cuisine: str = ""
    description: str = ""
    page: Any = "1"


class ListingPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    data: list[RestaurantRecord] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)
    current_page: int = Field(default=1, ge=1, alias="currentPage")
    total_pages: int = Field(default=1, ge=1, alias="totalPages")


class RestaurantDetail(BaseModel):
    data: RestaurantRecord
