from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ..models import RestaurantRecord


class Prediction(BaseModel):
    """One classifier output. Accepts MobileNet-style ``className``/``probability`` keys."""

    label: str = Field(..., validation_alias=AliasChoices("label", "className"))
    confidence: float = Field(
        default=0.0, validation_alias=AliasChoices("confidence", "probability")
    )


class ImageSearchRequest(BaseModel):
    predictions: list[Prediction] = Field(default_factory=list)
    page: Any = 1
    limit: Any = 10


class ImageSearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    labels: list[str] = Field(default_factory=list)
    matched_cuisines: list[str] = Field(default_factory=list, alias="matchedCuisines")
    results: list[RestaurantRecord] = Field(default_factory=list)
    total_count: int = Field(default=0, ge=0, alias="totalCount")
    current_page: int = Field(default=1, ge=1, alias="currentPage")
    total_pages: int = Field(default=1, ge=1, alias="totalPages")
