"""
Image-label search.

An image classifier (not part of this package) produces ranked labels. Labels
that name a known cuisine become cuisine filters over the restaurant list.
"""
from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from ..backends.base import RestaurantBackend
from ..geo_search.assembler import total_pages
from ..geo_search.validation import coerce_count
from ..models import RestaurantRecord, parse_records
from .cuisines import CUISINES
from .models import ImageSearchResult, Prediction

MAX_FALLBACK_LABELS = 5


class LabelClassifier(Protocol):
    def classify(self, image: bytes) -> Sequence[tuple[str, float]]: ...


def classify_image(classifier: LabelClassifier, image: bytes) -> list[Prediction]:
    return [
        Prediction(label=label, confidence=confidence)
        for label, confidence in classifier.classify(image)
    ]


def primary_label(class_name: str) -> str:
    # "ice cream, icecream" -> "ice cream"
    return class_name.split(", ")[0].strip()


def match_cuisines(labels: Iterable[str], vocabulary: Sequence[str] = CUISINES) -> list[str]:
    """Labels that name a cuisine, spelled as in ``vocabulary``, in label order."""
    by_lower = {cuisine.lower(): cuisine for cuisine in vocabulary}
    matched: list[str] = []
    for label in labels:
        cuisine = by_lower.get(label.lower())
        if cuisine and cuisine not in matched:
            matched.append(cuisine)
    return matched


def serves_any(record: RestaurantRecord, cuisines_lower: set[str]) -> bool:
    if not record.cuisines:
        return False
    served = {c.strip().lower() for c in record.cuisines.split(",")}
    return bool(served & cuisines_lower)


def image_search(
    backend: RestaurantBackend,
    predictions: Sequence[Prediction],
    page: object = 1,
    limit: object = 10,
    vocabulary: Sequence[str] = CUISINES,
) -> ImageSearchResult:
    page_num = coerce_count(page, 1)
    page_size = coerce_count(limit, 10)

    detected = [primary_label(p.label) for p in predictions if p.label.strip()]
    matched = match_cuisines(detected, vocabulary)
    labels = matched if matched else detected[:MAX_FALLBACK_LABELS]

    if not matched:
        return ImageSearchResult(labels=labels, current_page=page_num)

    wanted = {c.lower() for c in matched}
    restaurants = [
        r for r in parse_records(backend.restaurant_summaries()) if serves_any(r, wanted)
    ]
    start = (page_num - 1) * page_size
    return ImageSearchResult(
        labels=labels,
        matched_cuisines=matched,
        results=restaurants[start : start + page_size],
        total_count=len(restaurants),
        current_page=page_num,
        total_pages=total_pages(len(restaurants), page_size),
    )
