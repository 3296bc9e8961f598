"""In-memory restaurant table for local runs, backed by a pandas DataFrame."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from .base import SUMMARY_COLUMNS, ListingQuery, RestaurantBackend

EARTH_RADIUS_KM = 6371.0

_TEXT_COLUMNS = ["restaurant_name", "cuisines", "description"]


def haversine_km(
    latitude: float,
    longitude: float,
    latitudes: np.ndarray,
    longitudes: np.ndarray,
) -> np.ndarray:
    """Great-circle distance in km from one point to many."""
    lat1 = np.radians(latitude)
    lat2 = np.radians(latitudes)
    dlat = lat2 - lat1
    dlon = np.radians(longitudes) - np.radians(longitude)
    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()

    for col in ["latitude", "longitude", "average_cost_for_two", "country_code"]:
        if col not in df.columns:
            df[col] = np.nan
        df[col] = pd.to_numeric(df[col], errors="coerce")

    # Lowercase searchable text for case-insensitive matching
    for col in _TEXT_COLUMNS:
        if col not in df.columns:
            df[col] = None
        df[f"_{col}_lower"] = df[col].fillna("").astype(str).str.lower()

    df["_restaurant_id_str"] = df["restaurant_id"].astype(str)
    return df.reset_index(drop=True)


def _to_rows(frame: pd.DataFrame, columns: list[str] | None = None) -> list[dict[str, Any]]:
    public = [c for c in frame.columns if not c.startswith("_")]
    if columns is not None:
        public = [c for c in columns if c in frame.columns]
    out = frame[public].astype(object)
    out = out.where(out.notna(), None)
    return out.to_dict(orient="records")


class DataFrameBackend(RestaurantBackend):
    """
    Answers the same queries as the hosted database from a local table.

    Radius results are ordered by distance, ties broken by ``restaurant_id``.
    """

    def __init__(self, df: pd.DataFrame) -> None:
        self._df = _prepare(df)

    @classmethod
    def from_csv(cls, path: Path) -> "DataFrameBackend":
        return cls(pd.read_csv(path))

    def _within_radius(self, longitude: float, latitude: float, radius_km: float) -> pd.DataFrame:
        df = self._df
        distances = haversine_km(
            latitude, longitude, df["latitude"].to_numpy(), df["longitude"].to_numpy()
        )
        mask = distances <= radius_km  # NaN coordinates never match
        matched = df.loc[mask].copy()
        matched["distance_km"] = distances[mask]
        return matched.sort_values(["distance_km", "restaurant_id"], kind="mergesort")

    def restaurants_within_radius(
        self,
        *,
        longitude: float,
        latitude: float,
        radius_km: float,
        page: int,
        limit: int,
    ) -> list[dict[str, Any]]:
        offset = (page - 1) * limit
        matched = self._within_radius(longitude, latitude, radius_km)
        return _to_rows(matched.iloc[offset : offset + limit])

    def restaurants_within_radius_count(
        self,
        *,
        longitude: float,
        latitude: float,
        radius_km: float,
    ) -> int | None:
        return len(self._within_radius(longitude, latitude, radius_km))

    def list_restaurants(self, query: ListingQuery) -> tuple[list[dict[str, Any]], int]:
        df = self._df
        mask = pd.Series(True, index=df.index)

        if query.country_codes:
            mask = mask & df["country_code"].isin(query.country_codes)
        if query.max_spend is not None:
            mask = mask & (df["average_cost_for_two"] <= query.max_spend)

        for col, term in (
            ("restaurant_name", query.name),
            ("cuisines", query.cuisine),
            ("description", query.description),
        ):
            if term:
                mask = mask & df[f"_{col}_lower"].str.contains(term.lower(), regex=False)

        matched = df.loc[mask]
        page = matched.iloc[query.offset : query.offset + query.limit]
        return _to_rows(page), len(matched)

    def get_restaurant(self, restaurant_id: str) -> dict[str, Any] | None:
        df = self._df
        matched = df.loc[df["_restaurant_id_str"] == str(restaurant_id).strip()]
        if matched.empty:
            return None
        return _to_rows(matched.head(1))[0]

    def restaurant_summaries(self) -> list[dict[str, Any]]:
        return _to_rows(self._df, SUMMARY_COLUMNS)
