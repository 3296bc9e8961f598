"""Client for the hosted restaurant database through its PostgREST interface."""
from __future__ import annotations

import logging
from typing import Any

import requests

from ..errors import BackendError
from .base import SUMMARY_COLUMNS, ListingQuery, RestaurantBackend

logger = logging.getLogger(__name__)

RADIUS_RPC = "restaurants_within_radius"
RADIUS_COUNT_RPC = "restaurants_within_radius_count"
TABLE = "restaurants"


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.text or f"HTTP {response.status_code}"


def _count_from_rpc(payload: Any) -> int | None:
    """The count RPC answers ``[{"count": n}]``; a bare number is accepted too."""
    if isinstance(payload, list):
        payload = payload[0] if payload else None
    if isinstance(payload, dict):
        payload = payload.get("count")
    if payload is None:
        return None
    return int(payload)


def _count_from_content_range(header: str | None) -> int | None:
    # e.g. "0-9/9551", "*/0"
    if not header or "/" not in header:
        return None
    total = header.rsplit("/", 1)[1]
    return int(total) if total.isdigit() else None


class PostgrestBackend(RestaurantBackend):
    def __init__(
        self,
        url: str,
        api_key: str,
        session: requests.Session | None = None,
    ) -> None:
        if not url:
            logger.warning("SUPABASE_URL is not configured; database queries will fail.")
        self._base_url = f"{url.rstrip('/')}/rest/v1"
        self._session = session or requests.Session()
        self._headers = {"apikey": api_key, "Authorization": f"Bearer {api_key}"}

    def _request(self, method: str, path: str, what: str, **kwargs: Any) -> requests.Response:
        headers = {**self._headers, **kwargs.pop("headers", {})}
        try:
            response = self._session.request(
                method, f"{self._base_url}/{path}", headers=headers, **kwargs
            )
        except requests.RequestException as exc:
            logger.error("%s request failed: %s", what, exc)
            raise BackendError(str(exc)) from exc

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error("%s error: %s", what, message)
            raise BackendError(message)
        return response

    def _json(self, response: requests.Response, what: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s returned a non-JSON body", what)
            raise BackendError(f"{what} returned an invalid response") from exc

    def _rpc(self, name: str, params: dict[str, Any]) -> Any:
        response = self._request("POST", f"rpc/{name}", f"RPC {name}", json=params)
        return self._json(response, f"RPC {name}")

    def restaurants_within_radius(
        self,
        *,
        longitude: float,
        latitude: float,
        radius_km: float,
        page: int,
        limit: int,
    ) -> list[dict[str, Any]]:
        rows = self._rpc(
            RADIUS_RPC,
            {
                "_lon": longitude,
                "_lat": latitude,
                "_radius_km": radius_km,
                "_page": page,
                "_limit": limit,
            },
        )
        return rows or []

    def restaurants_within_radius_count(
        self,
        *,
        longitude: float,
        latitude: float,
        radius_km: float,
    ) -> int | None:
        payload = self._rpc(
            RADIUS_COUNT_RPC,
            {"_lon": longitude, "_lat": latitude, "_radius_km": radius_km},
        )
        try:
            return _count_from_rpc(payload)
        except (TypeError, ValueError) as exc:
            raise BackendError(f"RPC {RADIUS_COUNT_RPC} returned an invalid count") from exc

    def list_restaurants(self, query: ListingQuery) -> tuple[list[dict[str, Any]], int]:
        params: list[tuple[str, str]] = [("select", "*")]
        if query.country_codes:
            codes = ",".join(str(code) for code in query.country_codes)
            params.append(("country_code", f"in.({codes})"))
        if query.max_spend is not None:
            params.append(("average_cost_for_two", f"lte.{query.max_spend}"))
        if query.name:
            params.append(("restaurant_name", f"ilike.*{query.name}*"))
        if query.cuisine:
            params.append(("cuisines", f"ilike.*{query.cuisine}*"))
        if query.description:
            params.append(("description", f"ilike.*{query.description}*"))

        last = query.offset + query.limit - 1
        response = self._request(
            "GET",
            TABLE,
            "Listing query",
            params=params,
            headers={
                "Prefer": "count=exact",
                "Range-Unit": "items",
                "Range": f"{query.offset}-{last}",
            },
        )
        rows = self._json(response, "Listing query") or []
        count = _count_from_content_range(response.headers.get("Content-Range"))
        return rows, count if count is not None else len(rows)

    def get_restaurant(self, restaurant_id: str) -> dict[str, Any] | None:
        response = self._request(
            "GET",
            TABLE,
            "Restaurant lookup",
            params={"select": "*", "restaurant_id": f"eq.{restaurant_id}", "limit": "1"},
        )
        rows = self._json(response, "Restaurant lookup") or []
        return rows[0] if rows else None

    def restaurant_summaries(self) -> list[dict[str, Any]]:
        response = self._request(
            "GET",
            TABLE,
            "Restaurant summaries",
            params={"select": ",".join(SUMMARY_COLUMNS)},
        )
        return self._json(response, "Restaurant summaries") or []
