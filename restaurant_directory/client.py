"""HTTP client for the directory API, used by the search panel."""
from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Failed to perform search"


class ApiError(Exception):
    """The API answered with an error envelope, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DirectoryClient:
    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self._session.post(f"{self._base_url}{path}", json=payload)
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Fetch error: %s", exc)
            raise ApiError(FAILED_MESSAGE) from exc

        if response.status_code >= 400:
            message = data.get("error") if isinstance(data, dict) else None
            raise ApiError(message or "An error occurred", response.status_code)
        return data

    def geo_search(self, payload: dict[str, Any]) -> dict[str, Any]:
        return self._post("/api/geo-search", payload)
