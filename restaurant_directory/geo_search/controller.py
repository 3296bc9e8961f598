"""
Client-side pagination for the geo-radius search panel.

The panel is a small state machine driven by action messages:

    IDLE --SubmitSearch/ChangePage--> SEARCHING --(success | failure)--> IDLE

Only one request is in flight at a time. Actions that arrive while a request
is running are dropped rather than queued.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from ..client import ApiError
from ..display import summarize
from .models import DEFAULT_LIMIT

logger = logging.getLogger(__name__)


class SearchTransport(Protocol):
    def geo_search(self, payload: dict[str, Any]) -> dict[str, Any]: ...


class PanelState(str, Enum):
    idle = "idle"
    searching = "searching"


class Outcome(str, Enum):
    success = "success"
    failed = "failed"


@dataclass(frozen=True)
class SubmitSearch:
    latitude: Any
    longitude: Any
    radius: Any = "3"


@dataclass(frozen=True)
class ChangePage:
    page: int


class SearchPanel:
    def __init__(self, transport: SearchTransport, limit: int = DEFAULT_LIMIT) -> None:
        self._transport = transport
        self.limit = limit
        self.state = PanelState.idle
        self.outcome: Outcome | None = None
        self.results: list[dict[str, Any]] = []
        self.error = ""
        self.current_page = 1
        self.total_pages = 1
        self.total_count = 0
        self._form: SubmitSearch | None = None

    @property
    def can_go_back(self) -> bool:
        return self.state is PanelState.idle and self.current_page > 1

    @property
    def can_go_forward(self) -> bool:
        return self.state is PanelState.idle and self.current_page < self.total_pages

    def dispatch(self, action: SubmitSearch | ChangePage) -> bool:
        """Handle one action. Returns whether a request was started."""
        if self.state is PanelState.searching:
            logger.debug("Ignoring %r while a search is in flight", action)
            return False

        if isinstance(action, SubmitSearch):
            self._form = action
            return self._run(1)

        if self._form is None or not 1 <= action.page <= self.total_pages:
            return False
        return self._run(action.page)

    def _run(self, page: int) -> bool:
        form = self._form
        self.state = PanelState.searching
        self.error = ""
        self.results = []
        try:
            data = self._transport.geo_search({
                "lat": form.latitude,
                "lon": form.longitude,
                "radius": form.radius,
                "page": page,
                "limit": self.limit,
            })
        except ApiError as exc:
            self.error = exc.message
            self.outcome = Outcome.failed
        else:
            self.results = list(data.get("results") or [])
            self.current_page = data.get("currentPage", page)
            self.total_pages = data.get("totalPages", 1)
            self.total_count = data.get("totalCount", 0)
            self.outcome = Outcome.success
        finally:
            self.state = PanelState.idle
        return True

    def rows(self) -> list[dict[str, str]]:
        return [summarize(record) for record in self.results]
