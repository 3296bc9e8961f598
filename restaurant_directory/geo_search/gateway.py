from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Executor, Future, ThreadPoolExecutor, wait

from ..backends.base import RestaurantBackend
from ..errors import DirectoryError, SearchBackendError
from ..models import parse_records
from .assembler import assemble_page
from .models import PagedResult, SearchQuery

logger = logging.getLogger(__name__)


def _as_search_error(exc: BaseException) -> SearchBackendError:
    if isinstance(exc, DirectoryError):
        return SearchBackendError(exc.message)
    return SearchBackendError(str(exc) or exc.__class__.__name__)


class GeoSearchGateway:
    """
    Runs the page query and the count query for one geo-radius search.

    Both queries get the same (latitude, longitude, radius) and are submitted
    together; the result is assembled only after both have finished. The first
    failure fails the whole search. Nothing is retried or cancelled, and the
    two queries are not read in one transaction, so a row written between them
    can make the count disagree with the page.
    """

    def __init__(
        self,
        backend: RestaurantBackend,
        executor: Executor | None = None,
    ) -> None:
        self._backend = backend
        self._executor = executor or ThreadPoolExecutor(max_workers=2)

    def search(self, query: SearchQuery) -> PagedResult:
        page_future: Future = self._executor.submit(
            self._backend.restaurants_within_radius,
            longitude=query.longitude,
            latitude=query.latitude,
            radius_km=query.radius_km,
            page=query.page,
            limit=query.limit,
        )
        count_future: Future = self._executor.submit(
            self._backend.restaurants_within_radius_count,
            longitude=query.longitude,
            latitude=query.latitude,
            radius_km=query.radius_km,
        )

        done, _ = wait([page_future, count_future], return_when=FIRST_EXCEPTION)
        for name, future in (("page", page_future), ("count", count_future)):
            if future in done and future.exception() is not None:
                exc = future.exception()
                logger.error("Geo search %s query failed: %s", name, exc)
                raise _as_search_error(exc) from exc

        try:
            records = parse_records(page_future.result())
        except DirectoryError as exc:
            logger.error("Geo search page query returned bad rows: %s", exc.message)
            raise _as_search_error(exc) from exc

        return assemble_page(records, count_future.result(), query)
