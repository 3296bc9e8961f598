from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .backends import RestaurantBackend, get_backend
from .config import DEFAULT_DIRECTORY_CONFIG
from .errors import BackendError, DirectoryError, MethodNotAllowed
from .geo_search.gateway import GeoSearchGateway
from .geo_search.models import GeoSearchRequest, PagedResult
from .geo_search.validation import parse_search_query
from .listing.countries import COUNTRY_NAMES
from .listing.models import ListingFilters, ListingPage, RestaurantDetail
from .listing.service import get_restaurant, list_restaurants
from .vision.cuisines import CUISINES
from .vision.matching import image_search
from .vision.models import ImageSearchRequest, ImageSearchResult

logger = logging.getLogger(__name__)

app = FastAPI(title="Restaurant Directory API", version="1.0.0")

_search_executor = ThreadPoolExecutor(max_workers=DEFAULT_DIRECTORY_CONFIG.search_workers)


# ── Error envelope ───────────────────────────────────────────────────────


@app.exception_handler(DirectoryError)
async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = MethodNotAllowed().message if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Malformed request."})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Server error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "countries": sorted(COUNTRY_NAMES.values()),
        "cuisines": list(CUISINES),
    }


# ── Search endpoints ─────────────────────────────────────────────────────


@app.post("/api/geo-search", response_model=PagedResult)
def geo_search(
    body: GeoSearchRequest,
    backend: RestaurantBackend = Depends(get_backend),
) -> PagedResult:
    query = parse_search_query(
        body.latitude, body.longitude, body.radius, body.page, body.limit,
    )
    return GeoSearchGateway(backend, executor=_search_executor).search(query)


@app.get("/api/restaurants", response_model=ListingPage)
def restaurants_list(
    country_name: str = Query(default="", alias="countryName"),
    max_spend: str = Query(default="", alias="maxSpend"),
    name_filter: str = Query(default="", alias="nameFilter"),
    cuisine_filter: str = Query(default="", alias="cuisineFilter"),
    description_filter: str = Query(default="", alias="descriptionFilter"),
    page: str = Query(default="1"),
    backend: RestaurantBackend = Depends(get_backend),
):
    filters = ListingFilters(
        country_name=country_name,
        max_spend=max_spend,
        name=name_filter,
        cuisine=cuisine_filter,
        description=description_filter,
        page=page,
    )
    try:
        return list_restaurants(
            backend, filters, COUNTRY_NAMES, DEFAULT_DIRECTORY_CONFIG.page_size,
        )
    except BackendError as exc:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.message},
        )


@app.get("/api/restaurants/{restaurant_id}", response_model=RestaurantDetail)
def restaurant_detail(
    restaurant_id: str,
    backend: RestaurantBackend = Depends(get_backend),
) -> RestaurantDetail:
    return RestaurantDetail(data=get_restaurant(backend, restaurant_id))


@app.post("/api/image-search", response_model=ImageSearchResult)
def image_search_endpoint(
    body: ImageSearchRequest,
    backend: RestaurantBackend = Depends(get_backend),
) -> ImageSearchResult:
    return image_search(backend, body.predictions, body.page, body.limit)
