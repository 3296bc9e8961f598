from __future__ import annotations

import logging
from functools import lru_cache

from ..config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from .base import ListingQuery, RestaurantBackend
from .data_store import DataFrameBackend
from .postgrest import PostgrestBackend

logger = logging.getLogger(__name__)

__all__ = [
    "DataFrameBackend",
    "ListingQuery",
    "PostgrestBackend",
    "RestaurantBackend",
    "build_backend",
    "get_backend",
]


@lru_cache(maxsize=4)
def build_backend(config: DirectoryConfig) -> RestaurantBackend:
    """Create the backend selected by ``config.backend`` (cached per config)."""
    if config.backend == "local":
        logger.info("Using local restaurant table at %s", config.data_path)
        return DataFrameBackend.from_csv(config.data_path)
    if config.backend != "postgrest":
        logger.warning("Unknown DIRECTORY_BACKEND %r, falling back to postgrest", config.backend)
    return PostgrestBackend(config.supabase_url, config.supabase_key)


def get_backend() -> RestaurantBackend:
    return build_backend(DEFAULT_DIRECTORY_CONFIG)
