from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _env(*names: str, default: str = "") -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


@dataclass(frozen=True)
class DirectoryConfig:
    """
    Runtime configuration for the restaurant directory API.

    ``backend`` selects where restaurant rows come from:
    - ``postgrest``: the hosted database, reached over its REST/RPC interface.
    - ``local``: an in-memory table loaded from ``data_path``.
    """

    supabase_url: str = _env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL")
    supabase_key: str = _env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY")
    backend: str = _env("DIRECTORY_BACKEND", default="postgrest")
    data_path: Path = Path(
        _env(
            "DIRECTORY_DATA_PATH",
            default=str(Path(__file__).resolve().parent / "data" / "restaurants.csv"),
        )
    )
    page_size: int = int(_env("DIRECTORY_PAGE_SIZE", default="10"))
    search_workers: int = int(_env("DIRECTORY_SEARCH_WORKERS", default="2"))


DEFAULT_DIRECTORY_CONFIG = DirectoryConfig()
