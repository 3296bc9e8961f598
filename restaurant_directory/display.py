from __future__ import annotations

import unicodedata
from typing import Any, Mapping

NOT_AVAILABLE = "N/A"


def normalize_text(text: Any) -> str:
    """
    Prepare a database string for display.

    Mis-decoded characters (U+FFFD) in this dataset are almost always "í".
    Text that still can't be encoded (lone surrogates left by a bad decode)
    falls back to ASCII with "?" in place of every non-ASCII character.
    """
    if text is None or text == "":
        return NOT_AVAILABLE
    normalized = unicodedata.normalize("NFC", str(text)).replace("\ufffd", "í")
    try:
        normalized.encode("utf-8")
    except UnicodeEncodeError:
        return "".join(ch if ord(ch) < 128 else "?" for ch in normalized)
    return normalized


def format_rating(rating: Any) -> str:
    if rating in (None, "", "0", 0):
        return NOT_AVAILABLE
    return f"{rating} ★"


def summarize(record: Mapping[str, Any]) -> dict[str, str]:
    """Display strings for one restaurant row."""
    return {
        "href": f"/restaurants/{record.get('restaurant_id')}",
        "name": normalize_text(record.get("restaurant_name")),
        "address": normalize_text(record.get("address")),
        "cuisines": normalize_text(record.get("cuisines")),
        "city": normalize_text(record.get("city")),
        "rating": format_rating(record.get("aggregate_rating")),
    }
