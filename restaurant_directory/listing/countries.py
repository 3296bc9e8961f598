from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

COUNTRY_NAMES: Mapping[int, str] = MappingProxyType({
    1: "India",
    14: "Australia",
    30: "Brazil",
    37: "Canada",
    94: "Indonesia",
    148: "New Zealand",
    162: "Philippines",
    166: "Qatar",
    184: "Singapore",
    189: "South Africa",
    191: "Sri Lanka",
    208: "Turkey",
    214: "UAE",
    215: "United Kingdom",
    216: "United States",
})


def codes_for_prefix(prefix: str, countries: Mapping[int, str] = COUNTRY_NAMES) -> list[int]:
    """Country codes whose name starts with ``prefix``, ignoring case."""
    prefix_lower = prefix.strip().lower()
    if not prefix_lower:
        return []
    return sorted(
        code for code, name in countries.items() if name.lower().startswith(prefix_lower)
    )
