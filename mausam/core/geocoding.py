"""Free-text location lookup backed by the OpenWeather geocoding API."""
from __future__ import annotations

import logging
from typing import Optional

from .cache import WeatherCache
from .entities import GeocodeResult


logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> str:
    """Trim a "city, region, country" query and drop empty comma parts."""
    if not query:
        return ""
    parts = [part.strip() for part in query.split(",")]
    return ",".join(part for part in parts if part)


class Geocoder:
    TTL = 24 * 60 * 60

    def __init__(self, client, cache: WeatherCache, ttl: Optional[float] = None) -> None:
        self.client = client
        self.cache = cache
        self.ttl = self.TTL if ttl is None else ttl

    def lookup(self, query: Optional[str]) -> Optional[GeocodeResult]:
        """Resolve ``query`` to its first upstream match, or ``None``.

        Ambiguous names are not surfaced: the first candidate wins. Misses are
        not cached, so a later lookup of the same text hits the upstream again.
        """
        normalized = normalize_query(query)
        if not normalized:
            return None
        cache_key = f"geo:{normalized.lower()}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        matches = self.client.geocode(normalized, limit=1)
        if not matches:
            logger.info("No geocoding match for %r", normalized)
            return None
        result = GeocodeResult.from_payload(matches[0])
        self.cache.set(cache_key, result, self.ttl)
        return result


__all__ = ["Geocoder", "normalize_query"]
