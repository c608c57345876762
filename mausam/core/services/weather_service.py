"""Weather service that composes geocoding, the upstream client and caching."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..cache import WeatherCache, coord_key
from ..forecast import aggregate_daily
from ..geocoding import Geocoder, normalize_query
from ..providers.base import ProviderError
from ..timefmt import convert_unix_to_time, format_timezone, get_local_time
from ..weather import build_current_weather, coordinate_label


class WeatherService:
    CURRENT_TTL = 10 * 60
    FORECAST_TTL = 30 * 60
    MAX_WORKERS = 16

    def __init__(
        self,
        *,
        client: Any,
        cache: Optional[WeatherCache] = None,
        geocoder: Optional[Geocoder] = None,
        current_ttl: Optional[float] = None,
        forecast_ttl: Optional[float] = None,
        max_workers: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.client = client
        # an empty WeatherCache is falsy, so test against None explicitly
        self.cache = cache if cache is not None else WeatherCache()
        self.geocoder = geocoder if geocoder is not None else Geocoder(client, self.cache)
        self.current_ttl = self.CURRENT_TTL if current_ttl is None else current_ttl
        self.forecast_ttl = self.FORECAST_TTL if forecast_ttl is None else forecast_ttl
        self.max_workers = max_workers or self.MAX_WORKERS
        self._clock = clock
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def weather_for_cities(self, cities: Sequence[str]) -> List[Dict[str, Any]]:
        """Current weather for each city, looked up in parallel.

        Each city reports its own failure inline, so the result always has
        one entry per input, in input order.
        """
        if not cities:
            return []
        workers = min(len(cities), self.max_workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="weather") as pool:
            return list(pool.map(self._weather_for_city, cities))

    def forecast_for_city(self, city: str) -> Optional[Dict[str, Any]]:
        """Daily forecast for a city query, or ``None`` when it cannot be geocoded."""
        geo = self.geocoder.lookup(city)
        if geo is None:
            return None
        return self._forecast(geo.latitude, geo.longitude)

    def weather_for_coords(
        self, latitude: float, longitude: float, fallback_label: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        cache_key = f"weatherCoords:{coord_key(latitude, longitude)}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached
        data = self.client.current(latitude, longitude)
        label = coordinate_label(data, fallback_label or f"{latitude},{longitude}")
        # one-element list keeps the shape of the multi-city endpoint
        result = [build_current_weather(data, label, now=self._now())]
        self.cache.set(cache_key, result, self.current_ttl)
        return result

    def forecast_for_coords(
        self, latitude: float, longitude: float, fallback_label: Optional[str] = None
    ) -> Dict[str, Any]:
        cache_key = f"forecastCoords:{coord_key(latitude, longitude)}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached
        result = self._forecast(latitude, longitude, fallback_label or f"{latitude},{longitude}")
        self.cache.set(cache_key, result, self.forecast_ttl)
        return result

    # Helpers ------------------------------------------------------------
    def _weather_for_city(self, city: str) -> Dict[str, Any]:
        try:
            query = normalize_query(city)
            geo = self.geocoder.lookup(query)
            if geo is None:
                return {
                    "city": city,
                    "error": (
                        f"Location not found: {query}. Please check the spelling and try a more "
                        'specific query (e.g. "City, State, Country")'
                    ),
                    "status": 404,
                }
            data = self.client.current(geo.latitude, geo.longitude)
            return build_current_weather(data, geo.label, now=self._now())
        except Exception as exc:  # noqa: BLE001 - one city must not fail the batch
            self._log.warning("Weather lookup for %r failed: %s", city, exc)
            return {"city": city, "error": "City not found or unable to fetch data", "details": str(exc)}

    def _forecast(
        self, latitude: float, longitude: float, fallback_label: Optional[str] = None
    ) -> Dict[str, Any]:
        data = self.client.forecast(latitude, longitude)
        city = data.get("city") or {}
        offset = city.get("timezone") or 0
        # today's sunrise/sunset is reused for every forecast day
        current = self.client.current(latitude, longitude)
        try:
            sun = current["sys"]
            sunrise = convert_unix_to_time(sun["sunrise"], offset)
            sunset = convert_unix_to_time(sun["sunset"], offset)
            samples = data["list"]
        except (KeyError, TypeError) as exc:
            raise ProviderError(f"malformed upstream payload: missing {exc}") from exc
        days = aggregate_daily(
            samples,
            offset,
            sunrise=sunrise,
            sunset=sunset,
            local_time=get_local_time(offset, self._now()),
        )
        return {
            "city": city.get("name") or fallback_label,
            "country": city.get("country") or None,
            "timezone": format_timezone(offset),
            "forecast": days,
        }

    def _now(self) -> Optional[datetime]:
        return self._clock() if self._clock else None


__all__ = ["WeatherService"]
