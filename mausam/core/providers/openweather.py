"""OpenWeather weather provider."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from .base import ProviderError, WeatherProvider


logger = logging.getLogger(__name__)


class OpenWeatherClient(WeatherProvider):
    """Integration with the OpenWeather current, forecast and geocoding endpoints."""

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5"
    geo_url = "https://api.openweathermap.org/geo/1.0"

    def __init__(
        self,
        *,
        api_key: str,
        base_url: Optional[str] = None,
        geo_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")
        self.geo_url = (geo_url or self.geo_url).rstrip("/")
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"

    # Public API ---------------------------------------------------------
    def current(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Return the raw current-conditions payload (metric units)."""
        return self._get_object(f"{self.base_url}/weather", latitude, longitude)

    def forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Return the raw 5 day / 3 hour forecast payload (metric units)."""
        return self._get_object(f"{self.base_url}/forecast", latitude, longitude)

    def geocode(self, query: str, limit: int = 1) -> List[Dict[str, Any]]:
        params = {"q": query, "limit": limit, "appid": self.api_key}
        url = f"{self.geo_url}/direct"
        response = self._request("GET", url, params=params)
        self._log_response(url, params, response)
        data = self._json(response)
        if not isinstance(data, list):
            raise ProviderError("unexpected geocoding payload")
        return data

    # Helpers ------------------------------------------------------------
    def _get_object(self, url: str, latitude: float, longitude: float) -> Dict[str, Any]:
        params = {"lat": latitude, "lon": longitude, "appid": self.api_key, "units": "metric"}
        response = self._request("GET", url, params=params)
        self._log_response(url, params, response)
        data = self._json(response)
        if not isinstance(data, dict):
            raise ProviderError("unexpected payload")
        return data

    def _log_response(self, url: str, params: dict, response: requests.Response) -> None:
        if not self._testing_mode:
            return
        safe_params = {key: value for key, value in params.items() if key != "appid"}
        logger.info(
            "OpenWeather request",
            extra={"url": url, "params": safe_params, "status": response.status_code, "body": response.text[:500]},
        )


__all__ = ["OpenWeatherClient"]
