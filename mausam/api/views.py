"""REST API views for current weather and daily forecasts."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Tuple

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from mausam.core.cache import WeatherCache
from mausam.core.geocoding import Geocoder
from mausam.core.providers.base import RequestConfig
from mausam.core.providers.openweather import OpenWeatherClient
from mausam.core.services.weather_service import WeatherService


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    """Build the process-wide service; its cache lives as long as the process."""
    cache = WeatherCache(default_ttl=settings.WEATHER_CACHE_TIMEOUT)
    client = OpenWeatherClient(
        api_key=settings.OPENWEATHER_API_KEY,
        base_url=settings.OPENWEATHER_BASE_URL,
        geo_url=settings.OPENWEATHER_GEO_URL,
        request_config=RequestConfig(timeout=settings.OPENWEATHER_TIMEOUT),
    )
    return WeatherService(
        client=client,
        cache=cache,
        geocoder=Geocoder(client, cache, ttl=settings.GEOCODE_CACHE_TIMEOUT),
        current_ttl=settings.WEATHER_CACHE_TIMEOUT,
        forecast_ttl=settings.WEATHER_FORECAST_CACHE_TIMEOUT,
        max_workers=settings.WEATHER_MAX_WORKERS,
    )


def _coords_from(request) -> Optional[Tuple[float, float, str]]:
    """Return ``(lat, lon, "lat,lon")`` or ``None`` when either is missing or not a number."""
    raw_lat = request.query_params.get("lat")
    raw_lon = request.query_params.get("lon")
    if not raw_lat or not raw_lon:
        return None
    try:
        return float(raw_lat), float(raw_lon), f"{raw_lat},{raw_lon}"
    except ValueError:
        return None


class WeatherView(APIView):
    """Current weather for a comma separated list of cities."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        raw = request.query_params.get("cities", "")
        cities = raw.split(",") if raw else []
        if not cities:
            return Response({"error": "Provide cities in query params"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            results = get_weather_service().weather_for_cities(cities)
        except Exception as exc:  # noqa: BLE001 - reported to the caller
            logger.exception("Multi-city weather lookup failed")
            return Response(
                {"error": "Unable to fetch weather data", "details": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(results, status=status.HTTP_200_OK)


class ForecastView(APIView):
    """Daily forecast for a single city query."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        city = request.query_params.get("city")
        if not city:
            return Response({"error": "Please provide a city in query params"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            payload = get_weather_service().forecast_for_city(city)
        except Exception as exc:  # noqa: BLE001 - reported to the caller
            logger.exception("Forecast lookup for %r failed", city)
            return Response(
                {"error": "Unable to fetch forecast data", "details": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        if payload is None:
            return Response({"error": "City not found (geocoding)"}, status=status.HTTP_404_NOT_FOUND)
        return Response(payload, status=status.HTTP_200_OK)


class WeatherByCoordsView(APIView):
    """Current weather for a coordinate pair, in the multi-city response shape."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        coords = _coords_from(request)
        if coords is None:
            return Response({"error": "Provide lat and lon query params"}, status=status.HTTP_400_BAD_REQUEST)

        latitude, longitude, label = coords
        try:
            payload = get_weather_service().weather_for_coords(latitude, longitude, fallback_label=label)
        except Exception as exc:  # noqa: BLE001 - reported to the caller
            logger.exception("Weather lookup for %s failed", label)
            return Response(
                {"error": "Unable to fetch weather by coordinates", "details": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(payload, status=status.HTTP_200_OK)


class ForecastByCoordsView(APIView):
    """Daily forecast for a coordinate pair."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        coords = _coords_from(request)
        if coords is None:
            return Response({"error": "Provide lat and lon query params"}, status=status.HTTP_400_BAD_REQUEST)

        latitude, longitude, label = coords
        try:
            payload = get_weather_service().forecast_for_coords(latitude, longitude, fallback_label=label)
        except Exception as exc:  # noqa: BLE001 - reported to the caller
            logger.exception("Forecast lookup for %s failed", label)
            return Response(
                {"error": "Unable to fetch forecast by coordinates", "details": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(payload, status=status.HTTP_200_OK)
