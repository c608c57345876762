"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from mausam.api.views import get_weather_service
from mausam.core.providers.base import ProviderError


class Command(BaseCommand):
    help = "Fetch current weather or a daily forecast for cities or coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", action="append", default=[], help="City query, repeatable")
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")
        parser.add_argument("--forecast", action="store_true", help="Return the daily forecast instead")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        cities = options.get("city") or []
        latitude = options.get("lat")
        longitude = options.get("lon")
        service = get_weather_service()

        try:
            if cities:
                if options.get("forecast"):
                    if len(cities) != 1:
                        raise CommandError("--forecast accepts a single --city")
                    payload = service.forecast_for_city(cities[0])
                    if payload is None:
                        raise CommandError(f"City not found (geocoding): {cities[0]}")
                else:
                    payload = service.weather_for_cities(cities)
            else:
                if latitude is None or longitude is None:
                    raise CommandError("--lat and --lon are required unless --city is given")
                if options.get("forecast"):
                    payload = service.forecast_for_coords(latitude, longitude)
                else:
                    payload = service.weather_for_coords(latitude, longitude)
        except ProviderError as exc:
            raise CommandError(f"Upstream weather provider failed: {exc}") from exc

        self.stdout.write(json.dumps(payload))
