from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from mausam.api.views import get_weather_service

# 2024-01-01 00:00:00 UTC
DAY_ONE = 1704067200


@pytest.fixture(autouse=True)
def fresh_service():
    get_weather_service.cache_clear()
    yield
    get_weather_service.cache_clear()


def _run(*args) -> object:
    out = StringIO()
    call_command("weather_fetch", *args, stdout=out)
    return json.loads(out.getvalue())


def test_fetch_by_coordinates(requests_mock, urls, current_payload) -> None:
    requests_mock.get(urls["weather"], json=current_payload())

    payload = _run("--lat", "1.0", "--lon", "2.0")

    assert payload[0]["city"] == "TestCity, TC"


def test_fetch_cities(requests_mock, urls, current_payload, geocoding) -> None:
    requests_mock.get(urls["geo"], json=geocoding({"paris": {"name": "Paris", "lat": 1, "lon": 2, "country": "FR"}}))
    requests_mock.get(urls["weather"], json=current_payload())

    payload = _run("--city", "Paris", "--city", "Nowhere")

    assert payload[0]["city"] == "Paris, FR"
    assert payload[1]["status"] == 404


def test_fetch_forecast_by_coordinates(requests_mock, urls, current_payload, forecast_payload, sample) -> None:
    requests_mock.get(urls["weather"], json=current_payload())
    requests_mock.get(urls["forecast"], json=forecast_payload([sample(DAY_ONE, 3, wind=1)]))

    payload = _run("--lat", "1.0", "--lon", "2.0", "--forecast")

    assert payload["forecast"][0]["wind_speed"] == "3.6 Km/hr"


def test_forecast_for_unknown_city_fails(requests_mock, urls) -> None:
    requests_mock.get(urls["geo"], json=[])

    with pytest.raises(CommandError, match="City not found"):
        _run("--city", "UnknownGibberishXYZ", "--forecast")


def test_coordinates_required_without_city() -> None:
    with pytest.raises(CommandError):
        _run("--lat", "1.0")


def test_upstream_failure_becomes_command_error(requests_mock, urls) -> None:
    requests_mock.get(urls["weather"], status_code=500, text="oops")

    with pytest.raises(CommandError, match="Upstream weather provider failed"):
        _run("--lat", "1.0", "--lon", "2.0")
