from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import pytest


WEATHER_URL = "https://owm.test/data/2.5/weather"
FORECAST_URL = "https://owm.test/data/2.5/forecast"
GEO_URL = "https://owm.test/geo/1.0/direct"

# 2020-09-13 12:26:40 UTC
BASE_EPOCH = 1600000000


class TimeController:
    def __init__(self) -> None:
        self.now = 0.0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> TimeController:
    return TimeController()


@pytest.fixture
def urls() -> Dict[str, str]:
    return {"weather": WEATHER_URL, "forecast": FORECAST_URL, "geo": GEO_URL}


def make_current(
    name: str = "TestCity",
    country: Optional[str] = "TC",
    wind: Optional[float] = 2.5,
    timezone: int = 0,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "name": name,
        "main": {"temp": 12.34, "feels_like": 11.0, "humidity": 56},
        "sys": {"sunrise": BASE_EPOCH, "sunset": BASE_EPOCH + 40000},
        "timezone": timezone,
        "weather": [{"description": "clear sky"}],
    }
    if country:
        payload["sys"]["country"] = country
    if wind is not None:
        payload["wind"] = {"speed": wind}
    return payload


def make_forecast(samples: Iterable[Dict[str, Any]], timezone: int = 0, name: str = "TestCity") -> Dict[str, Any]:
    return {
        "city": {"name": name, "country": "TC", "timezone": timezone},
        "list": list(samples),
    }


def make_sample(dt: int, temp: float, wind: Optional[float] = None, description: str = "clouds") -> Dict[str, Any]:
    sample: Dict[str, Any] = {"dt": dt, "main": {"temp": temp}, "weather": [{"description": description}]}
    if wind is not None:
        sample["wind"] = {"speed": wind}
    return sample


@pytest.fixture
def current_payload():
    return make_current


@pytest.fixture
def forecast_payload():
    return make_forecast


@pytest.fixture
def sample():
    return make_sample


def geocoding_callback(known: Dict[str, Dict[str, Any]]):
    """requests-mock json callback answering direct geocoding by query text."""

    def _respond(request, context):
        query = request.qs.get("q", [""])[0].lower()
        match = known.get(query)
        return [match] if match else []

    return _respond


@pytest.fixture
def geocoding():
    return geocoding_callback
