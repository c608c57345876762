"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from mausam.api.views import ForecastByCoordsView, ForecastView, WeatherByCoordsView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("weather/coords", WeatherByCoordsView.as_view(), name="weather-coords"),
    path("forecast", ForecastView.as_view(), name="forecast"),
    path("forecast/coords", ForecastByCoordsView.as_view(), name="forecast-coords"),
]
