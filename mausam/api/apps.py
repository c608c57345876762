from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = "mausam.api"
    label = "weather_api"
