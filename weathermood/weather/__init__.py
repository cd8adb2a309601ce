"""Public façade for the weathermood.weather package."""

from .client import (
    WeatherError,
    WeatherReport,
    fetch_weather_by_city,
    fetch_weather_by_coords,
)

__all__ = [
    "WeatherError",
    "WeatherReport",
    "fetch_weather_by_city",
    "fetch_weather_by_coords",
]
