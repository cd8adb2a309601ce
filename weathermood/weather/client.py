"""Current-weather lookup against OpenWeatherMap."""

from dataclasses import dataclass
from typing import Any, Dict

import requests

from weathermood import config
from weathermood.core import log_step


class WeatherError(Exception):
    """The weather lookup failed (missing key, HTTP error, bad payload)."""


@dataclass
class WeatherReport:
    city: str
    temp: int
    condition: str
    humidity: int


def _fetch(params: Dict[str, Any]) -> WeatherReport:
    if not config.WEATHER_API_KEY:
        raise WeatherError("WEATHER_API_KEY is not configured.")

    query = dict(params, appid=config.WEATHER_API_KEY, units="metric")
    try:
        r = requests.get(
            config.WEATHER_API_URL,
            params=query,
            timeout=config.HTTP_TIMEOUT_SECONDS,
        )
        r.raise_for_status()
        data = r.json()
        return WeatherReport(
            city=data["name"],
            temp=round(data["main"]["temp"]),
            condition=data["weather"][0]["main"],
            humidity=data["main"]["humidity"],
        )
    except requests.RequestException as e:
        raise WeatherError(f"Weather lookup failed: {e}") from e
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise WeatherError(f"Unexpected weather payload: {e}") from e


def fetch_weather_by_coords(lat: float, lon: float) -> WeatherReport:
    log_step(f"Fetching weather for ({lat}, {lon})...")
    return _fetch({"lat": lat, "lon": lon})


def fetch_weather_by_city(city: str) -> WeatherReport:
    log_step(f"Fetching weather for '{city}'...")
    return _fetch({"q": city})
