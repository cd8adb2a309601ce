from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from weathermood.core import log_error
from weathermood.weather import (
    WeatherError,
    WeatherReport,
    fetch_weather_by_city,
    fetch_weather_by_coords,
)

from .schemas import WeatherResponse

router = APIRouter()


def _to_response(report: WeatherReport) -> WeatherResponse:
    return WeatherResponse(
        city=report.city,
        temp=report.temp,
        condition=report.condition,
        humidity=report.humidity,
    )


@router.get("", response_model=WeatherResponse)
def get_weather(
    lat: Optional[float] = Query(default=None),
    lon: Optional[float] = Query(default=None),
) -> WeatherResponse:
    """
    Current weather at the given coordinates.
    """
    if lat is None or lon is None:
        raise HTTPException(
            status_code=400, detail="Latitude and longitude are required"
        )
    try:
        report = fetch_weather_by_coords(lat, lon)
    except WeatherError as e:
        log_error(str(e))
        raise HTTPException(status_code=502, detail=str(e))
    return _to_response(report)


@router.get("/city", response_model=WeatherResponse)
def get_weather_for_city(city: Optional[str] = Query(default=None)) -> WeatherResponse:
    if not city or not city.strip():
        raise HTTPException(status_code=400, detail="City is required")
    try:
        report = fetch_weather_by_city(city.strip())
    except WeatherError as e:
        log_error(str(e))
        raise HTTPException(status_code=502, detail=str(e))
    return _to_response(report)
