"""API endpoints for the city weather lookup service."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from city_weather.config import GEOCODING_LANGUAGE, FORECAST_DAYS, INCLUDE_FORECAST
from city_weather.weather.errors import (
    MalformedResponseError, NotFoundError, TransportError, UpstreamError,
    ValidationError, WeatherLookupError, WeatherUnavailableError, describe_failure
)
from city_weather.weather.models import ErrorResponse, WeatherReport
from city_weather.weather.service import WeatherService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weather", tags=["weather"])

ERROR_STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    TransportError: 502,
    UpstreamError: 502,
    MalformedResponseError: 502,
    WeatherUnavailableError: 503,
}


def get_weather_service() -> WeatherService:
    """Dependency to get weather service instance."""
    return WeatherService()


def status_code_for(exc: WeatherLookupError) -> int:
    """HTTP status code reported for a lookup failure."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 502


@router.get(
    "/",
    response_model=WeatherReport,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    }
)
async def get_city_weather(
    city: str = Query(..., description="City name to look up"),
    forecast: Optional[bool] = Query(
        None,
        description="Include the 5-day outlook (defaults to service configuration)"
    ),
    weather_service: WeatherService = Depends(get_weather_service)
) -> WeatherReport:
    """Get current weather and 5-day outlook for a city.

    Args:
        city: City name as typed by the user
        forecast: Whether to include the 5-day outlook
        weather_service: Injected weather service

    Returns:
        WeatherReport with display-ready values

    Raises:
        HTTPException: If the lookup fails
    """
    include_forecast = INCLUDE_FORECAST if forecast is None else forecast

    try:
        async with weather_service:
            report = await weather_service.lookup(city, include_forecast=include_forecast)

    except WeatherLookupError as e:
        status_code = status_code_for(e)
        logger.error(f"Weather lookup for '{city}' failed with {type(e).__name__}: {e}")
        raise HTTPException(status_code=status_code, detail=describe_failure(e))

    days = len(report.forecast) if report.forecast else 0
    logger.info(f"Successfully retrieved weather for {report.display_name} with {days} forecast days")
    return report


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "city-weather"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Service information including data sources and features
    """
    return {
        "service": "City Weather Lookup Service",
        "version": "0.1.0",
        "geocoding_language": GEOCODING_LANGUAGE,
        "forecast_days": FORECAST_DAYS,
        "features": [
            "City name to coordinates resolution",
            "Current weather conditions",
            "Best-effort 5-day daily outlook"
        ],
        "data_source": "Open-Meteo geocoding and forecast APIs"
    }
