"""Parse raw Open-Meteo payloads into domain models."""

import logging
from typing import Any, Union

from pydantic import ValidationError

from city_weather.weather.errors import MalformedResponseError, NotFoundError
from city_weather.weather.models import (
    CurrentObservation, DailyForecast, DailyForecastEntry, GeocodingResponse,
    Location, OpenMeteoCurrentWeather, OpenMeteoDaily, Unavailable
)

logger = logging.getLogger(__name__)


def parse_location(payload: Any) -> Location:
    """Build a Location from the first geocoding match.

    Args:
        payload: Decoded JSON body of the geocoding API

    Returns:
        Location of the first match

    Raises:
        NotFoundError: If the response holds no match
        MalformedResponseError: If the response does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError("Unexpected geocoding response format")

    if not payload.get("results"):
        raise NotFoundError("City not found")

    try:
        response = GeocodingResponse(**payload)
    except ValidationError as e:
        logger.error(f"Invalid geocoding response format: {e}")
        raise MalformedResponseError("Unexpected geocoding response format")

    match = response.results[0]
    return Location(
        latitude=match.latitude,
        longitude=match.longitude,
        name=match.name,
        country=match.country
    )


def parse_current_weather(payload: Any) -> Union[CurrentObservation, Unavailable]:
    """Extract the current observation from a forecast response.

    Args:
        payload: Decoded JSON body of the forecast API

    Returns:
        CurrentObservation, or Unavailable if the block is missing or malformed
    """
    if not isinstance(payload, dict) or payload.get("current_weather") is None:
        logger.warning("Forecast response has no current_weather block")
        return Unavailable(reason="missing")

    try:
        raw = OpenMeteoCurrentWeather(**payload["current_weather"])
    except (TypeError, ValidationError) as e:
        logger.warning(f"Invalid current_weather block: {e}")
        return Unavailable(reason="malformed")

    return CurrentObservation(
        temperature_c=raw.temperature,
        weather_code=raw.weathercode,
        observed_at=raw.time,
        wind_speed_kmh=raw.windspeed
    )


def parse_daily_forecast(payload: Any) -> Union[DailyForecast, Unavailable]:
    """Extract index-aligned daily aggregates from a forecast response.

    Args:
        payload: Decoded JSON body of the forecast API

    Returns:
        DailyForecast, or Unavailable if the block is missing or malformed
    """
    if not isinstance(payload, dict) or payload.get("daily") is None:
        logger.warning("Forecast response has no daily block")
        return Unavailable(reason="missing")

    try:
        raw = OpenMeteoDaily(**payload["daily"])
    except (TypeError, ValidationError) as e:
        logger.warning(f"Invalid daily block: {e}")
        return Unavailable(reason="malformed")

    lengths = {
        len(raw.time),
        len(raw.temperature_2m_max),
        len(raw.temperature_2m_min),
        len(raw.weathercode),
    }
    if len(lengths) != 1:
        logger.warning(f"Daily arrays are not aligned: lengths={sorted(lengths)}")
        return Unavailable(reason="malformed")

    days = tuple(
        DailyForecastEntry(
            date=day,
            temp_max_c=temp_max,
            temp_min_c=temp_min,
            weather_code=code
        )
        for day, temp_max, temp_min, code in zip(
            raw.time, raw.temperature_2m_max, raw.temperature_2m_min, raw.weathercode
        )
    )
    return DailyForecast(days=days)
