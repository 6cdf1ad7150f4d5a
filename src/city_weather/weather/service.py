"""Weather service orchestrating the city lookup pipeline."""

import asyncio
import contextlib
import logging
from datetime import date
from typing import List, Optional

from city_weather.config import INCLUDE_FORECAST
from city_weather.weather.client import OpenMeteoClient
from city_weather.weather.codes import describe_weather_code, weather_icon
from city_weather.weather.errors import WeatherLookupError, WeatherUnavailableError
from city_weather.weather.formatting import (
    format_date, format_temperature, format_timestamp, round_half_up, weekday_name
)
from city_weather.weather.geocoding import GeocodingService
from city_weather.weather.models import (
    CurrentObservation, DailyForecast, ForecastDay, Location, WeatherReport
)

logger = logging.getLogger(__name__)


class WeatherService:
    """Service turning a city name into a display-ready weather report."""

    def __init__(
        self,
        client: Optional[OpenMeteoClient] = None,
        geocoding_service: Optional[GeocodingService] = None
    ):
        """Initialize the weather service.

        Args:
            client: Open-Meteo client instance (creates default if None)
            geocoding_service: Geocoding service instance (creates default if None)
        """
        self.client = client or OpenMeteoClient()
        self.geocoding_service = geocoding_service or GeocodingService(self.client)

    async def lookup(
        self,
        city: Optional[str],
        include_forecast: bool = INCLUDE_FORECAST,
        today: Optional[date] = None
    ) -> WeatherReport:
        """Resolve a city and fetch its current weather and 5-day outlook.

        The outlook is best-effort: its failure leaves `forecast` empty
        instead of aborting the lookup.

        Args:
            city: City name typed by the user
            include_forecast: Whether to request the 5-day outlook
            today: First day of the outlook (defaults to the local date)

        Returns:
            WeatherReport ready for display

        Raises:
            ValidationError: If the city name is empty
            NotFoundError: If the city cannot be resolved
            TransportError: If a required request could not be completed
            UpstreamError: If a required request returned a non-2xx status
            MalformedResponseError: If the geocoding response is malformed
            WeatherUnavailableError: If no current conditions were returned
        """
        location = await self.geocoding_service.resolve_city(city)

        forecast_task = None
        if include_forecast:
            forecast_task = asyncio.create_task(self._get_forecast_days(location, today))

        try:
            current = await self.client.get_current_weather(location.latitude, location.longitude)
            if not isinstance(current, CurrentObservation):
                raise WeatherUnavailableError("Weather data unavailable")
        except BaseException as e:
            logger.error(f"Current weather lookup failed for {location.display_name}: {e}")
            await self._cancel(forecast_task)
            raise

        forecast = await forecast_task if forecast_task else None

        report = self._build_report(location, current, forecast)
        logger.info(
            f"Weather for {report.display_name}: {report.temperature_display}, "
            f"{report.description}"
        )
        return report

    async def _cancel(self, task: Optional[asyncio.Task]) -> None:
        """Cancel a pending forecast request and wait for it to unwind."""
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _get_forecast_days(
        self,
        location: Location,
        today: Optional[date]
    ) -> Optional[List[ForecastDay]]:
        """Fetch the daily outlook, tolerating lookup failures."""
        try:
            forecast = await self.client.get_daily_forecast(
                location.latitude, location.longitude, today=today
            )
        except WeatherLookupError as e:
            logger.warning(f"Skipping 5-day forecast for {location.display_name}: {e}")
            return None

        if not isinstance(forecast, DailyForecast) or not forecast.days:
            logger.warning(f"5-day forecast unavailable for {location.display_name}")
            return None

        return [
            ForecastDay(
                date=format_date(day.date),
                weekday=weekday_name(day.date) or "",
                temp_max=round_half_up(day.temp_max_c),
                temp_min=round_half_up(day.temp_min_c),
                description=describe_weather_code(day.weather_code),
                icon=weather_icon(day.weather_code)
            )
            for day in forecast.days
        ]

    def _build_report(
        self,
        location: Location,
        current: CurrentObservation,
        forecast: Optional[List[ForecastDay]]
    ) -> WeatherReport:
        return WeatherReport(
            location=location,
            display_name=location.display_name,
            temperature=round_half_up(current.temperature_c),
            temperature_display=format_temperature(current.temperature_c),
            description=describe_weather_code(current.weather_code),
            icon=weather_icon(current.weather_code),
            observed_at=format_timestamp(current.observed_at),
            wind_speed_kmh=current.wind_speed_kmh,
            forecast=forecast
        )

    async def aclose(self):
        """Close the Open-Meteo client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing Open-Meteo client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
