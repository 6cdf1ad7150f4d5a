"""HTTP client for the Open-Meteo geocoding and forecast APIs."""

import logging
from datetime import date, timedelta
from typing import Any, Dict, Optional, Union

import httpx

from city_weather.config import (
    GEOCODING_API_URL, FORECAST_API_URL, USER_AGENT, GEOCODING_LANGUAGE,
    FORECAST_DAYS, HTTP_TIMEOUT
)
from city_weather.weather.errors import (
    MalformedResponseError, TransportError, UpstreamError
)
from city_weather.weather.models import (
    CurrentObservation, DailyForecast, Unavailable
)
from city_weather.weather.parsing import parse_current_weather, parse_daily_forecast

logger = logging.getLogger(__name__)

GEOCODING_FAILED = "Failed to fetch city coordinates"
CURRENT_WEATHER_FAILED = "Failed to fetch weather data"
DAILY_FORECAST_FAILED = "Failed to fetch 5-day forecast"

DAILY_FIELDS = "temperature_2m_max,temperature_2m_min,weathercode"


class OpenMeteoClient:
    """Async client for fetching data from the Open-Meteo APIs."""

    def __init__(
        self,
        geocoding_url: str = GEOCODING_API_URL,
        forecast_url: str = FORECAST_API_URL,
        user_agent: str = USER_AGENT,
        language: str = GEOCODING_LANGUAGE,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the Open-Meteo client.

        Args:
            geocoding_url: Geocoding API endpoint
            forecast_url: Forecast API endpoint
            user_agent: User-Agent header for API requests
            language: Language used to localize geocoding results
            http_client: Preconfigured httpx client (creates default if None)
        """
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url
        self.user_agent = user_agent
        self.language = language
        self.client = http_client or httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=HTTP_TIMEOUT
        )

    async def _get_json(self, url: str, params: Dict[str, Any], failure_message: str) -> Any:
        """Issue a GET request and decode the JSON body.

        Raises:
            TransportError: If the request could not be completed
            UpstreamError: If the response status is not 2xx
            MalformedResponseError: If the body is not valid JSON
        """
        try:
            response = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error(f"Request error to {url}: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"HTTP error from {url}: {response.status_code} - {response.text}")
            raise UpstreamError(failure_message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise MalformedResponseError(f"Invalid JSON response from {url}") from e

    async def search_city(self, name: str) -> Any:
        """Search the geocoding API for a single match.

        Args:
            name: City name to look up

        Returns:
            Raw geocoding response

        Raises:
            TransportError: If the request could not be completed
            UpstreamError: If the response status is not 2xx
            MalformedResponseError: If the body is not valid JSON
        """
        params = {
            "name": name,
            "count": 1,
            "language": self.language,
            "format": "json",
        }
        logger.info(f"Searching coordinates for city '{name}'")
        return await self._get_json(self.geocoding_url, params, GEOCODING_FAILED)

    async def get_current_weather(
        self, lat: float, lon: float
    ) -> Union[CurrentObservation, Unavailable]:
        """Fetch current conditions for given coordinates.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            CurrentObservation, or Unavailable if the response lacks it

        Raises:
            TransportError: If the request could not be completed
            UpstreamError: If the response status is not 2xx
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
            "timezone": "auto",
        }
        logger.info(f"Fetching current weather for lat={lat}, lon={lon}")

        try:
            data = await self._get_json(self.forecast_url, params, CURRENT_WEATHER_FAILED)
        except MalformedResponseError:
            return Unavailable(reason="malformed")

        return parse_current_weather(data)

    async def get_daily_forecast(
        self, lat: float, lon: float, today: Optional[date] = None
    ) -> Union[DailyForecast, Unavailable]:
        """Fetch daily aggregates for today and the following days.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees
            today: First day of the window (defaults to the local date)

        Returns:
            DailyForecast, or Unavailable if the response lacks it

        Raises:
            TransportError: If the request could not be completed
            UpstreamError: If the response status is not 2xx
        """
        start = today or date.today()
        end = start + timedelta(days=FORECAST_DAYS - 1)
        params = {
            "latitude": lat,
            "longitude": lon,
            "daily": DAILY_FIELDS,
            "timezone": "auto",
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
        }
        logger.info(f"Fetching daily forecast for lat={lat}, lon={lon} from {start} to {end}")

        try:
            data = await self._get_json(self.forecast_url, params, DAILY_FORECAST_FAILED)
        except MalformedResponseError:
            return Unavailable(reason="malformed")

        forecast = parse_daily_forecast(data)
        if isinstance(forecast, DailyForecast):
            logger.info(f"Successfully fetched forecast with {len(forecast.days)} days")
        return forecast

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
