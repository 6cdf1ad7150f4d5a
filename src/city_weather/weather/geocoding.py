"""Geocoding service resolving city names to coordinates."""

import logging
from typing import Optional

from city_weather.weather.client import OpenMeteoClient
from city_weather.weather.errors import NotFoundError, ValidationError, WeatherLookupError
from city_weather.weather.models import Location
from city_weather.weather.parsing import parse_location

logger = logging.getLogger(__name__)


class GeocodingService:
    """Service resolving free-text city names through Open-Meteo geocoding."""

    def __init__(self, client: OpenMeteoClient):
        """Initialize the geocoding service.

        Args:
            client: Open-Meteo client used for the geocoding request
        """
        self.client = client

    async def resolve_city(self, city: Optional[str]) -> Location:
        """Convert a city name to its first geocoding match.

        Args:
            city: City name to geocode

        Returns:
            Location with coordinates, canonical name and country

        Raises:
            ValidationError: If the city name is empty
            TransportError: If the request could not be completed
            UpstreamError: If the geocoding API answers with a non-2xx status
            NotFoundError: If no city matches
            MalformedResponseError: If the response has an unexpected shape
        """
        if not city or not city.strip():
            raise ValidationError("City name is required")

        name = city.strip()
        try:
            payload = await self.client.search_city(name)
            location = parse_location(payload)
        except NotFoundError:
            logger.info(f"No geocoding match for '{name}'")
            raise
        except WeatherLookupError as e:
            logger.error(f"Geocoding failed for '{name}': {e}")
            raise

        logger.info(
            f"Successfully geocoded '{name}' to {location.display_name} "
            f"({location.latitude}, {location.longitude})"
        )
        return location
