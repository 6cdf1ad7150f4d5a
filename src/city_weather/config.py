"""Configuration settings for the city weather lookup service."""

import os
from typing import Final, Optional
from dotenv import load_dotenv

load_dotenv()

# API Configuration
GEOCODING_API_URL: Final[str] = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_API_URL: Final[str] = "https://api.open-meteo.com/v1/forecast"
USER_AGENT: str = os.getenv("USER_AGENT", "CityWeatherLookup/0.1 (user@example.com)")

# Localization of geocoding results
GEOCODING_LANGUAGE: str = os.getenv("GEOCODING_LANGUAGE", "pt")

# Forecast settings
FORECAST_DAYS: Final[int] = 5
INCLUDE_FORECAST: bool = os.getenv("INCLUDE_FORECAST", "true").lower() == "true"

# Unset means no timeout, stalled calls are left to the transport
_http_timeout = os.getenv("HTTP_TIMEOUT")
HTTP_TIMEOUT: Optional[float] = float(_http_timeout) if _http_timeout else None

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
