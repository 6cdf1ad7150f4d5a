"""Data models for the city weather lookup service."""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Result of resolving a city name."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., description="Latitude in decimal degrees")
    longitude: float = Field(..., description="Longitude in decimal degrees")
    name: str = Field(..., description="Canonical place name from the geocoder")
    country: Optional[str] = Field(None, description="Country as returned by the geocoder")

    @property
    def display_name(self) -> str:
        if self.country:
            return f"{self.name}, {self.country}"
        return self.name


class CurrentObservation(BaseModel):
    """Point-in-time weather reading."""
    model_config = ConfigDict(frozen=True)

    temperature_c: float = Field(..., description="Temperature in Celsius")
    weather_code: int = Field(..., description="WMO weather code")
    observed_at: str = Field(..., description="Location-local time, YYYY-MM-DDTHH:MM[:SS]")
    wind_speed_kmh: Optional[float] = Field(None, description="Wind speed in km/h")


class DailyForecastEntry(BaseModel):
    """One day of the multi-day outlook."""
    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Date in YYYY-MM-DD format")
    temp_max_c: float = Field(..., description="Maximum temperature in Celsius")
    temp_min_c: float = Field(..., description="Minimum temperature in Celsius")
    weather_code: int = Field(..., description="WMO weather code")


class DailyForecast(BaseModel):
    """Chronologically ordered daily outlook."""
    model_config = ConfigDict(frozen=True)

    days: Tuple[DailyForecastEntry, ...] = Field(..., description="Daily entries, query day first")


class Unavailable(BaseModel):
    """Absent or malformed upstream data, returned instead of raising."""
    model_config = ConfigDict(frozen=True)

    reason: Literal["missing", "malformed"] = Field(..., description="Why the data is unavailable")


class GeocodingResult(BaseModel):
    """Single match from the Open-Meteo geocoding API."""
    latitude: float
    longitude: float
    name: str
    country: Optional[str] = None


class GeocodingResponse(BaseModel):
    """Raw response from the Open-Meteo geocoding API."""
    results: List[GeocodingResult] = Field(default_factory=list)


class OpenMeteoCurrentWeather(BaseModel):
    """Raw `current_weather` block from the Open-Meteo forecast API."""
    temperature: float
    weathercode: int
    time: str
    windspeed: Optional[float] = None


class OpenMeteoDaily(BaseModel):
    """Raw `daily` block from the Open-Meteo forecast API."""
    time: List[str]
    temperature_2m_max: List[float]
    temperature_2m_min: List[float]
    weathercode: List[int]


class ForecastDay(BaseModel):
    """Display-ready forecast day."""
    date: str = Field(..., description="Date in DD/MM/YYYY format")
    weekday: str = Field(..., description="Weekday name")
    temp_max: int = Field(..., description="Rounded maximum temperature in Celsius")
    temp_min: int = Field(..., description="Rounded minimum temperature in Celsius")
    description: str = Field(..., description="Weather condition description")
    icon: str = Field(..., description="Weather icon identifier")


class WeatherReport(BaseModel):
    """Display-ready result of a city weather lookup."""
    location: Location = Field(..., description="Resolved location")
    display_name: str = Field(..., description="Name and country of the location")
    temperature: int = Field(..., description="Rounded temperature in Celsius")
    temperature_display: str = Field(..., description="Temperature formatted for display")
    description: str = Field(..., description="Weather condition description")
    icon: str = Field(..., description="Weather icon identifier")
    observed_at: str = Field(..., description="Observation time in DD/MM/YYYY HH:MM format")
    wind_speed_kmh: Optional[float] = Field(None, description="Wind speed in km/h")
    forecast: Optional[List[ForecastDay]] = Field(None, description="5-day outlook, absent if unavailable")

    def display_tuple(self) -> Tuple[str, str, str, str, str]:
        return (
            self.display_name,
            self.temperature_display,
            self.description,
            self.icon,
            self.observed_at,
        )


class ErrorResponse(BaseModel):
    """Error response model."""
    detail: str = Field(..., description="User-facing error message")
