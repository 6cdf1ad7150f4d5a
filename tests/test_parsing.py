import pytest

from city_weather.weather.errors import MalformedResponseError, NotFoundError
from city_weather.weather.models import (
    CurrentObservation, DailyForecast, Location, Unavailable
)
from city_weather.weather.parsing import (
    parse_current_weather, parse_daily_forecast, parse_location
)


def test_parse_location_takes_first_match():
    payload = {
        "results": [
            {"latitude": 48.85, "longitude": 2.35, "name": "Paris", "country": "França"},
            {"latitude": 33.66, "longitude": -95.55, "name": "Paris", "country": "Estados Unidos"},
        ]
    }
    location = parse_location(payload)
    assert location == Location(latitude=48.85, longitude=2.35, name="Paris", country="França")
    assert location.display_name == "Paris, França"


def test_parse_location_without_country():
    location = parse_location({"results": [{"latitude": 1.0, "longitude": 2.0, "name": "Nowhere"}]})
    assert location.country is None
    assert location.display_name == "Nowhere"


@pytest.mark.parametrize("payload", [{}, {"results": []}, {"results": None}, {"generationtime_ms": 0.5}])
def test_parse_location_without_results_is_not_found(payload):
    with pytest.raises(NotFoundError):
        parse_location(payload)


@pytest.mark.parametrize("payload", [
    [],
    "results",
    {"results": [{"name": "No coordinates"}]},
    {"results": "Paris"},
])
def test_parse_location_malformed(payload):
    with pytest.raises(MalformedResponseError):
        parse_location(payload)


def test_parse_current_weather():
    observation = parse_current_weather({
        "current_weather": {
            "temperature": 25.4,
            "weathercode": 63,
            "time": "2025-11-10T15:00",
            "windspeed": 8.3,
        }
    })
    assert observation == CurrentObservation(
        temperature_c=25.4,
        weather_code=63,
        observed_at="2025-11-10T15:00",
        wind_speed_kmh=8.3
    )


def test_parse_current_weather_wind_speed_is_optional():
    observation = parse_current_weather(
        {"current_weather": {"temperature": -2, "weathercode": 71, "time": "2025-01-05T07:00"}}
    )
    assert isinstance(observation, CurrentObservation)
    assert observation.wind_speed_kmh is None


@pytest.mark.parametrize("payload", [{}, {"unexpected": True}, {"current_weather": None}, None, []])
def test_parse_current_weather_missing(payload):
    assert parse_current_weather(payload) == Unavailable(reason="missing")


@pytest.mark.parametrize("block", [
    {"weathercode": 63, "time": "2025-11-10T15:00"},
    {"temperature": 20.0, "time": "2025-11-10T15:00"},
    {"temperature": "warm", "weathercode": 63, "time": "2025-11-10T15:00"},
    ["not", "a", "mapping"],
])
def test_parse_current_weather_malformed(block):
    assert parse_current_weather({"current_weather": block}) == Unavailable(reason="malformed")


def test_parse_daily_forecast():
    forecast = parse_daily_forecast({
        "daily": {
            "time": ["2025-11-10", "2025-11-11"],
            "temperature_2m_max": [27.5, 29.1],
            "temperature_2m_min": [18.2, 19.5],
            "weathercode": [63, 2],
        }
    })
    assert isinstance(forecast, DailyForecast)
    assert [day.date for day in forecast.days] == ["2025-11-10", "2025-11-11"]
    assert forecast.days[1].temp_max_c == 29.1
    assert forecast.days[1].temp_min_c == 19.5
    assert forecast.days[1].weather_code == 2


def test_parse_daily_forecast_missing():
    assert parse_daily_forecast({"current_weather": {}}) == Unavailable(reason="missing")


def test_parse_daily_forecast_misaligned_arrays():
    forecast = parse_daily_forecast({
        "daily": {
            "time": ["2025-11-10", "2025-11-11"],
            "temperature_2m_max": [27.5],
            "temperature_2m_min": [18.2, 19.5],
            "weathercode": [63, 2],
        }
    })
    assert forecast == Unavailable(reason="malformed")


def test_parse_daily_forecast_null_values_are_malformed():
    forecast = parse_daily_forecast({
        "daily": {
            "time": ["2025-11-10"],
            "temperature_2m_max": [None],
            "temperature_2m_min": [18.2],
            "weathercode": [63],
        }
    })
    assert forecast == Unavailable(reason="malformed")
