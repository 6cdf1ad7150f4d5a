import httpx
import pytest
from fastapi.testclient import TestClient

from city_weather.api.endpoints import get_weather_service
from city_weather.main import app
from city_weather.weather.service import WeatherService

from conftest import SAO_PAULO_CURRENT, SAO_PAULO_DAILY, SAO_PAULO_GEOCODING


@pytest.fixture
def api_client(make_client):
    """Test client whose weather service talks to canned Open-Meteo responses."""

    def _make(**responses) -> TestClient:
        app.dependency_overrides[get_weather_service] = (
            lambda: WeatherService(client=make_client(**responses))
        )
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def test_get_city_weather(api_client):
    client = api_client(
        geocoding=SAO_PAULO_GEOCODING,
        current=SAO_PAULO_CURRENT,
        daily=SAO_PAULO_DAILY
    )
    response = client.get("/weather/", params={"city": "São Paulo"})

    assert response.status_code == 200
    body = response.json()
    assert body["display_name"] == "São Paulo, Brazil"
    assert body["temperature"] == 25
    assert body["temperature_display"] == "25°C"
    assert body["description"] == "Moderate rain"
    assert body["icon"] == "wi-rain"
    assert body["observed_at"] == "10/11/2025 15:00"
    assert len(body["forecast"]) == 5


def test_get_city_weather_without_forecast(api_client, requests_seen):
    client = api_client(geocoding=SAO_PAULO_GEOCODING, current=SAO_PAULO_CURRENT)
    response = client.get("/weather/", params={"city": "São Paulo", "forecast": "false"})

    assert response.status_code == 200
    assert response.json()["forecast"] is None
    assert len(requests_seen) == 2


def test_forecast_failure_still_returns_report(api_client):
    client = api_client(
        geocoding=SAO_PAULO_GEOCODING,
        current=SAO_PAULO_CURRENT,
        daily=httpx.ConnectError("Network request failed")
    )
    response = client.get("/weather/", params={"city": "São Paulo", "forecast": "true"})

    assert response.status_code == 200
    assert response.json()["forecast"] is None


@pytest.mark.parametrize("responses, status_code, detail", [
    ({"geocoding": {"results": []}}, 404, "City not found. Please try again."),
    ({"geocoding": (429, {})}, 502, "Failed to fetch city coordinates"),
    (
        {"geocoding": SAO_PAULO_GEOCODING, "current": (500, {}), "daily": SAO_PAULO_DAILY},
        502,
        "Failed to fetch weather data",
    ),
    (
        {
            "geocoding": SAO_PAULO_GEOCODING,
            "current": httpx.ConnectError("Network request failed"),
            "daily": SAO_PAULO_DAILY,
        },
        502,
        "Network request failed",
    ),
    (
        {"geocoding": SAO_PAULO_GEOCODING, "current": {"unexpected": True}, "daily": SAO_PAULO_DAILY},
        503,
        "Weather data unavailable",
    ),
])
def test_lookup_failures_map_to_user_messages(api_client, responses, status_code, detail):
    client = api_client(**responses)
    response = client.get("/weather/", params={"city": "Anywhere"})

    assert response.status_code == status_code
    assert response.json() == {"detail": detail}


def test_empty_city_is_bad_request(api_client, requests_seen):
    client = api_client()
    response = client.get("/weather/", params={"city": "   "})

    assert response.status_code == 400
    assert response.json() == {"detail": "City name is required"}
    assert requests_seen == []


def test_missing_city_parameter(api_client):
    response = api_client().get("/weather/")
    assert response.status_code == 422


def test_health_and_info():
    client = TestClient(app)

    assert client.get("/weather/health").json() == {"status": "healthy", "service": "city-weather"}
    info = client.get("/weather/info").json()
    assert info["forecast_days"] == 5
    assert info["geocoding_language"] == "pt"
    assert client.get("/").status_code == 200
