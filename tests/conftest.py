"""Pytest configuration and fixtures."""

from typing import Any, Callable, List

import httpx
import pytest

from city_weather.weather.client import OpenMeteoClient

GEOCODING_HOST = "geocoding-api.open-meteo.com"

SAO_PAULO_GEOCODING = {
    "results": [
        {"latitude": -23.55, "longitude": -46.63, "name": "São Paulo", "country": "Brazil"}
    ]
}

SAO_PAULO_CURRENT = {
    "current_weather": {"temperature": 25.4, "weathercode": 63, "time": "2025-11-10T15:00"}
}

SAO_PAULO_DAILY = {
    "daily": {
        "time": ["2025-11-10", "2025-11-11", "2025-11-12", "2025-11-13", "2025-11-14"],
        "temperature_2m_max": [27.5, 29.1, 24.0, 22.6, 26.0],
        "temperature_2m_min": [18.2, 19.5, 17.0, 16.4, 18.9],
        "weathercode": [63, 2, 95, 3, 0],
    }
}


def _respond(request: httpx.Request, responder: Any) -> httpx.Response:
    """Turn a canned responder into an httpx response.

    A responder is an exception to raise, a (status, body) tuple, or a body
    served with status 200. String bodies are sent as raw text.
    """
    if responder is None:
        raise AssertionError(f"Unexpected request to {request.url}")
    if isinstance(responder, Exception):
        raise responder
    status, body = responder if isinstance(responder, tuple) else (200, responder)
    if isinstance(body, str):
        return httpx.Response(status, text=body)
    return httpx.Response(status, json=body)


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    """Requests received by the mocked Open-Meteo APIs."""
    return []


@pytest.fixture
def make_client(requests_seen) -> Callable[..., OpenMeteoClient]:
    """Factory for an OpenMeteoClient backed by canned responses."""

    def _make(geocoding: Any = None, current: Any = None, daily: Any = None) -> OpenMeteoClient:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if request.url.host == GEOCODING_HOST:
                return _respond(request, geocoding)
            if "daily" in request.url.params:
                return _respond(request, daily)
            return _respond(request, current)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return OpenMeteoClient(http_client=http_client)

    return _make
