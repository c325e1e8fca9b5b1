"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from weather_cli._logging import configure_logging
from weather_cli.models.current import WeatherReading

BASE_URL = "https://api.openweathermap.org/data/2.5"
WEATHER_URL = f"{BASE_URL}/weather"


SAMPLE_LONDON = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"},
    ],
    "base": "stations",
    "main": {
        "temp": 15.0,
        "feels_like": 14.2,
        "temp_min": 13.9,
        "temp_max": 16.1,
        "pressure": 1012,
        "humidity": 70,
    },
    "visibility": 10000,
    "wind": {"speed": 3.0, "deg": 240},
    "clouds": {"all": 75},
    "dt": 1717243200,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1717213530, "sunset": 1717272797},
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

SAMPLE_DELHI_NIGHT = {
    "weather": [
        {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01n"},
    ],
    "main": {"temp": 33.4, "feels_like": 36.9, "humidity": 41},
    "wind": {"speed": 7.2, "deg": 300},
    "sys": {"country": "IN"},
    "name": "Delhi",
    "cod": 200,
}


def london_payload(**overrides: Any) -> dict[str, Any]:
    """Deep copy of :data:`SAMPLE_LONDON` with top-level keys replaced."""
    payload = copy.deepcopy(SAMPLE_LONDON)
    payload.update(overrides)
    return payload


def make_reading(**overrides: Any) -> WeatherReading:
    fields: dict[str, Any] = {
        "city": "London",
        "country": "GB",
        "temperature": 15.0,
        "feels_like": 14.2,
        "humidity": 70,
        "wind_speed": 3.0,
        "condition_id": 803,
        "description": "broken clouds",
        "icon": "04d",
    }
    fields.update(overrides)
    return WeatherReading(**fields)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(autouse=True)
def _discard_api_logs():
    """Keep the API logger on a NullHandler unless a test configures it."""
    configure_logging(None)
    yield
    configure_logging(None)
