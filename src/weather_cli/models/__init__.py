"""Weather data models."""

from weather_cli.models.current import (
    CurrentWeatherResponse,
    MainMeasurements,
    SystemInfo,
    WeatherCondition,
    WeatherReading,
    Wind,
)

__all__ = [
    "CurrentWeatherResponse",
    "MainMeasurements",
    "SystemInfo",
    "WeatherCondition",
    "WeatherReading",
    "Wind",
]
