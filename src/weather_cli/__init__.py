"""weather-cli — current weather for a city, from the command line."""

from weather_cli.client import AsyncWeatherClient, WeatherClient, fetch_current_weather
from weather_cli.config import WeatherRequest, load_config
from weather_cli.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RequestError,
    WeatherError,
    WeatherTimeoutError,
)
from weather_cli.models import WeatherReading
from weather_cli.render import AdvisoryRule, render_report
from weather_cli.visuals import ConditionVisuals, condition_visuals, temperature_feel

__all__ = [
    "AdvisoryRule",
    "ApiError",
    "AsyncWeatherClient",
    "AuthenticationError",
    "ConditionVisuals",
    "ConfigurationError",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "RequestError",
    "WeatherClient",
    "WeatherError",
    "WeatherReading",
    "WeatherRequest",
    "WeatherTimeoutError",
    "condition_visuals",
    "fetch_current_weather",
    "load_config",
    "render_report",
    "temperature_feel",
]

__version__ = "0.1.0"
