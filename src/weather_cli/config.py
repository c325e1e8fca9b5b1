"""Run configuration for the weather CLI.

The API key is read once here and handed to the client explicitly; nothing
else in the package looks at the environment for it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from weather_cli.exceptions import ConfigurationError

API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"
API_KEY_SIGNUP_URL = "https://openweathermap.org/appid"


class WeatherRequest(BaseModel):
    """Validated input for one invocation."""

    model_config = ConfigDict(frozen=True)

    city: str
    show_details: bool = False
    api_key: str = Field(repr=False)


def load_config(
    city: str | None,
    show_details: bool = False,
    environ: Mapping[str, str] | None = None,
) -> WeatherRequest:
    """Build a :class:`WeatherRequest` from CLI values and the environment.

    Raises:
        ConfigurationError: if the city is missing or blank, or if
            ``OPENWEATHER_API_KEY`` is unset, empty or still the placeholder.
    """
    env = os.environ if environ is None else environ

    city = (city or "").strip()
    if not city:
        raise ConfigurationError("Missing required option: --city <city>.")

    api_key = (env.get(API_KEY_ENV_VAR) or "").strip()
    if not api_key or api_key == API_KEY_PLACEHOLDER:
        raise ConfigurationError(
            f"{API_KEY_ENV_VAR} is not set. Please get an API key from "
            f"{API_KEY_SIGNUP_URL} and set it as an environment variable."
        )

    return WeatherRequest(city=city, show_details=show_details, api_key=api_key)
