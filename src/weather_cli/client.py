"""Public client classes for the OpenWeatherMap current-weather API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from weather_cli._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from weather_cli._logging import log_api_call, log_async_api_call
from weather_cli.exceptions import MalformedResponseError
from weather_cli.models.current import CurrentWeatherResponse, WeatherReading


def _validate_reading(data: dict[str, Any]) -> WeatherReading:
    """Validate a raw ``/weather`` payload and flatten it into a reading."""
    try:
        return CurrentWeatherResponse.model_validate(data).to_reading()
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Unexpected response from weather service: {exc.error_count()} "
            f"invalid or missing field(s) ({_field_summary(exc)})"
        ) from exc


def _field_summary(exc: ValidationError) -> str:
    return ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())


class WeatherClient:
    """Synchronous client for current weather.

    Usage:
        with WeatherClient(api_key) as client:
            reading = client.current_weather("London")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def current_weather(self, city: str) -> WeatherReading:
        """Get current conditions for ``city`` in metric units."""
        data = self._transport.get_current(city, self._api_key)
        return _validate_reading(data)


class AsyncWeatherClient:
    """Asynchronous client for current weather.

    Usage:
        async with AsyncWeatherClient(api_key) as client:
            reading = await client.current_weather("London")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_async_api_call
    async def current_weather(self, city: str) -> WeatherReading:
        """Get current conditions for ``city`` in metric units."""
        data = await self._transport.get_current(city, self._api_key)
        return _validate_reading(data)


def fetch_current_weather(
    city: str,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
) -> WeatherReading:
    """Fetch current weather for ``city`` with a short-lived client."""
    with WeatherClient(api_key, base_url=base_url) as client:
        return client.current_weather(city)
