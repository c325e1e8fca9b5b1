"""Custom exceptions for the weather CLI."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather CLI errors."""


class ConfigurationError(WeatherError):
    """Raised when required input (city or API key) is missing or empty."""


class RequestError(WeatherError):
    """Raised when the request could not be built or sent (local fault)."""


class NetworkError(WeatherError):
    """Raised when no response was received from the weather service."""


class WeatherTimeoutError(NetworkError):
    """Raised when a request to the weather service times out."""


class ApiError(WeatherError):
    """Raised when the service answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, detail: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(detail or f"API Error: {message}")


class AuthenticationError(ApiError):
    """Raised on HTTP 401, i.e. the API key was rejected."""

    def __init__(
        self,
        message: str = "Invalid API key. Please check your OPENWEATHER_API_KEY.",
    ) -> None:
        super().__init__(401, message, detail=message)


class NotFoundError(ApiError):
    """Raised on HTTP 404, i.e. the requested city is unknown to the service."""

    def __init__(self, city: str) -> None:
        self.city = city
        message = f'City "{city}" not found.'
        super().__init__(404, message, detail=message)


class MalformedResponseError(WeatherError):
    """Raised when a successful response lacks expected fields."""
