"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from weather_cli.exceptions import (
    ApiError,
    AuthenticationError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RequestError,
    WeatherTimeoutError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
# None keeps httpx's own default timeout.
DEFAULT_TIMEOUT: float | None = None

# Raised by httpx before anything reaches the wire.
_LOCAL_FAULTS = (httpx.UnsupportedProtocol, httpx.LocalProtocolError, httpx.InvalidURL)


def _error_message(response: httpx.Response) -> str:
    """Pick the upstream ``message`` field, falling back to text or status."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text.strip() or str(response.status_code)


def _handle_response(response: httpx.Response, city: str) -> dict[str, Any]:
    """Validate response status and return parsed JSON."""
    if response.status_code == 401:
        raise AuthenticationError()
    if response.status_code == 404:
        raise NotFoundError(city)
    if not response.is_success:
        raise ApiError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Response body is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}",
        )
    return data


def _build_params(city: str, api_key: str) -> list[tuple[str, str]]:
    return [("q", city), ("appid", api_key), ("units", "metric")]


def _client_options(base_url: str, timeout: float | None) -> dict[str, Any]:
    options: dict[str, Any] = {
        "base_url": base_url,
        "headers": {"Accept": "application/json"},
    }
    if timeout is not None:
        options["timeout"] = timeout
    return options


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(**_client_options(base_url, timeout))

    def get_current(self, city: str, api_key: str) -> dict[str, Any]:
        """GET ``/weather`` for one city and return parsed JSON."""
        try:
            response = self._client.get("/weather", params=_build_params(city, api_key))
        except _LOCAL_FAULTS as exc:
            raise RequestError(f"Request could not be sent: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(
                "Network error. The weather service did not respond in time.",
            ) from exc
        except httpx.TransportError as exc:
            raise NetworkError(
                "Network error. Unable to connect to weather service.",
            ) from exc
        except httpx.HTTPError as exc:
            raise RequestError(f"Request could not be sent: {exc}") from exc
        return _handle_response(response, city)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(**_client_options(base_url, timeout))

    async def get_current(self, city: str, api_key: str) -> dict[str, Any]:
        """Perform an async GET of ``/weather`` and return parsed JSON."""
        try:
            response = await self._client.get("/weather", params=_build_params(city, api_key))
        except _LOCAL_FAULTS as exc:
            raise RequestError(f"Request could not be sent: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(
                "Network error. The weather service did not respond in time.",
            ) from exc
        except httpx.TransportError as exc:
            raise NetworkError(
                "Network error. Unable to connect to weather service.",
            ) from exc
        except httpx.HTTPError as exc:
            raise RequestError(f"Request could not be sent: {exc}") from exc
        return _handle_response(response, city)

    async def close(self) -> None:
        await self._client.aclose()
