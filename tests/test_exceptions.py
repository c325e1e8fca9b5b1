"""Tests for the exception hierarchy."""

from __future__ import annotations

from weather_cli.exceptions import ApiError, AuthenticationError, NotFoundError, WeatherError


class TestApiError:
    def test_message_prefixed(self):
        exc = ApiError(status_code=500, message="boom")
        assert str(exc) == "API Error: boom"
        assert exc.status_code == 500
        assert exc.message == "boom"

    def test_detail_replaces_display_text(self):
        exc = ApiError(503, "unavailable", detail="Try again later.")
        assert str(exc) == "Try again later."
        assert exc.message == "unavailable"


class TestAuthenticationError:
    def test_defaults(self):
        exc = AuthenticationError()
        assert isinstance(exc, ApiError)
        assert isinstance(exc, WeatherError)
        assert exc.status_code == 401
        assert str(exc) == "Invalid API key. Please check your OPENWEATHER_API_KEY."
        assert exc.args == (exc.message,)

    def test_custom_message(self):
        exc = AuthenticationError("key revoked")
        assert str(exc) == "key revoked"
        assert exc.status_code == 401


class TestNotFoundError:
    def test_carries_city(self):
        exc = NotFoundError("Atlantis")
        assert isinstance(exc, ApiError)
        assert exc.status_code == 404
        assert exc.city == "Atlantis"
        assert str(exc) == 'City "Atlantis" not found.'
        assert exc.args == ('City "Atlantis" not found.',)
