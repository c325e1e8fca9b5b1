"""Tests for _logging.py — decorators and file logging."""

from __future__ import annotations

import logging

import pytest

import weather_cli._logging as mod
from weather_cli._logging import LOGGER_NAME, configure_logging, log_api_call, log_async_api_call


class _FakeClient:
    """Minimal class to test logging decorators."""

    @log_api_call
    def current_weather(self, city: str) -> dict:
        return {"city": city}

    @log_api_call
    def failing(self, city: str) -> None:
        raise ValueError("test error")

    @log_async_api_call
    async def current_weather_async(self, city: str) -> dict:
        return {"city": city}

    @log_async_api_call
    async def failing_async(self, city: str) -> None:
        raise RuntimeError("async error")


@pytest.fixture
def fake_client():
    return _FakeClient()


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "api_calls.log"
    configure_logging(str(path))
    yield path
    configure_logging(None)


class TestLogApiCall:
    def test_returns_result(self, fake_client, log_file):
        assert fake_client.current_weather("Oslo") == {"city": "Oslo"}

    def test_logs_call_and_ok(self, fake_client, log_file):
        fake_client.current_weather("Oslo")
        content = log_file.read_text()
        assert "CALL: _FakeClient.current_weather('Oslo')" in content
        assert "OK: _FakeClient.current_weather('Oslo')" in content

    def test_logs_failure(self, fake_client, log_file):
        with pytest.raises(ValueError, match="test error"):
            fake_client.failing("Oslo")
        content = log_file.read_text()
        assert "FAIL: _FakeClient.failing('Oslo')" in content
        assert "ValueError" in content

    def test_result_only_at_debug(self, fake_client, tmp_path):
        path = tmp_path / "debug.log"
        configure_logging(str(path), verbose=True)
        fake_client.current_weather("Oslo")
        assert "RESULT: _FakeClient.current_weather" in path.read_text()
        configure_logging(None)

    def test_preserves_function_name(self, fake_client):
        assert fake_client.current_weather.__name__ == "current_weather"

    def test_creates_log_directory(self, fake_client, tmp_path):
        """Log directory is created on first use."""
        new_dir = tmp_path / "nested" / "logs"
        configure_logging(str(new_dir / "api_calls.log"))
        fake_client.current_weather("Oslo")
        assert new_dir.exists()
        assert (new_dir / "api_calls.log").exists()

    def test_no_file_without_configuration(self, fake_client, tmp_path):
        configure_logging(None)
        fake_client.current_weather("Oslo")
        assert mod._LOG_FILE is None
        assert list(tmp_path.iterdir()) == []


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class TestForeignHandlers:
    @pytest.fixture
    def foreign_handler(self):
        handler = _RecordingHandler()
        logger = logging.getLogger(LOGGER_NAME)
        logger.addHandler(handler)
        yield handler
        logger.removeHandler(handler)

    def test_file_written_alongside_other_handler(self, fake_client, foreign_handler, log_file):
        fake_client.current_weather("Oslo")
        assert "CALL: _FakeClient.current_weather('Oslo')" in log_file.read_text()
        assert foreign_handler.records

    def test_reconfigure_keeps_other_handler(self, fake_client, foreign_handler, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        configure_logging(str(first))
        fake_client.current_weather("Oslo")
        configure_logging(str(second))
        fake_client.current_weather("Bergen")

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert foreign_handler in handlers
        assert sum(isinstance(h, logging.FileHandler) for h in handlers) == 1
        assert "Bergen" not in first.read_text()
        assert "CALL: _FakeClient.current_weather('Bergen')" in second.read_text()


class TestLogAsyncApiCall:
    @pytest.mark.asyncio
    async def test_logs_call_and_ok(self, fake_client, log_file):
        assert await fake_client.current_weather_async("Oslo") == {"city": "Oslo"}
        content = log_file.read_text()
        assert "CALL: _FakeClient.current_weather_async('Oslo')" in content
        assert "OK: _FakeClient.current_weather_async('Oslo')" in content

    @pytest.mark.asyncio
    async def test_logs_failure(self, fake_client, log_file):
        with pytest.raises(RuntimeError, match="async error"):
            await fake_client.failing_async("Oslo")
        content = log_file.read_text()
        assert "FAIL: _FakeClient.failing_async('Oslo')" in content
        assert "RuntimeError" in content
