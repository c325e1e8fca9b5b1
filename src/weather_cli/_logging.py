"""API call logging for the weather client."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "weather_cli.api"
LOG_FILE_ENV_VAR = "WEATHER_CLI_LOG_FILE"

_LOG_FILE: str | None = None
_LOG_LEVEL = logging.INFO

_logger: logging.Logger | None = None
# The one handler this module owns; others on the logger are left alone.
_handler: logging.Handler | None = None
_logger_lock = threading.Lock()


def configure_logging(log_file: str | None = None, verbose: bool = False) -> None:
    """Select the log destination and level; the logger is rebuilt on next use.

    Without a log file, records are discarded.
    """
    global _LOG_FILE, _LOG_LEVEL, _logger
    with _logger_lock:
        _LOG_FILE = log_file
        _LOG_LEVEL = logging.DEBUG if verbose else logging.INFO
        _remove_own_handler(logging.getLogger(LOGGER_NAME))
        _logger = None


def _remove_own_handler(logger: logging.Logger) -> None:
    global _handler
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None


def _get_logger() -> logging.Logger:
    """Return the API logger, creating log dir and handler on first use."""
    global _logger, _handler
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(_LOG_LEVEL)
        logger.propagate = False

        _remove_own_handler(logger)
        handler: logging.Handler
        if _LOG_FILE:
            log_dir = os.path.dirname(os.path.abspath(_LOG_FILE))
            os.makedirs(log_dir, exist_ok=True)
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
        else:
            handler = logging.NullHandler()
        logger.addHandler(handler)
        _handler = handler

        _logger = logger

    return _logger


def log_api_call(fn: F) -> F:
    """Decorator that logs client method calls to the API log.

    Only positional and keyword arguments are logged; the API key lives on
    the client instance and never reaches the log.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info("OK: %s(%s) (%.3fs)", fn.__qualname__, arg_str, elapsed)
        logger.debug("RESULT: %s -> %r", fn.__qualname__, result)
        return result

    return wrapper  # type: ignore[return-value]


def log_async_api_call(fn: F) -> F:
    """Async counterpart of :func:`log_api_call`."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = await fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info("OK: %s(%s) (%.3fs)", fn.__qualname__, arg_str, elapsed)
        logger.debug("RESULT: %s -> %r", fn.__qualname__, result)
        return result

    return wrapper  # type: ignore[return-value]
