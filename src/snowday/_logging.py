"""Call logging for the resolver, fetcher and pipeline layers."""

from __future__ import annotations

import functools
import inspect
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "snowday.api"
LOG_FILE_NAME = "api_calls.log"

# File logging is off unless a directory is configured
_LOG_DIR: str | None = os.environ.get("SNOWDAY_LOG_DIR") or None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def configure_log_dir(path: str | os.PathLike[str] | None) -> None:
    """Send call logs to ``path/api_calls.log``, or disable them with ``None``."""
    global _LOG_DIR, _logger
    with _logger_lock:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
        _LOG_DIR = os.fspath(path) if path is not None else None
        _logger = None


def _get_logger() -> logging.Logger:
    """Return the call logger, attaching its handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not logger.handlers:
            if _LOG_DIR is None:
                logger.addHandler(logging.NullHandler())
            else:
                os.makedirs(_LOG_DIR, exist_ok=True)
                handler = logging.FileHandler(
                    os.path.join(_LOG_DIR, LOG_FILE_NAME), encoding="utf-8",
                )
                handler.setFormatter(
                    logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
                )
                logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # Skip 'self'
    arg_parts = [repr(a) for a in args[1:]]
    arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(arg_parts)


def _wrap(fn: F, on_call: Callable, on_ok: Callable, on_fail: Callable) -> F:
    """Wrap a sync or async callable with call/ok/fail hooks."""
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = _get_logger()
            arg_str = _describe_args(args, kwargs)
            on_call(logger, arg_str)
            start = time.monotonic()
            try:
                result = await fn(*args, **kwargs)
            except Exception as exc:
                on_fail(logger, arg_str, exc, time.monotonic() - start)
                raise
            on_ok(logger, arg_str, result, time.monotonic() - start)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_str = _describe_args(args, kwargs)
        on_call(logger, arg_str)
        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            on_fail(logger, arg_str, exc, time.monotonic() - start)
            raise
        on_ok(logger, arg_str, result, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Decorator that logs upstream provider calls to the API log file."""
    name = fn.__qualname__

    def on_call(logger: logging.Logger, arg_str: str) -> None:
        logger.info("CALL: %s(%s)", name, arg_str)

    def on_ok(logger: logging.Logger, arg_str: str, result: Any, elapsed: float) -> None:
        logger.info("OK: %s(%s) -> %r (%.3fs)", name, arg_str, result, elapsed)

    def on_fail(logger: logging.Logger, arg_str: str, exc: Exception, elapsed: float) -> None:
        logger.error(
            "FAIL: %s(%s) -> %s: %s (%.3fs)",
            name, arg_str, type(exc).__name__, exc, elapsed,
        )

    return _wrap(fn, on_call, on_ok, on_fail)


def log_service_call(fn: F) -> F:
    """Decorator that logs pipeline calls to the API log file."""
    name = fn.__qualname__

    def on_call(logger: logging.Logger, arg_str: str) -> None:
        logger.info("SERVICE CALL: %s(%s)", name, arg_str)

    def on_ok(logger: logging.Logger, arg_str: str, result: Any, elapsed: float) -> None:
        logger.info("SERVICE OK: %s -> %.3fs", name, elapsed)

    def on_fail(logger: logging.Logger, arg_str: str, exc: Exception, elapsed: float) -> None:
        logger.error(
            "SERVICE FAIL: %s -> %s: %s (%.3fs)",
            name, type(exc).__name__, exc, elapsed,
        )

    return _wrap(fn, on_call, on_ok, on_fail)
