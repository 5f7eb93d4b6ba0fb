"""Custom exceptions for the snowday client."""

from __future__ import annotations


class SnowDayError(Exception):
    """Base exception for all snowday errors."""


class ValidationError(SnowDayError):
    """Raised when a postal code does not match its country's pattern."""


class NotFoundError(SnowDayError):
    """Raised when the geocoding provider returns no match."""


class NetworkError(SnowDayError):
    """Raised when a request cannot complete or its body cannot be parsed."""


class APIError(NetworkError):
    """Raised when a provider returns a non-success status."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class RequestTimeoutError(NetworkError):
    """Raised when a request to a provider times out."""


class InvalidDataError(SnowDayError):
    """Raised when a weather response lacks a required section."""
