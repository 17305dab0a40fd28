"""
Error types raised by the GDAX client.

Every failure of a client call surfaces as one of these; none are retried.
"""
from typing import Optional


class GdaxError(Exception):
    """Base class for all GDAX client errors."""


class ApiError(GdaxError):
    """The exchange rejected the request (non-2xx status with a message body)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class TransportError(GdaxError):
    """Network or HTTP-layer failure (connection, TLS, timeout)."""


class DecodeError(GdaxError):
    """Response body did not match the expected schema."""


class InvalidCredentialsError(GdaxError, ValueError):
    """API secret is not valid base64."""
