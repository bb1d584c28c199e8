"""
Exception hierarchy raised by the Moneroo client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import ProviderError

__all__ = [
    "ApiError",
    "ConfigurationError",
    "MonerooError",
    "ResponseShapeError",
    "TransportError",
    "ValidationError",
]


class MonerooError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MonerooError):
    """Raised when the credential or client configuration is missing or invalid."""


class ValidationError(MonerooError):
    """Raised when caller-supplied parameters are rejected before any request is sent."""


class ApiError(MonerooError):
    """
    Raised when the provider answers with a non-2xx status.

    ``error`` holds the parsed error body when the provider sent one.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error: Optional["ProviderError"] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error


class ResponseShapeError(MonerooError):
    """Raised when a successful response lacks a field the caller relies on."""


class TransportError(MonerooError):
    """Raised when the HTTP request itself fails (DNS, connection, timeout)."""
