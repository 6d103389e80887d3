"""
Custom exceptions for the Box View client.
"""

from typing import Dict, Any, Optional


class BoxViewError(Exception):
    """Base exception for every failure raised by the client."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class ConfigurationError(BoxViewError):
    """Raised when the client is constructed with unusable settings."""

    pass


class TransportUnavailableError(BoxViewError):
    """Raised when no usable HTTP transport is available."""

    pass


class InvalidInputError(BoxViewError):
    """Raised when a document or parameter fails local validation."""

    pass


class UnexpectedStatusError(BoxViewError):
    """Raised when the API answers with a status the operation does not expect."""

    pass


class ServiceError(BoxViewError):
    """Raised when the API returns an error object in the response body."""

    pass


class NetworkError(BoxViewError):
    """Raised when network operations fail."""

    pass


class TimeoutError(NetworkError):
    """Raised when a request exceeds the transport timeout."""

    pass
