"""
Box View client

Python client for the Box View document conversion API.
"""

from .client import BoxViewClient
from .config import Settings
from .models import Document, DocumentStatus, ContentVariant, Session
from .exceptions import (
    BoxViewError,
    ConfigurationError,
    TransportUnavailableError,
    InvalidInputError,
    UnexpectedStatusError,
    ServiceError,
    NetworkError,
    TimeoutError,
)

__version__ = "1.0.0"

__all__ = [
    "BoxViewClient",
    "Settings",
    "Document",
    "DocumentStatus",
    "ContentVariant",
    "Session",
    "BoxViewError",
    "ConfigurationError",
    "TransportUnavailableError",
    "InvalidInputError",
    "UnexpectedStatusError",
    "ServiceError",
    "NetworkError",
    "TimeoutError",
]
