"""
Utility functions for building requests and classifying transport failures.
"""

from typing import Dict, NamedTuple


USER_AGENT = "box-view-python/1.0"


class Endpoints(NamedTuple):
    """Base URLs derived from the API protocol, host and version."""

    api_url: str
    upload_url: str
    session_url: str


def build_endpoints(protocol: str, host: str, version: str) -> Endpoints:
    """Derive the document, upload and session endpoints."""
    base = f"{protocol}://{host}/{version}"
    return Endpoints(
        api_url=f"{base}/documents",
        upload_url=f"{protocol}://upload.{host}/{version}/documents",
        session_url=f"{base}/sessions",
    )


def build_auth_headers(api_key: str) -> Dict[str, str]:
    """Build authentication headers."""
    return {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
        "Authorization": f"Token {api_key}",
    }


def classify_request_exception(exception: Exception) -> str:
    """Name the kind of transport failure behind an httpx exception."""
    import httpx

    if isinstance(exception, httpx.TimeoutException):
        return "timeout"
    if isinstance(exception, (httpx.TooManyRedirects, httpx.ProtocolError)):
        return "protocol"
    if isinstance(exception, (httpx.TransportError, ConnectionError, OSError)):
        return "network"

    message = str(exception).lower()
    if any(term in message for term in ("connection", "refused", "unreachable")):
        return "network"
    return "unknown"
