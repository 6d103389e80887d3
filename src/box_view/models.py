"""
Data models for Box View documents and viewing sessions.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union


class DocumentStatus(str, Enum):
    """Conversion lifecycle reported by the API."""

    QUEUED = "queued"
    PROCESSING = "processing"
    DONE = "done"
    ERROR = "error"


class ContentVariant(str, Enum):
    """Keys under which fetched content is stored on a document."""

    ORIGINAL = "original"
    PDF = "pdf"
    ZIP = "zip"


@dataclass
class Session:
    """
    A short-lived viewing session for a single document.

    Sessions let end users view a converted document without the API key
    being exposed to them. They expire after an hour unless a duration or
    expiry timestamp was requested.

    Attributes:
        id: Session identifier returned by the API
        url: Viewer URL built from the session endpoint and the session id
        type: Kind reported by the API, normally "session"
        expires_at: Expiry timestamp reported by the API
        extra: Any other fields the API returned
    """

    id: str
    url: str
    type: Optional[str] = None
    expires_at: Optional[Union[datetime, str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Document:
    """
    Local state of one remote Box View document.

    A document is created client-side (usually with just a name and an
    upload source), filled in by upload, update and get_metadata, and reset
    to an empty document by delete. Fields the API returns that are not
    listed here are kept in ``extra``.

    Attributes:
        id: Identifier assigned by the API on upload
        type: Kind reported by the API, currently always "document"
        name: Display name of the document
        status: Conversion status (queued, processing, done or error)
        created_at: Time the document was uploaded
        modified_at: Time the document was last modified
        file_url: Public URL to upload the document from
        file_path: Local path to upload the document from
        thumbnails: Comma-separated ``{width}x{height}`` thumbnail sizes
        non_svg: Also create the non-SVG version of the document
        session: Viewing session created by ``view``
        content: Fetched content keyed by variant (original, pdf, zip)
        extra: Unrecognised fields returned by the API

    Example:
        >>> doc = Document(name="report", file_url="https://example.com/report.pdf")
        >>> client.upload(doc)
        >>> print(doc.id, doc.status)
    """

    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    status: Optional[Union[DocumentStatus, str]] = None
    created_at: Optional[Union[datetime, str]] = None
    modified_at: Optional[Union[datetime, str]] = None
    file_url: Optional[str] = None
    file_path: Optional[Union[str, Path]] = None
    thumbnails: str = ""
    non_svg: bool = False
    session: Optional[Session] = None
    content: Dict[str, bytes] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_metadata(cls, metadata: Optional[Mapping[str, Any]] = None) -> "Document":
        """Build a document from an arbitrary mapping of field values."""
        from .core.remote import apply_metadata

        document = cls()
        if metadata:
            apply_metadata(document, metadata)
        return document
