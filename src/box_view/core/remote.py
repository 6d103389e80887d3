"""
Pure functions for Box View API operations.

Functions for building request payloads, decoding responses and folding
returned metadata into documents without I/O dependencies.
"""

import json
from dataclasses import fields
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Iterable, Mapping, Optional, Union
from urllib.parse import urlparse

from ..exceptions import BoxViewError
from ..models import ContentVariant, Document, DocumentStatus, Session

DEFAULT_METADATA_FIELDS = ("status", "name", "created_at", "modified_at")

# Fields a metadata merge may overwrite; anything else lands in Document.extra.
MERGEABLE_FIELDS = frozenset(
    {
        "id",
        "type",
        "name",
        "status",
        "created_at",
        "modified_at",
        "file_url",
        "file_path",
        "thumbnails",
        "non_svg",
    }
)

TIMESTAMP_FIELDS = frozenset({"created_at", "modified_at", "expires_at"})


def parse_timestamp(value: Any) -> Any:
    """Parse an ISO-8601 string into a datetime, leaving anything else as is."""
    if not isinstance(value, str):
        return value
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value


def format_timestamp(value: Union[datetime, str]) -> str:
    """Format a timestamp the way the API expects it."""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def parse_status(value: Any) -> Any:
    try:
        return DocumentStatus(value)
    except ValueError:
        return value


def apply_metadata(document: Document, metadata: Mapping[str, Any]) -> Document:
    """Overwrite document fields with the values returned by the API."""
    for key, value in metadata.items():
        if key not in MERGEABLE_FIELDS:
            document.extra[key] = value
            continue
        if key == "status" and value is not None:
            value = parse_status(value)
        elif key in TIMESTAMP_FIELDS:
            value = parse_timestamp(value)
        setattr(document, key, value)
    return document


def reset_document(document: Document) -> Document:
    """Return a document to the state of a freshly constructed one."""
    blank = Document()
    for f in fields(Document):
        setattr(document, f.name, getattr(blank, f.name))
    return document


def default_upload_name(document: Document) -> str:
    """Name to upload under when the document has none of its own."""
    if document.name:
        return document.name
    if document.file_path:
        return Path(document.file_path).name
    path_name = PurePosixPath(urlparse(document.file_url or "").path).name
    return path_name or (document.file_url or "")


def build_url_upload_payload(document: Document) -> Dict[str, Any]:
    """Build the JSON body for uploading a document by URL."""
    payload = {
        "name": default_upload_name(document),
        "url": document.file_url,
        "thumbnails": document.thumbnails or "",
        "non_svg": bool(document.non_svg),
    }
    return payload


def build_file_upload_fields(document: Document) -> Dict[str, str]:
    """Build the multipart form fields sent alongside an uploaded file."""
    form = {
        "name": default_upload_name(document),
        "thumbnails": document.thumbnails or "",
        "non_svg": "true" if document.non_svg else "false",
    }
    return form


def build_update_payload(document: Document) -> Dict[str, Any]:
    # Only renaming is supported by the API.
    return {"name": document.name}


def build_session_payload(
    document_id: str, params: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """Build the JSON body for creating a viewing session."""
    payload: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        payload[key] = format_timestamp(value) if key == "expires_at" else value
    payload["document_id"] = document_id
    return payload


def build_metadata_query(fields: Optional[Iterable[str]] = None) -> Dict[str, str]:
    selected = list(fields or ()) or list(DEFAULT_METADATA_FIELDS)
    return {"fields": ",".join(selected)}


def build_list_query(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Build the query string for listing documents."""
    query: Dict[str, Any] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if key in ("created_before", "created_after"):
            value = format_timestamp(value)
        query[key] = value
    return query


def content_key(ext: str = "") -> str:
    """Key under which content fetched with ``ext`` is stored."""
    return ext or ContentVariant.ORIGINAL.value


def content_path(document_id: str, ext: str = "") -> str:
    suffix = f".{ext}" if ext else ""
    return f"/{document_id}/content{suffix}"


def decode_response_body(content: bytes) -> Union[Dict[str, Any], list, bytes]:
    """Decode a JSON body, falling back to the raw bytes."""
    if not content:
        return content
    try:
        decoded = json.loads(content)
    except ValueError:
        return content
    if isinstance(decoded, (dict, list)) and decoded:
        return decoded
    return content


def extract_service_error(body: Any) -> Optional[str]:
    """Return the API's error message when ``body`` is an error object."""
    if isinstance(body, dict) and body.get("type") == "error":
        return str(body.get("message", "Unknown error"))
    return None


def build_session(body: Any, session_url: str) -> Session:
    """Build a session from the API response, synthesizing its viewer URL."""
    if not isinstance(body, dict) or not body.get("id"):
        raise BoxViewError("Invalid session response: missing 'id' field")

    extra = {
        key: value
        for key, value in body.items()
        if key not in ("id", "type", "expires_at")
    }
    return Session(
        id=body["id"],
        url=f"{session_url}/{body['id']}/view",
        type=body.get("type"),
        expires_at=parse_timestamp(body.get("expires_at")),
        extra=extra,
    )


def documents_from_listing(body: Any) -> Dict[str, Document]:
    """Build documents keyed by id from a document collection response."""
    try:
        entries = body["document_collection"]["entries"]
    except (KeyError, TypeError):
        raise BoxViewError(
            "Invalid listing response: missing 'document_collection' entries"
        )

    documents: Dict[str, Document] = {}
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("id"):
            raise BoxViewError("Invalid listing response: entry without 'id'")
        documents[entry["id"]] = Document.from_metadata(entry)
    return documents
