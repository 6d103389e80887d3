"""
Validation utilities for client operations.

Every check here runs before a request is built, so a failure never reaches
the network.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .exceptions import InvalidInputError
from .models import ContentVariant, Document


class DocumentValidator:
    """Required-field checks for documents passed to the client."""

    @classmethod
    def ensure_document(cls, document: Any) -> Document:
        if not isinstance(document, Document):
            raise InvalidInputError(
                f"Each document must be of type Document, got {type(document).__name__}"
            )
        return document

    @classmethod
    def require_id(cls, document: Document) -> str:
        cls.ensure_document(document)
        if not document.id:
            raise InvalidInputError("Missing required field: id")
        return document.id

    @classmethod
    def require_name(cls, document: Document) -> str:
        cls.ensure_document(document)
        if not document.name:
            raise InvalidInputError("Missing required field: name")
        return document.name

    @classmethod
    def require_source(cls, document: Document) -> str:
        """
        Check that the document can be uploaded.

        Returns "file" when the upload sends a local file and "url" when the
        API fetches the document itself. A local path takes precedence when
        both are set.
        """
        cls.ensure_document(document)
        if document.file_path:
            path = Path(document.file_path)
            if not path.is_file():
                raise InvalidInputError(f"File not found: {document.file_path}")
            return "file"
        if document.file_url:
            return "url"
        raise InvalidInputError("Missing file information. url or file must be set.")


class ContentValidator:
    """Content variant and thumbnail size checks."""

    EXTENSIONS = ("", ContentVariant.PDF.value, ContentVariant.ZIP.value)

    @classmethod
    def validate_extension(cls, ext: Optional[str]) -> str:
        ext = (ext or "").lstrip(".").lower()
        if ext == ContentVariant.ORIGINAL.value:
            ext = ""
        if ext not in cls.EXTENSIONS:
            raise InvalidInputError(
                f"Unsupported content extension: {ext}. Use 'pdf', 'zip' or none"
            )
        return ext

    @classmethod
    def validate_thumbnail_size(cls, width: int, height: int) -> None:
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInputError(
                    f"Thumbnail {label} must be a positive integer, got {value!r}"
                )


class ListParamsValidator:
    """Parameter checks for listing documents."""

    ALLOWED = ("limit", "created_before", "created_after")
    MAX_LIMIT = 50

    @classmethod
    def validate(cls, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        params = dict(params or {})

        unknown = sorted(set(params) - set(cls.ALLOWED))
        if unknown:
            raise InvalidInputError(f"Unknown list parameters: {', '.join(unknown)}")

        limit = params.get("limit")
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int):
                raise InvalidInputError("limit must be an integer")
            if not 1 <= limit <= cls.MAX_LIMIT:
                raise InvalidInputError(
                    f"limit must be between 1 and {cls.MAX_LIMIT}, got {limit}"
                )

        for key in ("created_before", "created_after"):
            _check_timestamp(key, params.get(key))

        return params


class SessionParamsValidator:
    """Parameter checks for creating viewing sessions."""

    ALLOWED = ("duration", "expires_at")

    @classmethod
    def validate(cls, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        params = dict(params or {})

        unknown = sorted(set(params) - set(cls.ALLOWED))
        if unknown:
            raise InvalidInputError(f"Unknown session parameters: {', '.join(unknown)}")

        duration = params.get("duration")
        if duration is not None:
            if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
                raise InvalidInputError("duration must be a positive number of minutes")

        _check_timestamp("expires_at", params.get("expires_at"))
        return params


def _check_timestamp(key: str, value: Any) -> None:
    if value is None or isinstance(value, datetime):
        return
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{key} must be a datetime or an ISO-8601 string")


class MetadataFieldsValidator:
    """Normalizes the field selection for metadata requests."""

    @classmethod
    def validate(cls, fields: Optional[Union[str, Iterable[str]]]) -> List[str]:
        """
        Return the requested field names as a list.

        A comma-separated string is split into names; any other iterable
        must hold only strings.
        """
        if fields is None:
            return []
        if isinstance(fields, str):
            fields = fields.split(",")

        selected = []
        for name in fields:
            if not isinstance(name, str):
                raise InvalidInputError(
                    f"Metadata field names must be strings, got {name!r}"
                )
            name = name.strip()
            if name:
                selected.append(name)
        return selected
