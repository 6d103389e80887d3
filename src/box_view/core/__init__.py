"""
Core pure functions for the client.

This package contains I/O-free functions for building requests, decoding
responses and merging metadata into documents.
"""

from .remote import (
    DEFAULT_METADATA_FIELDS,
    apply_metadata,
    reset_document,
    build_url_upload_payload,
    build_file_upload_fields,
    build_update_payload,
    build_session_payload,
    build_metadata_query,
    build_list_query,
    build_session,
    content_key,
    content_path,
    decode_response_body,
    extract_service_error,
    documents_from_listing,
    parse_timestamp,
    format_timestamp,
)

from .utils import (
    Endpoints,
    build_endpoints,
    build_auth_headers,
    classify_request_exception,
)

__all__ = [
    # Remote functions
    "DEFAULT_METADATA_FIELDS",
    "apply_metadata",
    "reset_document",
    "build_url_upload_payload",
    "build_file_upload_fields",
    "build_update_payload",
    "build_session_payload",
    "build_metadata_query",
    "build_list_query",
    "build_session",
    "content_key",
    "content_path",
    "decode_response_body",
    "extract_service_error",
    "documents_from_listing",
    "parse_timestamp",
    "format_timestamp",
    # Utility functions
    "Endpoints",
    "build_endpoints",
    "build_auth_headers",
    "classify_request_exception",
]
