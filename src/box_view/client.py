"""
Client for the Box View document conversion API.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import httpx

from .config import SDKConfig, Settings, get_logger, get_settings
from .core.remote import (
    apply_metadata,
    build_file_upload_fields,
    build_list_query,
    build_metadata_query,
    build_session,
    build_session_payload,
    build_update_payload,
    build_url_upload_payload,
    content_key,
    content_path,
    decode_response_body,
    documents_from_listing,
    extract_service_error,
    reset_document,
)
from .core.utils import build_auth_headers, build_endpoints, classify_request_exception
from .exceptions import (
    ConfigurationError,
    NetworkError,
    ServiceError,
    TimeoutError,
    TransportUnavailableError,
    UnexpectedStatusError,
)
from .models import ContentVariant, Document
from .validators import (
    ContentValidator,
    DocumentValidator,
    ListParamsValidator,
    MetadataFieldsValidator,
    SessionParamsValidator,
)


class BoxViewClient:
    """
    Client for uploading, converting, viewing and deleting Box View documents.

    Every operation is a single blocking HTTP round trip. Operations that
    target an existing document check the document locally first and raise
    InvalidInputError without touching the network when a required field is
    missing. Documents passed in are updated in place with whatever the API
    returns.

    Examples:
        >>> with BoxViewClient("your-api-key") as box:
        ...     doc = Document(name="report", file_url="https://example.com/report.pdf")
        ...     box.upload(doc)
        ...     box.view(doc)
        ...     print(doc.session.url)
    """

    def __init__(
        self,
        api_key: str,
        *,
        protocol: str = "https",
        host: str = "view-api.box.com",
        api_version: str = "1",
        timeout: int = 30,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
        debug: bool = False,
        log_level: str = "INFO",
    ):
        """
        Initialize the client.

        Args:
            api_key: API key of the Box View application
            protocol: URL scheme of the API
            host: API host; uploads go to the ``upload.`` subdomain of it
            api_version: Version segment of the API URLs
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport used for every request
            http_client: Optional pre-configured httpx client to send requests with
            debug: Enable debug logging
            log_level: Log level used when debug is off

        Raises:
            ConfigurationError: If the API key is empty
            TransportUnavailableError: If the transport or client is not an httpx one
        """
        if not api_key:
            raise ConfigurationError("An API key is required")
        if transport is not None and not isinstance(transport, httpx.BaseTransport):
            raise TransportUnavailableError(
                f"Unusable HTTP transport: {type(transport).__name__}"
            )
        if http_client is not None and not isinstance(http_client, httpx.Client):
            raise TransportUnavailableError(
                f"Unusable HTTP client: {type(http_client).__name__}"
            )

        self.api_key = api_key
        self.timeout = timeout
        self.api_url, self.upload_url, self.session_url = build_endpoints(
            protocol, host, api_version
        )

        self.config = SDKConfig(debug=debug, log_level=log_level)
        self.config.setup_logging()
        self.logger = get_logger("client")

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any):
        """
        Create a client from environment-backed settings.

        Reads ``BOX_VIEW_*`` environment variables (or a ``.env`` file) when
        no settings object is given. Keyword arguments are passed through to
        the constructor, e.g. ``transport``.
        """
        settings = settings or get_settings()
        if not settings.api_key:
            raise ConfigurationError("BOX_VIEW_API_KEY is not set")

        return cls(
            settings.api_key,
            protocol=settings.protocol,
            host=settings.host,
            api_version=settings.api_version,
            timeout=settings.timeout_seconds,
            debug=settings.debug,
            log_level=settings.log_level,
            **kwargs,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def upload(self, document: Document) -> Any:
        """
        Upload a new document for conversion.

        Documents with a ``file_path`` are sent as a multipart upload to the
        upload endpoint; documents with only a ``file_url`` are fetched by the
        API from that URL.

        Returns:
            The decoded API response, which is also merged into ``document``

        Raises:
            InvalidInputError: If neither file_path nor file_url is set, or the file is missing
            UnexpectedStatusError: If the API does not answer 202 Accepted
        """
        source = DocumentValidator.require_source(document)

        if source == "file":
            path = Path(document.file_path)
            self.logger.info("Uploading file: %s", path)
            with path.open("rb") as fh:
                body = self._request(
                    "POST",
                    self.upload_url,
                    expected=202,
                    error_message="Could not upload document.",
                    data=build_file_upload_fields(document),
                    files={"file": (path.name, fh)},
                )
        else:
            self.logger.info("Uploading from URL: %s", document.file_url)
            body = self._request(
                "POST",
                self.api_url,
                expected=202,
                error_message="Could not upload document.",
                json=build_url_upload_payload(document),
            )

        self._refresh_document_metadata(document, body)
        return body

    def upload_multiple(self, documents: Iterable[Document]) -> List[Any]:
        """
        Upload documents one after another, stopping at the first failure.

        As with delete_multiple, a non-Document element fails the batch
        before anything is uploaded.
        """
        documents = self._ensure_documents(documents)
        return [self.upload(document) for document in documents]

    def update(self, document: Document) -> Any:
        """Rename a document; only the name can be changed."""
        document_id = DocumentValidator.require_id(document)
        DocumentValidator.require_name(document)

        self.logger.info("Renaming document %s to %r", document_id, document.name)
        body = self._request(
            "PUT",
            f"{self.api_url}/{document_id}",
            expected=200,
            error_message="Could not modify document.",
            json=build_update_payload(document),
        )
        self._refresh_document_metadata(document, body)
        return body

    def delete(self, document: Document) -> Any:
        """
        Delete a document from the API. This cannot be undone.

        On success ``document`` is reset to an empty Document, since it no
        longer refers to anything on the server.
        """
        document_id = DocumentValidator.require_id(document)

        self.logger.info("Deleting document %s", document_id)
        body = self._request(
            "DELETE",
            f"{self.api_url}/{document_id}",
            expected=204,
            error_message="Could not delete document.",
        )
        reset_document(document)
        return body

    def delete_multiple(self, documents: Iterable[Document]) -> List[Any]:
        """
        Delete documents one after another.

        Every element is type-checked before the first request, so a batch
        with a non-Document element deletes nothing, not even the valid
        documents listed before it. A failed delete stops the batch;
        documents after it are left untouched.
        """
        documents = self._ensure_documents(documents)
        return [self.delete(document) for document in documents]

    def view(
        self, document: Document, params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Create a viewing session for a document.

        Sessions can only be created for documents whose status is done.

        Args:
            document: Document to view
            params: Optional ``duration`` in minutes (default 60 on the server)
                and/or ``expires_at`` timestamp

        Returns:
            The decoded session response; ``document.session`` is set with
            the session id and its viewer URL
        """
        document_id = DocumentValidator.require_id(document)
        params = SessionParamsValidator.validate(params)

        self.logger.info("Creating session for document %s", document_id)
        body = self._request(
            "POST",
            self.session_url,
            expected=201,
            error_message="Could not create session.",
            json=build_session_payload(document_id, params),
        )
        document.session = build_session(body, self.session_url)
        return body

    def get_metadata(
        self, document: Document, fields: Optional[Union[str, Iterable[str]]] = None
    ) -> Any:
        """
        Fetch a document's metadata and merge it into the document.

        ``fields`` is a list of names or a comma-separated string and
        defaults to status, name, created_at and modified_at; id and type
        are always returned.
        """
        document_id = DocumentValidator.require_id(document)
        fields = MetadataFieldsValidator.validate(fields)

        body = self._request(
            "GET",
            f"{self.api_url}/{document_id}",
            expected=200,
            error_message="Error getting metadata.",
            params=build_metadata_query(fields),
        )
        self._refresh_document_metadata(document, body)
        return body

    def get_content(self, document: Document, ext: str = "") -> bytes:
        """
        Fetch a document as its original file, a PDF or a zip of the converted assets.

        The bytes are stored in ``document.content`` under "original", "pdf"
        or "zip" and returned.
        """
        document_id = DocumentValidator.require_id(document)
        ext = ContentValidator.validate_extension(ext)

        content = self._request(
            "GET",
            f"{self.api_url}{content_path(document_id, ext)}",
            expected=200,
            error_message="Error getting content.",
            raw=True,
        )
        document.content[content_key(ext)] = content
        return content

    def get_original(self, document: Document) -> bytes:
        return self.get_content(document)

    def get_pdf(self, document: Document) -> bytes:
        return self.get_content(document, ContentVariant.PDF.value)

    def get_zip(self, document: Document) -> bytes:
        return self.get_content(document, ContentVariant.ZIP.value)

    def get_thumbnail(
        self, document: Document, width: int = 1024, height: int = 768
    ) -> bytes:
        """Fetch a PNG thumbnail of the first page. The document is not modified."""
        document_id = DocumentValidator.require_id(document)
        ContentValidator.validate_thumbnail_size(width, height)

        return self._request(
            "GET",
            f"{self.api_url}/{document_id}/thumbnail",
            expected=200,
            error_message="Error getting thumbnail.",
            params={"width": width, "height": height},
            raw=True,
        )

    def load(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Document]:
        """
        List documents uploaded with this API key.

        Args:
            params: Optional ``limit`` (default 10, max 50), ``created_before``
                and ``created_after``

        Returns:
            New Document objects keyed by id, in the order the API listed them
        """
        params = ListParamsValidator.validate(params)

        body = self._request(
            "GET",
            self.api_url,
            expected=200,
            error_message="Error loading documents.",
            params=build_list_query(params),
        )
        documents = documents_from_listing(body)
        self.logger.info("Loaded %d documents", len(documents))
        return documents

    def _build_headers(self) -> Dict[str, str]:
        return build_auth_headers(self.api_key)

    def _ensure_documents(self, documents: Iterable[Any]) -> List[Document]:
        documents = list(documents)
        for document in documents:
            DocumentValidator.ensure_document(document)
        return documents

    def _refresh_document_metadata(self, document: Document, body: Any) -> None:
        if isinstance(body, Mapping):
            apply_metadata(document, body)
        else:
            self.logger.warning("Response carried no metadata to merge")

    def _request(
        self,
        method: str,
        url: str,
        *,
        expected: int,
        error_message: str,
        raw: bool = False,
        **kwargs: Any,
    ) -> Any:
        """
        Send one request and check the response.

        Error objects in the body are raised before the status check, so a
        ``{"type": "error"}`` body fails whatever status came with it.
        """
        try:
            response = self._client.request(
                method,
                url,
                headers=self._build_headers(),
                follow_redirects=True,
                **kwargs,
            )
        except httpx.RequestError as e:
            raise self._transport_error(e) from e

        self.logger.debug("%s %s -> %d", method, url, response.status_code)

        body = decode_response_body(response.content)
        message = extract_service_error(body)
        if message is not None:
            raise ServiceError(
                f"Error: {message}", status_code=response.status_code, details=body
            )

        if response.status_code != expected:
            details = {"response": body} if isinstance(body, (dict, list)) else {}
            raise UnexpectedStatusError(
                f"{error_message} Got status {response.status_code}, expected {expected}",
                status_code=response.status_code,
                details=details,
            )

        return response.content if raw else body

    def _transport_error(self, error: httpx.RequestError) -> NetworkError:
        kind = classify_request_exception(error)
        self.logger.error("Request failed (%s): %s", kind, error)
        if kind == "timeout":
            return TimeoutError(f"Request timed out: {error}", details={"kind": kind})
        return NetworkError(f"Network error: {error}", details={"kind": kind})
