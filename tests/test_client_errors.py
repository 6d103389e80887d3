"""
Test failure classification for the Box View client.

Local validation failures must never reach the transport; HTTP failures
carry the status code; error objects in the body win over the status code;
transport failures surface as NetworkError without a status.
"""

import httpx
import pytest

from box_view import Document
from box_view.exceptions import (
    BoxViewError,
    InvalidInputError,
    NetworkError,
    ServiceError,
    TimeoutError,
    UnexpectedStatusError,
)


OPERATIONS_NEEDING_ID = [
    ("update", lambda box, doc: box.update(doc)),
    ("delete", lambda box, doc: box.delete(doc)),
    ("view", lambda box, doc: box.view(doc)),
    ("get_metadata", lambda box, doc: box.get_metadata(doc)),
    ("get_content", lambda box, doc: box.get_content(doc)),
    ("get_pdf", lambda box, doc: box.get_pdf(doc)),
    ("get_thumbnail", lambda box, doc: box.get_thumbnail(doc)),
]


class TestLocalValidation:
    @pytest.mark.parametrize("name,operation", OPERATIONS_NEEDING_ID)
    def test_missing_id_never_reaches_network(self, client, spy, name, operation):
        doc = Document(name="has a name but no id")

        with pytest.raises(InvalidInputError) as exc_info:
            operation(client, doc)

        assert "Missing required field: id" in str(exc_info.value)
        assert exc_info.value.status_code is None
        assert spy.requests == []

    @pytest.mark.parametrize("name,operation", OPERATIONS_NEEDING_ID)
    def test_empty_id_treated_as_missing(self, client, spy, name, operation):
        with pytest.raises(InvalidInputError):
            operation(client, Document(id="", name="x"))

        assert spy.requests == []

    def test_non_document_rejected(self, client, spy):
        with pytest.raises(InvalidInputError) as exc_info:
            client.delete("d1")

        assert "must be of type Document" in str(exc_info.value)
        assert spy.requests == []


class TestUnexpectedStatus:
    @pytest.mark.parametrize(
        "operation,status",
        [
            (lambda box: box.upload(Document(file_url="http://x/y.pdf")), 200),
            (lambda box: box.update(Document(id="d1", name="n")), 404),
            (lambda box: box.delete(Document(id="d1")), 200),
            (lambda box: box.view(Document(id="d1")), 202),
            (lambda box: box.get_metadata(Document(id="d1")), 404),
            (lambda box: box.get_content(Document(id="d1")), 202),
            (lambda box: box.get_thumbnail(Document(id="d1")), 202),
            (lambda box: box.load(), 500),
        ],
    )
    def test_status_code_carried(self, client, spy, operation, status):
        spy.respond(status, content=b"")

        with pytest.raises(UnexpectedStatusError) as exc_info:
            operation(client)

        assert exc_info.value.status_code == status

    def test_failed_delete_keeps_document(self, client, spy):
        spy.respond(404, content=b"Not Found")
        doc = Document(id="d1", name="still here")

        with pytest.raises(UnexpectedStatusError):
            client.delete(doc)

        assert doc.id == "d1"
        assert doc.name == "still here"

    def test_failed_session_leaves_session_unset(self, client, spy):
        spy.respond(400, content=b"bad request")
        doc = Document(id="d1")

        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.view(doc)

        assert "Could not create session." in str(exc_info.value)
        assert doc.session is None

    def test_decoded_body_in_details(self, client, spy):
        spy.respond(409, {"type": "conflict", "detail": "busy"})

        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.get_metadata(Document(id="d1"))

        assert exc_info.value.details == {"response": {"type": "conflict", "detail": "busy"}}


class TestServiceErrorBody:
    @pytest.mark.parametrize("status", [200, 201, 202, 400, 500])
    def test_error_object_raised_regardless_of_status(self, client, spy, status):
        spy.respond(status, {"type": "error", "message": "X"})

        with pytest.raises(ServiceError) as exc_info:
            client.get_metadata(Document(id="d1"))

        assert "X" in str(exc_info.value)
        assert str(exc_info.value) == "Error: X"
        assert exc_info.value.status_code == status

    def test_error_object_on_content_endpoint(self, client, spy):
        spy.respond(200, {"type": "error", "message": "Document not ready"})
        doc = Document(id="d1")

        with pytest.raises(ServiceError):
            client.get_pdf(doc)

        assert doc.content == {}

    def test_error_object_on_upload_leaves_document(self, client, spy):
        spy.respond(202, {"type": "error", "message": "bad url"})
        doc = Document(file_url="http://x/y.pdf")

        with pytest.raises(ServiceError):
            client.upload(doc)

        assert doc.id is None

    def test_service_error_is_box_view_error(self, client, spy):
        spy.respond(500, {"type": "error", "message": "boom"})

        with pytest.raises(BoxViewError):
            client.load()


class TestTransportFailures:
    def test_connection_refused(self, client, spy):
        spy.fail_with(httpx.ConnectError("[Errno 111] Connection refused"))

        with pytest.raises(NetworkError) as exc_info:
            client.get_metadata(Document(id="d1"))

        assert "Network error" in str(exc_info.value)
        assert "Connection refused" in str(exc_info.value)
        assert exc_info.value.status_code is None
        assert not isinstance(exc_info.value, UnexpectedStatusError)

    def test_timeout(self, client, spy):
        spy.fail_with(httpx.ReadTimeout("timed out"))

        with pytest.raises(TimeoutError) as exc_info:
            client.load()

        assert "Request timed out" in str(exc_info.value)
        assert exc_info.value.details["kind"] == "timeout"

    def test_timeout_is_network_error(self, client, spy):
        spy.fail_with(httpx.ConnectTimeout("connect timed out"))

        with pytest.raises(NetworkError):
            client.load()

    def test_transport_error_chained(self, client, spy):
        original = httpx.ConnectError("name resolution failed")
        spy.fail_with(original)

        with pytest.raises(NetworkError) as exc_info:
            client.view(Document(id="d1"))

        assert exc_info.value.__cause__ is original
