import pytest

from box_view import BoxViewClient
from tests.helpers.transport import TransportSpy


@pytest.fixture
def spy():
    return TransportSpy()


@pytest.fixture
def client(spy):
    with BoxViewClient("test-key", transport=spy.transport) as box:
        yield box


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4\n%test document\n")
    return path


@pytest.fixture
def listing_body():
    return {
        "document_collection": {
            "total_count": 2,
            "entries": [
                {
                    "type": "document",
                    "id": "f0e1d2",
                    "status": "done",
                    "name": "Annual Report",
                    "created_at": "2013-08-30T00:17:37Z",
                },
                {
                    "type": "document",
                    "id": "a1b2c3",
                    "status": "processing",
                    "name": "Draft",
                    "created_at": "2013-08-29T21:01:02Z",
                },
            ],
        }
    }
