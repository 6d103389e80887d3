import logging

import pytest

from box_view import BoxViewClient, Document
from box_view.config import SDKConfig, Settings, get_logger
from box_view.exceptions import ConfigurationError
from tests.helpers.transport import TransportSpy


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BOX_VIEW_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_key is None
        assert settings.protocol == "https"
        assert settings.host == "view-api.box.com"
        assert settings.api_version == "1"
        assert settings.timeout_seconds == 30

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("BOX_VIEW_API_KEY", "env-key")
        monkeypatch.setenv("BOX_VIEW_TIMEOUT_SECONDS", "5")

        settings = Settings(_env_file=None)

        assert settings.api_key == "env-key"
        assert settings.timeout_seconds == 5


class TestFromSettings:
    def test_builds_client(self):
        spy = TransportSpy()
        settings = Settings(_env_file=None, api_key="k", host="view.example.com")

        box = BoxViewClient.from_settings(settings, transport=spy.transport)

        assert box.api_key == "k"
        assert box.api_url == "https://view.example.com/1/documents"
        assert box.timeout == 30

    def test_reads_environment_without_settings(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BOX_VIEW_API_KEY", "env-key")
        monkeypatch.setenv("BOX_VIEW_API_VERSION", "2")

        box = BoxViewClient.from_settings(transport=TransportSpy().transport)

        assert box.api_key == "env-key"
        assert box.api_url == "https://view-api.box.com/2/documents"

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("BOX_VIEW_API_KEY", raising=False)

        with pytest.raises(ConfigurationError):
            BoxViewClient.from_settings(Settings(_env_file=None))


class TestLogging:
    def test_logger_namespace(self):
        assert get_logger("client").name == "box_view.client"

    def test_debug_level(self):
        SDKConfig(debug=True).setup_logging()

        logger = logging.getLogger("box_view")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        SDKConfig(log_level="warning").setup_logging()
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_api_key_not_logged(self, caplog):
        spy = TransportSpy().respond(200, {"id": "d1"})
        box = BoxViewClient("secret-key", transport=spy.transport, debug=True)

        with caplog.at_level(logging.DEBUG, logger="box_view"):
            box.get_metadata(Document(id="d1"))

        assert "GET" in caplog.text
        assert "secret-key" not in caplog.text
