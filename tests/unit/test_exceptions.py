import pytest

from box_view.exceptions import (
    BoxViewError,
    ConfigurationError,
    InvalidInputError,
    NetworkError,
    ServiceError,
    TimeoutError,
    TransportUnavailableError,
    UnexpectedStatusError,
)


class TestBoxViewError:
    def test_message_and_defaults(self):
        error = BoxViewError("something failed")

        assert str(error) == "something failed"
        assert error.message == "something failed"
        assert error.status_code is None
        assert error.details == {}

    def test_status_code_and_details(self):
        error = BoxViewError("bad", status_code=404, details={"response": {"a": 1}})

        assert error.status_code == 404
        assert error.details["response"] == {"a": 1}


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [
            ConfigurationError,
            TransportUnavailableError,
            InvalidInputError,
            UnexpectedStatusError,
            ServiceError,
            NetworkError,
            TimeoutError,
        ],
    )
    def test_caught_as_box_view_error(self, error_class):
        with pytest.raises(BoxViewError):
            raise error_class("test")

    def test_timeout_is_network_error(self):
        assert issubclass(TimeoutError, NetworkError)

    def test_status_errors_are_not_network_errors(self):
        assert not issubclass(UnexpectedStatusError, NetworkError)
        assert not issubclass(ServiceError, NetworkError)
