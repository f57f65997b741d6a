"""Tests for error handling and exception classes."""

import pytest

from magento_access.exceptions import (
    MagentoAuthError,
    MagentoError,
    MagentoParseError,
    MagentoTokenError,
    MagentoTransportError,
    MagentoValidationError,
    VerifierTimeoutError,
)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_magento_error_is_base(self) -> None:
        """All exceptions should inherit from MagentoError."""
        assert issubclass(MagentoAuthError, MagentoError)
        assert issubclass(MagentoTransportError, MagentoError)
        assert issubclass(MagentoParseError, MagentoError)
        assert issubclass(MagentoValidationError, MagentoError)

    def test_token_error_inherits_from_auth_error(self) -> None:
        assert issubclass(MagentoTokenError, MagentoAuthError)

    def test_verifier_timeout_inherits_from_auth_error(self) -> None:
        assert issubclass(VerifierTimeoutError, MagentoAuthError)


class TestMagentoError:
    """Tests for base MagentoError."""

    def test_stores_message(self) -> None:
        error = MagentoError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"


class TestMagentoAuthError:
    """Tests for MagentoAuthError and its subclasses."""

    def test_stores_stage(self) -> None:
        error = MagentoAuthError("Rejected", stage="request_token")

        assert error.stage == "request_token"
        assert error.message == "Rejected"

    def test_stage_defaults_to_none(self) -> None:
        assert MagentoAuthError("Rejected").stage is None

    def test_verifier_timeout(self) -> None:
        error = VerifierTimeoutError("No verifier", attempts=300)

        assert error.attempts == 300
        assert error.stage == "verifier"

    def test_token_error(self) -> None:
        error = MagentoTokenError("Unknown token", token="abc")

        assert error.token == "abc"
        assert error.stage == "token_lookup"

    def test_can_catch_as_magento_error(self) -> None:
        with pytest.raises(MagentoError):
            raise VerifierTimeoutError("No verifier", attempts=1)


class TestMagentoTransportError:
    """Tests for MagentoTransportError."""

    def test_stores_url_and_status(self) -> None:
        error = MagentoTransportError(
            "Unauthorized", url="http://store.test/api/rest/orders", status_code=401
        )

        assert error.url == "http://store.test/api/rest/orders"
        assert error.status_code == 401

    def test_status_is_optional(self) -> None:
        """Connection failures carry no status code."""
        assert MagentoTransportError("Connection refused").status_code is None


class TestMagentoParseError:
    """Tests for MagentoParseError."""

    def test_payload_in_string(self) -> None:
        error = MagentoParseError("Can't parse orders response", payload="<html>")

        assert error.payload == "<html>"
        assert error.message == "Can't parse orders response\nPayload: <html>"
        assert "<html>" in str(error)


class TestMagentoValidationError:
    """Tests for MagentoValidationError."""

    def test_stores_field(self) -> None:
        error = MagentoValidationError("Must not be empty", field="consumer_key")

        assert error.field == "consumer_key"
