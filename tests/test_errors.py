"""Tests for error classification."""

import socket

import pytest
import requests
from urllib3.exceptions import MaxRetryError, NameResolutionError

from feedbackkit.errors import (
    AuthenticationError,
    ConflictError,
    ErrorKind,
    FeedbackKitError,
    ForbiddenError,
    NetworkError,
    NotConfiguredError,
    NotFoundError,
    PaymentRequiredError,
    ServerError,
    UnknownError,
    ValidationError,
)


class TestFromStatusCode:
    """Test HTTP status to error mapping."""

    @pytest.mark.parametrize(
        "status,error_class,kind",
        [
            (400, ValidationError, ErrorKind.VALIDATION),
            (401, AuthenticationError, ErrorKind.AUTHENTICATION),
            (402, PaymentRequiredError, ErrorKind.PAYMENT_REQUIRED),
            (403, ForbiddenError, ErrorKind.FORBIDDEN),
            (404, NotFoundError, ErrorKind.NOT_FOUND),
            (409, ConflictError, ErrorKind.CONFLICT),
        ],
    )
    def test_client_errors(self, status, error_class, kind):
        error = FeedbackKitError.from_status_code(status, "boom")

        assert isinstance(error, error_class)
        assert error.kind == kind
        assert error.status_code == status
        assert error.message == "boom"

    @pytest.mark.parametrize("status", [500, 502, 503, 599])
    def test_server_errors_keep_status(self, status):
        error = FeedbackKitError.from_status_code(status, "down")

        assert isinstance(error, ServerError)
        assert error.status_code == status

    @pytest.mark.parametrize("status", [302, 418, 429, 600])
    def test_other_statuses_are_unknown(self, status):
        error = FeedbackKitError.from_status_code(status, "odd")
        assert isinstance(error, UnknownError)

    def test_empty_message_uses_default(self):
        error = FeedbackKitError.from_status_code(404, "")
        assert error.message == "Resource not found"


class TestFromException:
    """Test classification of transport exceptions."""

    def test_classified_error_passes_through(self):
        original = ConflictError("Already voted")
        assert FeedbackKitError.from_exception(original) is original

    def test_requests_timeout(self):
        error = FeedbackKitError.from_exception(requests.exceptions.ReadTimeout())

        assert isinstance(error, NetworkError)
        assert error.is_timeout is True
        assert error.code == "TIMEOUT"
        assert error.message == "Request timed out"

    def test_builtin_timeout(self):
        error = FeedbackKitError.from_exception(TimeoutError())
        assert isinstance(error, NetworkError)
        assert error.is_timeout is True

    def test_gaierror(self):
        error = FeedbackKitError.from_exception(socket.gaierror(-2, "Name unknown"))

        assert isinstance(error, NetworkError)
        assert error.message == "Unable to reach server"
        assert error.is_timeout is False

    def test_wrapped_name_resolution_failure(self):
        """Test DNS failures are found through requests' wrapping."""
        dns_error = NameResolutionError("api.example.com", None, socket.gaierror())
        retry_error = MaxRetryError(None, "/api/v1/feedbacks", reason=dns_error)
        wrapped = requests.exceptions.ConnectionError(retry_error)

        error = FeedbackKitError.from_exception(wrapped)

        assert isinstance(error, NetworkError)
        assert error.message == "Unable to reach server"

    def test_connection_error(self):
        error = FeedbackKitError.from_exception(requests.exceptions.ConnectionError())

        assert isinstance(error, NetworkError)
        assert error.message == "Connection failed"
        assert error.code == "NETWORK_ERROR"

    def test_connection_refused(self):
        error = FeedbackKitError.from_exception(ConnectionRefusedError())
        assert error.message == "Connection failed"

    def test_other_io_error(self):
        error = FeedbackKitError.from_exception(OSError("Broken pipe"))

        assert isinstance(error, NetworkError)
        assert error.message == "Broken pipe"

    def test_anything_else_is_unknown(self):
        cause = KeyError("missing")
        error = FeedbackKitError.from_exception(cause)

        assert isinstance(error, UnknownError)
        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.status_code is None


class TestErrorProperties:
    """Test recoverability and display messages."""

    def test_only_network_and_server_are_recoverable(self):
        assert NetworkError().is_recoverable is True
        assert ServerError().is_recoverable is True
        for error in (
            ValidationError(),
            AuthenticationError(),
            PaymentRequiredError(),
            ForbiddenError(),
            NotFoundError(),
            ConflictError(),
            UnknownError(),
        ):
            assert error.is_recoverable is False

    def test_user_message_for_validation_uses_message(self):
        assert ValidationError("Title is required").user_message == "Title is required"

    def test_user_message_for_conflict_uses_message(self):
        assert ConflictError("Already voted").user_message == "Already voted"

    def test_user_message_fixed_texts(self):
        assert (
            AuthenticationError("bad key").user_message
            == "Authentication failed. Please check your API key."
        )
        assert ServerError("stack trace").user_message == (
            "Server error. Please try again later."
        )
        assert NetworkError(is_timeout=True).user_message == (
            "Request timed out. Please try again."
        )
        assert NetworkError().user_message == (
            "Network error. Please check your connection."
        )

    def test_network_error_status_is_zero(self):
        assert NetworkError().status_code == 0

    def test_validation_field_errors(self):
        error = ValidationError("Invalid", field_errors={"title": "required"})
        assert error.field_errors == {"title": "required"}
        assert error.code == "BAD_REQUEST"

    def test_not_configured_message(self):
        assert "configure()" in str(NotConfiguredError())
