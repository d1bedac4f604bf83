"""Error types raised by the FeedbackKit SDK.

Every failure surfaced by the transport or the resource services is one of the
``FeedbackKitError`` subclasses below. Each carries an ``ErrorKind`` tag so
callers can branch on ``error.kind`` instead of on the class.
"""

import socket
from enum import Enum

import requests
from urllib3.exceptions import NameResolutionError


class ErrorKind(str, Enum):
    """Closed set of error categories."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PAYMENT_REQUIRED = "payment_required"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER = "server"
    NETWORK = "network"
    UNKNOWN = "unknown"


RECOVERABLE_KINDS = frozenset({ErrorKind.NETWORK, ErrorKind.SERVER})

USER_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: "Authentication failed. Please check your API key.",
    ErrorKind.PAYMENT_REQUIRED: "This feature requires a subscription upgrade.",
    ErrorKind.FORBIDDEN: "You don't have permission to perform this action.",
    ErrorKind.NOT_FOUND: "The requested item was not found.",
    ErrorKind.SERVER: "Server error. Please try again later.",
    ErrorKind.UNKNOWN: "An unexpected error occurred.",
}


class FeedbackKitError(Exception):
    """Base class for all classified SDK errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    default_message = "An unknown error occurred"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        code: str | None = None,
    ):
        self.message = message or self.default_message
        self.status_code = status_code
        self.code = code
        super().__init__(self.message)

    @property
    def is_recoverable(self) -> bool:
        """Whether retrying the same operation may succeed."""
        return self.kind in RECOVERABLE_KINDS

    @property
    def user_message(self) -> str:
        """Stable, non-technical message suitable for display."""
        return USER_MESSAGES.get(self.kind, self.message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )

    @staticmethod
    def from_status_code(status_code: int, message: str) -> "FeedbackKitError":
        """Map an HTTP error status to the matching error type."""
        error_class = STATUS_CODE_ERRORS.get(status_code)
        if error_class is not None:
            return error_class(message)
        if 500 <= status_code <= 599:
            return ServerError(message, status_code=status_code)
        return UnknownError(message)

    @staticmethod
    def from_exception(exc: BaseException) -> "FeedbackKitError":
        """Classify an arbitrary exception. Classified errors pass through."""
        if isinstance(exc, FeedbackKitError):
            return exc
        if isinstance(exc, (requests.exceptions.Timeout, TimeoutError)):
            return NetworkError("Request timed out", is_timeout=True)
        if _is_name_resolution_failure(exc):
            return NetworkError("Unable to reach server")
        if isinstance(exc, (requests.exceptions.ConnectionError, ConnectionError)):
            return NetworkError("Connection failed")
        if isinstance(exc, OSError):
            return NetworkError(str(exc) or NetworkError.default_message)
        return UnknownError(str(exc) or UnknownError.default_message, cause=exc)


class ValidationError(FeedbackKitError):
    """Request data was rejected (400), or a local precondition failed."""

    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"

    def __init__(
        self, message: str | None = None, field_errors: dict[str, str] | None = None
    ):
        super().__init__(message, status_code=400, code="BAD_REQUEST")
        self.field_errors = field_errors or {}

    @property
    def user_message(self) -> str:
        return self.message


class AuthenticationError(FeedbackKitError):
    """The API key is invalid or missing (401)."""

    kind = ErrorKind.AUTHENTICATION
    default_message = "Invalid or missing API key"

    def __init__(self, message: str | None = None):
        super().__init__(message, status_code=401, code="UNAUTHORIZED")


class PaymentRequiredError(FeedbackKitError):
    """The subscription tier does not allow this action (402)."""

    kind = ErrorKind.PAYMENT_REQUIRED
    default_message = "Subscription upgrade required"

    def __init__(self, message: str | None = None):
        super().__init__(message, status_code=402, code="PAYMENT_REQUIRED")


class ForbiddenError(FeedbackKitError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Access denied"

    def __init__(self, message: str | None = None):
        super().__init__(message, status_code=403, code="FORBIDDEN")


class NotFoundError(FeedbackKitError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"

    def __init__(self, message: str | None = None):
        super().__init__(message, status_code=404, code="NOT_FOUND")


class ConflictError(FeedbackKitError):
    """The action conflicts with current state, e.g. a duplicate vote (409)."""

    kind = ErrorKind.CONFLICT
    default_message = "Conflict with current state"

    def __init__(self, message: str | None = None):
        super().__init__(message, status_code=409, code="CONFLICT")

    @property
    def user_message(self) -> str:
        return self.message


class ServerError(FeedbackKitError):
    kind = ErrorKind.SERVER
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int = 500):
        super().__init__(message, status_code=status_code, code="SERVER_ERROR")


class NetworkError(FeedbackKitError):
    """Connectivity failure. Timeouts are flagged with ``is_timeout``."""

    kind = ErrorKind.NETWORK
    default_message = "Network error"

    def __init__(self, message: str | None = None, is_timeout: bool = False):
        super().__init__(
            message,
            status_code=0,
            code="TIMEOUT" if is_timeout else "NETWORK_ERROR",
        )
        self.is_timeout = is_timeout

    @property
    def user_message(self) -> str:
        if self.is_timeout:
            return "Request timed out. Please try again."
        return "Network error. Please check your connection."


class UnknownError(FeedbackKitError):
    """Anything unclassified. The original exception is kept as ``cause``."""

    kind = ErrorKind.UNKNOWN
    default_message = "An unknown error occurred"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        super().__init__(message, status_code=None, code="UNKNOWN")
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


STATUS_CODE_ERRORS: dict[int, type[FeedbackKitError]] = {
    400: ValidationError,
    401: AuthenticationError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


class NotConfiguredError(RuntimeError):
    """The shared SDK instance was used before ``configure()`` was called."""

    def __init__(self):
        super().__init__(
            "FeedbackKit has not been configured. Call feedbackkit.configure() first."
        )


def _is_name_resolution_failure(exc: BaseException) -> bool:
    """Walk the exception chain looking for a DNS lookup failure."""
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, (socket.gaierror, NameResolutionError)):
            return True
        # requests wraps urllib3's MaxRetryError, which keeps the root failure in .reason
        reason = getattr(current, "reason", None)
        if isinstance(reason, BaseException) and id(reason) not in seen:
            current = reason
            continue
        if current.args and isinstance(current.args[0], BaseException):
            current = current.args[0]
            continue
        current = current.__cause__ or current.__context__
    return False
