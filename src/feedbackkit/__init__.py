"""FeedbackKit client SDK."""

from .client import FeedbackKit, configure, get_shared, is_configured, reset
from .config import Environment, FeedbackKitConfig
from .errors import (
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
from .models import (
    Comment,
    CreateCommentRequest,
    CreateFeedbackRequest,
    Feedback,
    FeedbackCategory,
    FeedbackStatus,
    ListFeedbackOptions,
    RegisterUserRequest,
    SdkUser,
    TrackedEvent,
    TrackEventResponse,
    VoteRequest,
    VoteResponse,
)

__version__ = "1.0.0"

__all__ = [
    "FeedbackKit",
    "configure",
    "get_shared",
    "is_configured",
    "reset",
    "Environment",
    "FeedbackKitConfig",
    "ErrorKind",
    "FeedbackKitError",
    "ValidationError",
    "AuthenticationError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "NetworkError",
    "UnknownError",
    "NotConfiguredError",
    "Feedback",
    "FeedbackStatus",
    "FeedbackCategory",
    "CreateFeedbackRequest",
    "ListFeedbackOptions",
    "Comment",
    "CreateCommentRequest",
    "SdkUser",
    "RegisterUserRequest",
    "TrackedEvent",
    "TrackEventResponse",
    "VoteRequest",
    "VoteResponse",
]
