"""Data models for the FeedbackKit API."""

from .comment import Comment, CreateCommentRequest
from .event import TrackedEvent, TrackEventResponse
from .feedback import (
    CreateFeedbackRequest,
    Feedback,
    FeedbackCategory,
    FeedbackStatus,
    ListFeedbackOptions,
)
from .user import RegisterUserRequest, SdkUser
from .vote import VoteRequest, VoteResponse

__all__ = [
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
