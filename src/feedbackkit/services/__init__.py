"""Resource services for the FeedbackKit API."""

from .comment_service import CommentService
from .event_service import EventService
from .feedback_service import FeedbackService
from .http_client import HttpClient
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "HttpClient",
    "FeedbackService",
    "VoteService",
    "CommentService",
    "UserService",
    "EventService",
]
