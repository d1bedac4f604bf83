"""UI-facing state holders built on the resource services."""

from .feedback_detail import FeedbackDetailState
from .feedback_list import FeedbackListState, ListPhase
from .submit_form import SubmitFeedbackForm
from .vote import (
    PendingVote,
    VoteController,
    VoteState,
    begin_vote,
    resolve_vote,
    rollback_vote,
)

__all__ = [
    "FeedbackListState",
    "ListPhase",
    "FeedbackDetailState",
    "SubmitFeedbackForm",
    "VoteState",
    "PendingVote",
    "VoteController",
    "begin_vote",
    "resolve_vote",
    "rollback_vote",
]
