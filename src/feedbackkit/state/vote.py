"""Optimistic vote toggling.

A toggle is a two-phase transition: the tentative state is applied at once
and the pre-toggle state is recorded. The server's ``VoteResponse`` then
replaces the tentative state, or the recorded state is restored on failure.
The transition functions are pure so they can be tested without a UI.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from feedbackkit.errors import FeedbackKitError
from feedbackkit.models.feedback import Feedback
from feedbackkit.models.vote import VoteResponse
from feedbackkit.services.vote_service import VoteService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoteState:
    """Local vote state for one feedback item."""

    has_voted: bool
    vote_count: int

    def toggled(self) -> "VoteState":
        """Flip the vote and adjust the count by one."""
        if self.has_voted:
            return VoteState(has_voted=False, vote_count=max(self.vote_count - 1, 0))
        return VoteState(has_voted=True, vote_count=self.vote_count + 1)

    def reconciled(self, response: VoteResponse) -> "VoteState":
        return VoteState(has_voted=response.has_voted, vote_count=response.vote_count)


@dataclass(frozen=True)
class PendingVote:
    previous: VoteState
    optimistic: VoteState


def begin_vote(state: VoteState) -> PendingVote:
    return PendingVote(previous=state, optimistic=state.toggled())


def resolve_vote(pending: PendingVote, response: VoteResponse) -> VoteState:
    """The server's answer wins over the optimistic guess."""
    return pending.optimistic.reconciled(response)


def rollback_vote(pending: PendingVote) -> VoteState:
    return pending.previous


class VoteController:
    """Vote button logic with optimistic updates.

    ``toggle()`` does not raise: a failed request restores the previous state,
    stores the error in ``last_error`` and passes it to ``on_error`` if given.
    """

    def __init__(
        self,
        votes: VoteService,
        feedback_id: str,
        has_voted: bool,
        vote_count: int,
        can_vote: bool = True,
        notify_on_status_change: bool = False,
        on_vote_change: Callable[[VoteResponse], None] | None = None,
        on_error: Callable[[FeedbackKitError], None] | None = None,
    ):
        self.votes = votes
        self.feedback_id = feedback_id
        self.can_vote = can_vote
        self.notify_on_status_change = notify_on_status_change
        self.on_vote_change = on_vote_change
        self.on_error = on_error

        self.state = VoteState(has_voted=has_voted, vote_count=vote_count)
        self.is_loading = False
        self.last_error: FeedbackKitError | None = None
        self._lock = threading.Lock()

    @classmethod
    def for_feedback(
        cls, votes: VoteService, feedback: Feedback, **kwargs
    ) -> "VoteController":
        """Controller seeded from a feedback item; disabled if it no longer accepts votes."""
        kwargs.setdefault("can_vote", feedback.can_vote)
        return cls(
            votes,
            feedback.id,
            has_voted=feedback.has_voted,
            vote_count=feedback.vote_count,
            **kwargs,
        )

    @property
    def has_voted(self) -> bool:
        return self.state.has_voted

    @property
    def vote_count(self) -> int:
        return self.state.vote_count

    def toggle(self) -> VoteResponse | None:
        """Toggle the vote.

        Returns:
            The server's response, or None if the toggle was ignored (voting
            disabled or a toggle already in flight) or failed
        """
        with self._lock:
            if not self.can_vote or self.is_loading:
                return None
            pending = begin_vote(self.state)
            self.state = pending.optimistic
            self.is_loading = True
            self.last_error = None

        try:
            if pending.previous.has_voted:
                response = self.votes.unvote(self.feedback_id)
            else:
                response = self.votes.vote(
                    self.feedback_id,
                    notify_on_status_change=self.notify_on_status_change,
                )
        except Exception as e:
            error = FeedbackKitError.from_exception(e)
            with self._lock:
                self.state = rollback_vote(pending)
                self.last_error = error
                self.is_loading = False
            logger.warning(
                "Vote toggle for %s failed, reverted: %r", self.feedback_id, error
            )
            if self.on_error is not None:
                self.on_error(error)
            return None

        with self._lock:
            self.state = resolve_vote(pending, response)
            self.is_loading = False
        if self.on_vote_change is not None:
            self.on_vote_change(response)
        return response
