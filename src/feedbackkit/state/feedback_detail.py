"""State holder for a single feedback item and its comments."""

import logging

from feedbackkit.errors import FeedbackKitError
from feedbackkit.models.comment import Comment
from feedbackkit.models.feedback import Feedback
from feedbackkit.models.vote import VoteResponse
from feedbackkit.services.comment_service import CommentService

logger = logging.getLogger(__name__)


class FeedbackDetailState:
    """Holds one feedback item, its comments, and comment loading/posting state."""

    def __init__(self, comments: CommentService, feedback: Feedback):
        self.comment_service = comments
        self.feedback = feedback
        self.comments: list[Comment] = []
        self.is_loading_comments = False
        self.comments_error: FeedbackKitError | None = None
        self.is_posting = False
        self.post_error: FeedbackKitError | None = None

    def load_comments(self) -> list[Comment]:
        """Fetch comments. On failure the error is stored and the current comments kept."""
        self.is_loading_comments = True
        self.comments_error = None
        try:
            self.comments = self.comment_service.list(self.feedback.id)
        except Exception as e:
            self.comments_error = FeedbackKitError.from_exception(e)
            logger.warning(
                "Failed to load comments for %s: %r", self.feedback.id, self.comments_error
            )
        finally:
            self.is_loading_comments = False
        return self.comments

    def add_comment(self, content: str, user_name: str | None = None) -> Comment | None:
        """Post a comment and append it. Returns None if posting failed."""
        if self.is_posting or not content.strip():
            return None

        self.is_posting = True
        self.post_error = None
        try:
            comment = self.comment_service.add(
                self.feedback.id, content.strip(), user_name=user_name
            )
        except Exception as e:
            self.post_error = FeedbackKitError.from_exception(e)
            logger.warning(
                "Failed to post comment on %s: %r", self.feedback.id, self.post_error
            )
            return None
        finally:
            self.is_posting = False

        self.comments = self.comments + [comment]
        self.feedback = self.feedback.with_comment_count(self.feedback.comment_count + 1)
        return comment

    def apply_vote(self, response: VoteResponse) -> Feedback:
        """Adopt the vote state returned by the server."""
        self.feedback = self.feedback.with_vote(response.has_voted, response.vote_count)
        return self.feedback
