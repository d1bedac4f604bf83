"""Vote resource service."""

from feedbackkit.errors import ValidationError
from feedbackkit.models.vote import VoteRequest, VoteResponse
from feedbackkit.services.http_client import HttpClient
from feedbackkit.utils.constants import USER_ID_PARAM


class VoteService:
    """Cast and remove votes. Both require an active user ID."""

    def __init__(self, http: HttpClient):
        self.http = http

    def vote(
        self,
        feedback_id: str,
        notify_on_status_change: bool = False,
        subscribe_to_mailing_list: bool | None = None,
        mailing_list_email_types: list[str] | None = None,
    ) -> VoteResponse:
        """Vote for a feedback item.

        Args:
            feedback_id: Feedback to vote for
            notify_on_status_change: Email the user when the status changes
            subscribe_to_mailing_list: Opt the user into the project's mailing list
            mailing_list_email_types: Email types to subscribe to

        Returns:
            The server's vote state after the vote

        Raises:
            ValidationError: If no user ID is set (no request is made)
            ConflictError: If the user already voted
        """
        user_id = self.http.user_id
        if user_id is None:
            raise ValidationError("User ID is required for voting")

        request = VoteRequest(
            user_id=user_id,
            notify_on_status_change=notify_on_status_change,
            subscribe_to_mailing_list=subscribe_to_mailing_list,
            mailing_list_email_types=mailing_list_email_types,
        )
        return self.http.post(
            f"feedbacks/{feedback_id}/votes",
            VoteResponse.model_validate_json,
            body=request.model_dump_json(by_alias=True),
        )

    def unvote(self, feedback_id: str) -> VoteResponse:
        """Remove the active user's vote.

        Raises:
            ValidationError: If no user ID is set (no request is made)
            NotFoundError: If the user had not voted
        """
        user_id = self.http.user_id
        if user_id is None:
            raise ValidationError("User ID is required for unvoting")

        return self.http.delete(
            f"feedbacks/{feedback_id}/votes",
            VoteResponse.model_validate_json,
            query_params={USER_ID_PARAM: user_id},
        )

    def toggle_vote(
        self,
        feedback_id: str,
        has_voted: bool,
        notify_on_status_change: bool = False,
        subscribe_to_mailing_list: bool | None = None,
        mailing_list_email_types: list[str] | None = None,
    ) -> VoteResponse:
        """Unvote if ``has_voted`` is true, otherwise vote."""
        if has_voted:
            return self.unvote(feedback_id)
        return self.vote(
            feedback_id,
            notify_on_status_change=notify_on_status_change,
            subscribe_to_mailing_list=subscribe_to_mailing_list,
            mailing_list_email_types=mailing_list_email_types,
        )
