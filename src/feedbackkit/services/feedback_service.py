"""Feedback resource service."""

from typing import List

from pydantic import TypeAdapter

from feedbackkit.models.feedback import (
    CreateFeedbackRequest,
    Feedback,
    FeedbackCategory,
    ListFeedbackOptions,
)
from feedbackkit.services.http_client import HttpClient
from feedbackkit.utils.constants import USER_ID_PARAM

_feedback_list = TypeAdapter(list[Feedback])


class FeedbackService:
    """List, fetch and create feedback items."""

    def __init__(self, http: HttpClient):
        self.http = http

    def list(self, options: ListFeedbackOptions | None = None) -> list[Feedback]:
        """List feedback in server order.

        The active user ID is sent as ``user_id`` so the server can fill in
        ``has_voted`` for each item.
        """
        query_params = (options or ListFeedbackOptions()).to_query_params()
        if self.http.user_id is not None:
            query_params[USER_ID_PARAM] = self.http.user_id

        return self.http.get(
            "feedbacks", _feedback_list.validate_json, query_params=query_params
        )

    def get(self, feedback_id: str) -> Feedback:
        """Fetch a single feedback item."""
        query_params = {}
        if self.http.user_id is not None:
            query_params[USER_ID_PARAM] = self.http.user_id

        return self.http.get(
            f"feedbacks/{feedback_id}",
            Feedback.model_validate_json,
            query_params=query_params,
        )

    def create(self, request: CreateFeedbackRequest) -> Feedback:
        """Submit new feedback, attributing it to the active user if unset."""
        if request.user_id is None and self.http.user_id is not None:
            request = request.model_copy(update={"user_id": self.http.user_id})

        body = request.model_dump_json(by_alias=True)
        return self.http.post("feedbacks", Feedback.model_validate_json, body=body)

    def submit(
        self,
        title: str,
        description: str,
        category: FeedbackCategory,
        email: str | None = None,
        subscribe_to_mailing_list: bool | None = None,
        mailing_list_email_types: List[str] | None = None,
    ) -> Feedback:
        """Submit new feedback from individual fields."""
        return self.create(
            CreateFeedbackRequest(
                title=title,
                description=description,
                category=category,
                email=email,
                subscribe_to_mailing_list=subscribe_to_mailing_list,
                mailing_list_email_types=mailing_list_email_types,
            )
        )
