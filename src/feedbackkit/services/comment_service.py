"""Comment resource service."""

from pydantic import TypeAdapter

from feedbackkit.models.comment import Comment, CreateCommentRequest
from feedbackkit.services.http_client import HttpClient

_comment_list = TypeAdapter(list[Comment])


class CommentService:
    """List and post comments on a feedback item."""

    def __init__(self, http: HttpClient):
        self.http = http

    def list(
        self, feedback_id: str, page: int | None = None, per_page: int | None = None
    ) -> list[Comment]:
        query_params = {}
        if page is not None:
            query_params["page"] = str(page)
        if per_page is not None:
            query_params["per_page"] = str(per_page)

        return self.http.get(
            f"feedbacks/{feedback_id}/comments",
            _comment_list.validate_json,
            query_params=query_params,
        )

    def create(self, feedback_id: str, request: CreateCommentRequest) -> Comment:
        """Post a comment, attributing it to the active user if unset."""
        if request.user_id is None and self.http.user_id is not None:
            request = request.model_copy(update={"user_id": self.http.user_id})

        return self.http.post(
            f"feedbacks/{feedback_id}/comments",
            Comment.model_validate_json,
            body=request.model_dump_json(),
        )

    def add(
        self, feedback_id: str, content: str, user_name: str | None = None
    ) -> Comment:
        return self.create(
            feedback_id, CreateCommentRequest(content=content, user_name=user_name)
        )
