"""Comment data models."""

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """A comment attached to a feedback item."""

    id: str = Field(..., description="Comment identifier")
    feedback_id: str = Field(..., description="Feedback this comment belongs to")
    content: str
    user_id: str | None = None
    user_name: str | None = Field(None, description="Display name of the author")
    is_official: bool = Field(
        default=False, description="Whether the comment was posted by the team"
    )
    created_at: str = Field(..., description="ISO timestamp when comment was created")
    updated_at: str | None = None

    model_config = ConfigDict(frozen=True)


class CreateCommentRequest(BaseModel):
    """Request body for posting a comment."""

    content: str
    user_id: str | None = None
    user_name: str | None = None

    model_config = ConfigDict(frozen=True)
