"""Feedback data models."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class FeedbackStatus(str, Enum):
    """Lifecycle status of a feedback item."""

    PENDING = "pending"
    APPROVED = "approved"
    IN_PROGRESS = "in_progress"
    TESTFLIGHT = "testflight"
    COMPLETED = "completed"
    REJECTED = "rejected"

    @property
    def can_vote(self) -> bool:
        """Voting is closed once feedback is completed or rejected."""
        return self not in (FeedbackStatus.COMPLETED, FeedbackStatus.REJECTED)

    @property
    def display_name(self) -> str:
        """English display label."""
        return STATUS_DISPLAY_NAMES[self]

    @property
    def wire_value(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, value: str) -> "FeedbackStatus | None":
        """Parse a wire string, case-insensitively. Returns None if unrecognized."""
        return _STATUS_ALIASES.get(value.lower())


class FeedbackCategory(str, Enum):
    """Kind of feedback being submitted."""

    FEATURE_REQUEST = "feature_request"
    BUG_REPORT = "bug_report"
    IMPROVEMENT = "improvement"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        """English display label."""
        return CATEGORY_DISPLAY_NAMES[self]

    @property
    def wire_value(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, value: str) -> "FeedbackCategory | None":
        """Parse a wire string, case-insensitively. Returns None if unrecognized."""
        return _CATEGORY_ALIASES.get(value.lower())


STATUS_DISPLAY_NAMES: dict[FeedbackStatus, str] = {
    FeedbackStatus.PENDING: "Pending",
    FeedbackStatus.APPROVED: "Approved",
    FeedbackStatus.IN_PROGRESS: "In Progress",
    FeedbackStatus.TESTFLIGHT: "TestFlight",
    FeedbackStatus.COMPLETED: "Completed",
    FeedbackStatus.REJECTED: "Rejected",
}

CATEGORY_DISPLAY_NAMES: dict[FeedbackCategory, str] = {
    FeedbackCategory.FEATURE_REQUEST: "Feature Request",
    FeedbackCategory.BUG_REPORT: "Bug Report",
    FeedbackCategory.IMPROVEMENT: "Improvement",
    FeedbackCategory.OTHER: "Other",
}

_STATUS_ALIASES: dict[str, FeedbackStatus] = {
    **{status.value: status for status in FeedbackStatus},
    "inprogress": FeedbackStatus.IN_PROGRESS,
}

_CATEGORY_ALIASES: dict[str, FeedbackCategory] = {
    **{category.value: category for category in FeedbackCategory},
    "featurerequest": FeedbackCategory.FEATURE_REQUEST,
    "bugreport": FeedbackCategory.BUG_REPORT,
}


def _parse_status(value):
    if isinstance(value, str):
        status = FeedbackStatus.from_wire(value)
        if status is None:
            raise ValueError(f"Unrecognized feedback status: {value!r}")
        return status
    return value


def _parse_category(value):
    if isinstance(value, str):
        category = FeedbackCategory.from_wire(value)
        if category is None:
            raise ValueError(f"Unrecognized feedback category: {value!r}")
        return category
    return value


# Enum fields decode through from_wire so casing and aliases are accepted
StatusField = Annotated[FeedbackStatus, BeforeValidator(_parse_status)]
CategoryField = Annotated[FeedbackCategory, BeforeValidator(_parse_category)]


class Feedback(BaseModel):
    """A feedback item as returned by the API."""

    id: str = Field(..., description="Feedback identifier")
    title: str
    description: str
    status: StatusField
    category: CategoryField
    vote_count: int = Field(..., ge=0, description="Number of votes")
    has_voted: bool = Field(..., description="Whether the active user has voted")
    comment_count: int = Field(..., ge=0, description="Number of comments")
    created_at: str = Field(..., description="ISO timestamp when feedback was created")
    updated_at: str | None = Field(None, description="ISO timestamp of last update")
    user_id: str | None = Field(None, description="Submitting user, if known")
    email: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def can_vote(self) -> bool:
        """Whether this feedback accepts votes in its current status."""
        return self.status.can_vote

    def with_vote(self, has_voted: bool, vote_count: int) -> "Feedback":
        """Copy with updated vote state."""
        return self.model_copy(update={"has_voted": has_voted, "vote_count": vote_count})

    def with_comment_count(self, count: int) -> "Feedback":
        return self.model_copy(update={"comment_count": count})

    def with_status(self, status: FeedbackStatus) -> "Feedback":
        return self.model_copy(update={"status": status})


class CreateFeedbackRequest(BaseModel):
    """Request body for submitting new feedback.

    Content is not validated locally; the server rejects blank fields with a
    400, raised as ``feedbackkit.ValidationError``.
    """

    title: str
    description: str
    category: CategoryField
    email: str | None = None
    user_id: str | None = None
    subscribe_to_mailing_list: bool | None = Field(
        None, serialization_alias="subscribeToMailingList"
    )
    mailing_list_email_types: list[str] | None = Field(
        None, serialization_alias="mailingListEmailTypes"
    )

    model_config = ConfigDict(frozen=True)


class ListFeedbackOptions(BaseModel):
    """Filters and pagination for listing feedback."""

    status: FeedbackStatus | None = None
    category: FeedbackCategory | None = None
    page: int | None = Field(None, ge=1)
    per_page: int | None = Field(None, ge=1)

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> dict[str, str]:
        """Query parameters for the set filters only."""
        params: dict[str, str] = {}
        if self.status is not None:
            params["status"] = self.status.wire_value
        if self.category is not None:
            params["category"] = self.category.wire_value
        if self.page is not None:
            params["page"] = str(self.page)
        if self.per_page is not None:
            params["per_page"] = str(self.per_page)
        return params
