"""Vote request and response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VoteRequest(BaseModel):
    """Request body for casting a vote.

    Unlike the other request bodies, the vote endpoint expects camelCase keys.
    """

    user_id: str
    notify_on_status_change: bool = False
    subscribe_to_mailing_list: bool | None = None
    mailing_list_email_types: list[str] | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VoteResponse(BaseModel):
    """Server state after a vote or unvote. Always authoritative."""

    success: bool
    vote_count: int = Field(..., ge=0)
    has_voted: bool

    model_config = ConfigDict(frozen=True)
