"""Event tracking models."""

from pydantic import BaseModel, ConfigDict, Field


class TrackedEvent(BaseModel):
    """An analytics event sent to the tracking endpoint."""

    name: str
    properties: dict[str, str] | None = None
    user_id: str | None = None
    timestamp: str | None = Field(None, description="ISO timestamp of the event")

    model_config = ConfigDict(frozen=True)


class TrackEventResponse(BaseModel):
    success: bool
    event_id: str | None = None
