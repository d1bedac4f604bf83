"""SDK user data models."""

from pydantic import BaseModel, ConfigDict, Field


class SdkUser(BaseModel):
    """A user registered through the SDK."""

    id: str = Field(..., description="User identifier assigned by the server")
    email: str | None = None
    name: str | None = None
    external_id: str | None = Field(
        None, description="Identifier in the host application's user system"
    )
    metadata: dict[str, str] | None = None
    created_at: str | None = None

    model_config = ConfigDict(frozen=True)


class RegisterUserRequest(BaseModel):
    """Request body for registering a user."""

    email: str | None = None
    name: str | None = None
    external_id: str | None = None
    metadata: dict[str, str] | None = None

    model_config = ConfigDict(frozen=True)
