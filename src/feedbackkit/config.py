"""SDK configuration."""

import os
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from feedbackkit.utils.constants import API_PATH, DEFAULT_TIMEOUT_MS


class Environment(str, Enum):
    """Predefined API environments."""

    PRODUCTION = "production"
    STAGING = "staging"
    LOCAL = "local"  # Android emulator host loopback
    LOCAL_DEVICE = "local_device"

    @property
    def base_url(self) -> str:
        return ENVIRONMENT_BASE_URLS[self]


ENVIRONMENT_BASE_URLS: dict[Environment, str] = {
    Environment.PRODUCTION: "https://feedbackkit.swiftly-workspace.com",
    Environment.STAGING: "https://api.feedbackkit.testflight.swiftly-developed.com",
    Environment.LOCAL: "http://10.0.2.2:8080",
    Environment.LOCAL_DEVICE: "http://localhost:8080",
}


class FeedbackKitConfig(BaseModel):
    """Immutable SDK configuration."""

    api_key: str = Field(..., description="API key sent with every request")
    base_url: str = Field(
        default=Environment.PRODUCTION.base_url, description="API host, without /api/v1"
    )
    user_id: str | None = Field(None, description="Initial active user ID")
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS, gt=0, description="Connect/read timeout in ms"
    )
    debug: bool = Field(default=False, description="Log every request and response")

    model_config = ConfigDict(frozen=True)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("API key is required")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Base URL is required")
        return v.strip()

    @property
    def api_url(self) -> str:
        """Full API root, e.g. ``https://host/api/v1``."""
        return f"{self.base_url.rstrip('/')}{API_PATH}"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def with_user_id(self, user_id: str | None) -> "FeedbackKitConfig":
        """Copy with a different initial user ID."""
        return self.model_copy(update={"user_id": user_id})

    @classmethod
    def build(
        cls,
        api_key: str,
        environment: Environment | str | None = None,
        base_url: str | None = None,
        user_id: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> "FeedbackKitConfig":
        """Build a config from an environment preset or a custom base URL.

        An explicit ``base_url`` wins over ``environment``. With neither,
        production is used.

        Raises:
            pydantic.ValidationError: If the API key is blank or a value is invalid
        """
        if base_url is None:
            if isinstance(environment, Environment):
                env = environment
            elif environment:
                env = Environment(environment.lower())
            else:
                env = Environment.PRODUCTION
            base_url = env.base_url
        return cls(
            api_key=api_key,
            base_url=base_url,
            user_id=user_id,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    @classmethod
    def from_env(cls) -> "FeedbackKitConfig":
        """Build a config from FEEDBACKKIT_* environment variables."""
        timeout = os.environ.get("FEEDBACKKIT_TIMEOUT_MS")
        return cls.build(
            api_key=os.environ.get("FEEDBACKKIT_API_KEY", ""),
            environment=os.environ.get("FEEDBACKKIT_ENVIRONMENT"),
            base_url=os.environ.get("FEEDBACKKIT_BASE_URL"),
            user_id=os.environ.get("FEEDBACKKIT_USER_ID") or None,
            timeout_ms=int(timeout) if timeout else DEFAULT_TIMEOUT_MS,
            debug=os.environ.get("FEEDBACKKIT_DEBUG", "false").lower() == "true",
        )
