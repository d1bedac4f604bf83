"""SDK user service."""

from feedbackkit.models.user import RegisterUserRequest, SdkUser
from feedbackkit.services.http_client import HttpClient


class UserService:
    """Register users and look up the active one."""

    def __init__(self, http: HttpClient):
        self.http = http

    def register(self, request: RegisterUserRequest) -> SdkUser:
        return self.http.post(
            "users/register",
            SdkUser.model_validate_json,
            body=request.model_dump_json(),
        )

    def register_user(
        self,
        email: str | None = None,
        name: str | None = None,
        external_id: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> SdkUser:
        """Register a user from individual fields."""
        return self.register(
            RegisterUserRequest(
                email=email, name=name, external_id=external_id, metadata=metadata
            )
        )

    def get_current_user(self) -> SdkUser | None:
        """Fetch the active user. Returns None without a request if no user is set."""
        user_id = self.http.user_id
        if user_id is None:
            return None

        return self.http.get(f"users/{user_id}", SdkUser.model_validate_json)
