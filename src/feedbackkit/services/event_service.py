"""Event tracking service."""

from feedbackkit.models.event import TrackedEvent, TrackEventResponse
from feedbackkit.services.http_client import HttpClient


class EventService:
    def __init__(self, http: HttpClient):
        self.http = http

    def track(self, event: TrackedEvent) -> TrackEventResponse:
        """Send an event, attributing it to the active user if unset."""
        if event.user_id is None and self.http.user_id is not None:
            event = event.model_copy(update={"user_id": self.http.user_id})

        return self.http.post(
            "events/track",
            TrackEventResponse.model_validate_json,
            body=event.model_dump_json(),
        )

    def track_event(
        self, name: str, properties: dict[str, str] | None = None
    ) -> TrackEventResponse:
        return self.track(TrackedEvent(name=name, properties=properties))
