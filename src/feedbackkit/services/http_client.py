"""HTTP transport shared by all FeedbackKit services."""

import json
import logging
from typing import Callable, TypeVar

import requests

from feedbackkit.config import FeedbackKitConfig
from feedbackkit.errors import FeedbackKitError
from feedbackkit.utils.constants import API_KEY_HEADER, JSON_CONTENT_TYPE, USER_ID_HEADER

logger = logging.getLogger(__name__)

T = TypeVar("T")

Decoder = Callable[[str], T]

# Fields checked, in order, for a human-readable message in error bodies
ERROR_MESSAGE_FIELDS = ("message", "error", "reason")


def extract_error_message(body: str) -> str | None:
    """Pull a message out of a JSON error body, if there is one."""
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    for field in ERROR_MESSAGE_FIELDS:
        value = data.get(field)
        # Vapor sends {"error": true, "reason": "..."}; flags are not messages
        if isinstance(value, str) and value:
            return value
    return None


class HttpClient:
    """Performs one request/response cycle per call against the configured API.

    Every request carries the API key and JSON headers. The active user ID is
    read at call time and sent as ``X-User-Id`` when set. Failures are raised as
    ``FeedbackKitError`` subclasses; nothing is retried.
    """

    def __init__(self, config: FeedbackKitConfig):
        self.config = config
        self._user_id = config.user_id

    @property
    def user_id(self) -> str | None:
        """The active user ID attached to outgoing requests."""
        return self._user_id

    def set_user_id(self, user_id: str | None) -> None:
        self._user_id = user_id

    def get(
        self,
        endpoint: str,
        decoder: Decoder[T],
        query_params: dict[str, str] | None = None,
    ) -> T:
        return self._request("GET", endpoint, decoder, query_params=query_params)

    def post(self, endpoint: str, decoder: Decoder[T], body: str = "{}") -> T:
        return self._request("POST", endpoint, decoder, body=body)

    def put(self, endpoint: str, decoder: Decoder[T], body: str = "{}") -> T:
        return self._request("PUT", endpoint, decoder, body=body)

    def delete(
        self,
        endpoint: str,
        decoder: Decoder[T],
        query_params: dict[str, str] | None = None,
    ) -> T:
        return self._request("DELETE", endpoint, decoder, query_params=query_params)

    def build_url(self, endpoint: str) -> str:
        return f"{self.config.api_url}/{endpoint.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
            API_KEY_HEADER: self.config.api_key,
        }
        user_id = self._user_id
        if user_id is not None:
            headers[USER_ID_HEADER] = user_id
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        decoder: Decoder[T],
        query_params: dict[str, str] | None = None,
        body: str | None = None,
    ) -> T:
        url = self.build_url(endpoint)
        try:
            response = requests.request(
                method,
                url,
                params=query_params or None,
                data=body.encode("utf-8") if body is not None else None,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
            body_text = response.text or ""

            if self.config.debug:
                logger.debug("%s %s", method, response.url or url)
                logger.debug("Response %d: %s", response.status_code, body_text)

            if not 200 <= response.status_code < 300:
                message = extract_error_message(body_text) or response.reason or ""
                raise FeedbackKitError.from_status_code(response.status_code, message)

            return decoder(body_text)
        except FeedbackKitError:
            raise
        except Exception as e:
            error = FeedbackKitError.from_exception(e)
            if self.config.debug:
                logger.debug("%s %s failed: %r", method, url, error)
            raise error from e
