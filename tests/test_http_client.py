"""Tests for the HTTP transport."""

import json
import unittest
from unittest.mock import patch

import requests

from conftest import make_response
from feedbackkit.config import FeedbackKitConfig
from feedbackkit.errors import (
    AuthenticationError,
    ConflictError,
    NetworkError,
    NotFoundError,
    ServerError,
    UnknownError,
    ValidationError,
)
from feedbackkit.models.vote import VoteResponse
from feedbackkit.services.http_client import HttpClient, extract_error_message

VOTE_BODY = {"success": True, "vote_count": 4, "has_voted": True}


class TestExtractErrorMessage(unittest.TestCase):
    """Test error message extraction from response bodies."""

    def test_prefers_message_field(self):
        body = json.dumps({"message": "m", "error": "e", "reason": "r"})
        self.assertEqual(extract_error_message(body), "m")

    def test_falls_back_to_error_then_reason(self):
        self.assertEqual(extract_error_message('{"error": "e", "reason": "r"}'), "e")
        self.assertEqual(extract_error_message('{"reason": "r"}'), "r")

    def test_non_json_body(self):
        self.assertIsNone(extract_error_message("<html>Bad Gateway</html>"))
        self.assertIsNone(extract_error_message(""))

    def test_skips_boolean_error_flag(self):
        body = json.dumps({"error": True, "reason": "Feedback not found"})
        self.assertEqual(extract_error_message(body), "Feedback not found")

    def test_non_object_body(self):
        self.assertIsNone(extract_error_message('["message"]'))


@patch("feedbackkit.services.http_client.requests.request")
class TestHttpClient(unittest.TestCase):
    """Test request construction and response handling."""

    def setUp(self):
        self.config = FeedbackKitConfig(
            api_key="test-key", base_url="https://api.example.com/", timeout_ms=5000
        )
        self.client = HttpClient(self.config)

    def test_get_builds_url_and_headers(self, mock_request):
        mock_request.return_value = make_response(200, VOTE_BODY)

        result = self.client.get(
            "/feedbacks", VoteResponse.model_validate_json, query_params={"page": "2"}
        )

        self.assertEqual(result.vote_count, 4)
        args, kwargs = mock_request.call_args
        self.assertEqual(args, ("GET", "https://api.example.com/api/v1/feedbacks"))
        self.assertEqual(kwargs["params"], {"page": "2"})
        self.assertIsNone(kwargs["data"])
        self.assertEqual(kwargs["timeout"], 5.0)
        headers = kwargs["headers"]
        self.assertEqual(headers["X-API-Key"], "test-key")
        self.assertEqual(headers["Content-Type"], "application/json")
        self.assertEqual(headers["Accept"], "application/json")
        self.assertNotIn("X-User-Id", headers)

    def test_user_id_header_follows_active_user(self, mock_request):
        mock_request.return_value = make_response(200, VOTE_BODY)

        self.client.set_user_id("user-1")
        self.client.get("feedbacks", VoteResponse.model_validate_json)
        self.assertEqual(mock_request.call_args.kwargs["headers"]["X-User-Id"], "user-1")

        self.client.set_user_id(None)
        self.client.get("feedbacks", VoteResponse.model_validate_json)
        self.assertNotIn("X-User-Id", mock_request.call_args.kwargs["headers"])

    def test_post_sends_body(self, mock_request):
        mock_request.return_value = make_response(201, VOTE_BODY, reason="Created")

        self.client.post("feedbacks/fb-1/votes", VoteResponse.model_validate_json, body='{"a": 1}')

        args, kwargs = mock_request.call_args
        self.assertEqual(args[0], "POST")
        self.assertEqual(kwargs["data"], b'{"a": 1}')
        self.assertIsNone(kwargs["params"])

    def test_post_default_body_is_empty_object(self, mock_request):
        mock_request.return_value = make_response(200, VOTE_BODY)

        self.client.post("feedbacks", VoteResponse.model_validate_json)

        self.assertEqual(mock_request.call_args.kwargs["data"], b"{}")

    def test_put_and_delete_methods(self, mock_request):
        mock_request.return_value = make_response(200, VOTE_BODY)

        self.client.put("feedbacks/fb-1", VoteResponse.model_validate_json)
        self.assertEqual(mock_request.call_args.args[0], "PUT")

        self.client.delete(
            "feedbacks/fb-1/votes",
            VoteResponse.model_validate_json,
            query_params={"user_id": "u"},
        )
        args, kwargs = mock_request.call_args
        self.assertEqual(args[0], "DELETE")
        self.assertEqual(kwargs["params"], {"user_id": "u"})

    def test_error_status_uses_body_message(self, mock_request):
        mock_request.return_value = make_response(
            409, {"error": True, "reason": "Already voted"}, reason="Conflict"
        )

        with self.assertRaises(ConflictError) as ctx:
            self.client.post("feedbacks/fb-1/votes", VoteResponse.model_validate_json)

        self.assertEqual(ctx.exception.message, "Already voted")

    def test_error_status_with_message_field(self, mock_request):
        mock_request.return_value = make_response(
            400, {"message": "Title is required"}, reason="Bad Request"
        )

        with self.assertRaises(ValidationError) as ctx:
            self.client.post("feedbacks", VoteResponse.model_validate_json)

        self.assertEqual(ctx.exception.message, "Title is required")
        self.assertEqual(ctx.exception.status_code, 400)

    def test_error_status_falls_back_to_reason_phrase(self, mock_request):
        mock_request.return_value = make_response(
            503, "<html>down</html>", reason="Service Unavailable"
        )

        with self.assertRaises(ServerError) as ctx:
            self.client.get("feedbacks", VoteResponse.model_validate_json)

        self.assertEqual(ctx.exception.message, "Service Unavailable")
        self.assertEqual(ctx.exception.status_code, 503)

    def test_unauthorized(self, mock_request):
        mock_request.return_value = make_response(401, "", reason="Unauthorized")

        with self.assertRaises(AuthenticationError):
            self.client.get("feedbacks", VoteResponse.model_validate_json)

    def test_not_found_without_body(self, mock_request):
        mock_request.return_value = make_response(404, "", reason="")

        with self.assertRaises(NotFoundError) as ctx:
            self.client.get("feedbacks/missing", VoteResponse.model_validate_json)

        self.assertEqual(ctx.exception.message, "Resource not found")

    def test_decode_failure_is_unknown(self, mock_request):
        mock_request.return_value = make_response(200, '{"unexpected": 1}')

        with self.assertRaises(UnknownError) as ctx:
            self.client.get("feedbacks", VoteResponse.model_validate_json)

        self.assertIsNotNone(ctx.exception.cause)

    def test_timeout_is_network_error(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectTimeout()

        with self.assertRaises(NetworkError) as ctx:
            self.client.get("feedbacks", VoteResponse.model_validate_json)

        self.assertTrue(ctx.exception.is_timeout)

    def test_connection_error_is_network_error(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")

        with self.assertRaises(NetworkError) as ctx:
            self.client.get("feedbacks", VoteResponse.model_validate_json)

        self.assertFalse(ctx.exception.is_timeout)
        self.assertEqual(ctx.exception.message, "Connection failed")

    def test_debug_logs_request_and_response(self, mock_request):
        mock_request.return_value = make_response(200, VOTE_BODY)
        client = HttpClient(self.config.model_copy(update={"debug": True}))

        with self.assertLogs("feedbackkit.services.http_client", level="DEBUG") as logs:
            client.get("feedbacks", VoteResponse.model_validate_json)

        self.assertTrue(any("Response 200" in line for line in logs.output))
