"""Pytest configuration and shared fixtures."""

import json
from unittest.mock import Mock

import pytest

from feedbackkit.client import reset
from feedbackkit.config import FeedbackKitConfig
from feedbackkit.models.feedback import Feedback
from feedbackkit.services.http_client import HttpClient


def feedback_payload(**overrides):
    """Build a feedback item as the API returns it."""
    payload = {
        "id": "fb-1",
        "title": "Dark mode",
        "description": "Please add a dark theme",
        "status": "approved",
        "category": "feature_request",
        "vote_count": 3,
        "has_voted": False,
        "comment_count": 0,
        "created_at": "2026-01-10T09:30:00Z",
        "updated_at": None,
        "user_id": None,
        "email": None,
    }
    payload.update(overrides)
    return payload


def make_response(status_code=200, body="", reason="OK"):
    """Mock requests.Response with the attributes the transport reads."""
    response = Mock()
    response.status_code = status_code
    response.text = body if isinstance(body, str) else json.dumps(body)
    response.reason = reason
    response.url = "https://api.example.com/api/v1/test"
    return response


@pytest.fixture(autouse=True)
def _reset_shared_instance():
    """Drop the shared SDK instance before and after each test."""
    reset()
    yield
    reset()


@pytest.fixture
def config():
    """Config pointing at a test host with no active user."""
    return FeedbackKitConfig(api_key="test-key", base_url="https://api.example.com")


@pytest.fixture
def http_client(config):
    return HttpClient(config)


@pytest.fixture
def sample_feedback():
    """An approved feature request with three votes."""
    return Feedback.model_validate(feedback_payload())


@pytest.fixture
def completed_feedback():
    """A completed item, which no longer accepts votes."""
    return Feedback.model_validate(
        feedback_payload(id="fb-2", status="completed", vote_count=10, has_voted=True)
    )


@pytest.fixture
def mock_http():
    """HttpClient stand-in with an active user."""
    http = Mock(spec=HttpClient)
    http.user_id = "user-1"
    return http
