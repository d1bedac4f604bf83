"""Shared constants for the FeedbackKit SDK."""

# Every endpoint lives under this prefix of the configured base URL.
API_PATH = "/api/v1"

DEFAULT_TIMEOUT_MS = 30_000

API_KEY_HEADER = "X-API-Key"
USER_ID_HEADER = "X-User-Id"
JSON_CONTENT_TYPE = "application/json"

# Query parameter the server uses to compute has_voted per item
USER_ID_PARAM = "user_id"

# Local storage keys
STORAGE_USER_ID_KEY = "user_id"
STORAGE_USER_EMAIL_KEY = "user_email"
STORAGE_USER_NAME_KEY = "user_name"

STORAGE_PATH_ENV = "FEEDBACKKIT_STORAGE_PATH"
DEFAULT_STORAGE_DIR = ".feedbackkit"
DEFAULT_STORAGE_FILE = "preferences.json"
