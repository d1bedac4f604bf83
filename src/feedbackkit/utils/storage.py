"""Persistent key-value storage for the active user's identity."""

import json
import logging
import os
import threading
from pathlib import Path

from feedbackkit.utils.constants import (
    DEFAULT_STORAGE_DIR,
    DEFAULT_STORAGE_FILE,
    STORAGE_PATH_ENV,
    STORAGE_USER_EMAIL_KEY,
    STORAGE_USER_ID_KEY,
    STORAGE_USER_NAME_KEY,
)

logger = logging.getLogger(__name__)


def default_storage_path() -> Path:
    """Storage file location, overridable with FEEDBACKKIT_STORAGE_PATH."""
    override = os.environ.get(STORAGE_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_STORAGE_DIR / DEFAULT_STORAGE_FILE


class FeedbackKitStorage:
    """Stores user_id, user_email and user_name as strings.

    Backed by a small JSON file when ``path`` is given, otherwise kept in
    memory only. All access is serialized with a lock so the SDK's background
    writer and the caller's thread can share one instance.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._data: dict[str, str] = self._read()

    @classmethod
    def default(cls) -> "FeedbackKitStorage":
        return cls(default_storage_path())

    def _read(self) -> dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable storage file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _commit(self, data: dict[str, str]) -> None:
        """Write ``data`` to disk, then adopt it in memory.

        On a failed write the in-memory values are left unchanged and the
        error is logged and re-raised.
        """
        if self.path is not None:
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(tmp_path, "w", encoding="utf-8") as f:
                    json.dump(data, f)
                os.replace(tmp_path, self.path)
            except OSError as e:
                logger.error("Failed to write storage file %s: %s", self.path, e)
                raise
        self._data = data

    def _get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def _set(self, values: dict[str, str | None]) -> None:
        with self._lock:
            data = dict(self._data)
            for key, value in values.items():
                if value is None:
                    data.pop(key, None)
                else:
                    data[key] = value
            self._commit(data)

    def get_user_id(self) -> str | None:
        return self._get(STORAGE_USER_ID_KEY)

    def get_user_email(self) -> str | None:
        return self._get(STORAGE_USER_EMAIL_KEY)

    def get_user_name(self) -> str | None:
        return self._get(STORAGE_USER_NAME_KEY)

    def set_user_id(self, user_id: str | None) -> None:
        """Save the user ID, or remove it when None."""
        self._set({STORAGE_USER_ID_KEY: user_id})

    def set_user_email(self, email: str | None) -> None:
        self._set({STORAGE_USER_EMAIL_KEY: email})

    def set_user_name(self, name: str | None) -> None:
        self._set({STORAGE_USER_NAME_KEY: name})

    def set_user_info(
        self, user_id: str | None, email: str | None, name: str | None
    ) -> None:
        """Save all identity fields in one write."""
        self._set(
            {
                STORAGE_USER_ID_KEY: user_id,
                STORAGE_USER_EMAIL_KEY: email,
                STORAGE_USER_NAME_KEY: name,
            }
        )

    def clear(self) -> None:
        """Remove every stored value."""
        with self._lock:
            self._commit({})
