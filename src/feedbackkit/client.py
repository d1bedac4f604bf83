"""FeedbackKit SDK entry point.

Typical use::

    import feedbackkit

    feedbackkit.configure(api_key="your-api-key", user_id="optional-user-id")
    items = feedbackkit.get_shared().feedback.list()

Applications that prefer explicit wiring can build ``FeedbackKit(config)``
directly and pass it to the components that need it.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from feedbackkit.config import FeedbackKitConfig
from feedbackkit.errors import NotConfiguredError
from feedbackkit.services.comment_service import CommentService
from feedbackkit.services.event_service import EventService
from feedbackkit.services.feedback_service import FeedbackService
from feedbackkit.services.http_client import HttpClient
from feedbackkit.services.user_service import UserService
from feedbackkit.services.vote_service import VoteService
from feedbackkit.utils.storage import FeedbackKitStorage

logger = logging.getLogger(__name__)


class FeedbackKit:
    """Configuration, identity storage and the resource services, sharing one transport."""

    def __init__(
        self, config: FeedbackKitConfig, storage: FeedbackKitStorage | None = None
    ):
        """Initialize the SDK.

        Args:
            config: SDK configuration
            storage: Identity storage; defaults to the JSON file store
        """
        self.config = config
        self.storage = storage if storage is not None else FeedbackKitStorage.default()
        self.http = HttpClient(config)

        self.feedback = FeedbackService(self.http)
        self.votes = VoteService(self.http)
        self.comments = CommentService(self.http)
        self.users = UserService(self.http)
        self.events = EventService(self.http)

        # Single worker keeps storage writes in call order
        self._storage_executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="feedbackkit-storage"
        )

        if config.debug:
            logging.getLogger("feedbackkit").setLevel(logging.DEBUG)
            logger.debug("FeedbackKit configured for %s", config.api_url)

    @property
    def user_id(self) -> str | None:
        """Active user ID. Setting it does not persist it."""
        return self.http.user_id

    @user_id.setter
    def user_id(self, value: str | None) -> None:
        self.http.set_user_id(value)

    def set_user_id_and_persist(self, user_id: str | None) -> Future:
        """Set the active user now and persist it in the background.

        A failed write leaves the stored value unchanged and is re-raised by
        the returned future's ``result()``.
        """
        self.http.set_user_id(user_id)
        return self._storage_executor.submit(self.storage.set_user_id, user_id)

    def load_user_id_from_storage(self) -> str | None:
        """Restore a previously persisted user ID, if any."""
        stored_user_id = self.storage.get_user_id()
        if stored_user_id is not None:
            self.http.set_user_id(stored_user_id)
        return stored_user_id

    def logout(self) -> Future:
        """Clear the active user now and wipe storage in the background.

        Write failures surface through the returned future, as for
        ``set_user_id_and_persist``.
        """
        self.http.set_user_id(None)
        return self._storage_executor.submit(self.storage.clear)

    def close(self) -> None:
        """Wait for pending storage writes and stop the background worker."""
        self._storage_executor.shutdown(wait=True)


# Process-wide instance, created once by configure()
_instance: FeedbackKit | None = None
_instance_lock = threading.Lock()


def configure(
    config: FeedbackKitConfig | None = None,
    *,
    api_key: str | None = None,
    storage: FeedbackKitStorage | None = None,
    **options,
) -> FeedbackKit:
    """Create the shared SDK instance, or return it if it already exists.

    Either pass a ready ``config`` or an ``api_key`` plus any of the keyword
    options accepted by ``FeedbackKitConfig.build`` (``environment``,
    ``base_url``, ``user_id``, ``timeout_ms``, ``debug``).

    Raises:
        ValueError: If neither config nor api_key is given
        pydantic.ValidationError: If the API key is blank
    """
    global _instance
    with _instance_lock:
        if _instance is not None:
            return _instance

        if config is None:
            if api_key is None:
                raise ValueError("Either config or api_key must be provided")
            config = FeedbackKitConfig.build(api_key, **options)

        _instance = FeedbackKit(config, storage=storage)
        return _instance


def get_shared() -> FeedbackKit:
    """Return the shared SDK instance.

    Raises:
        NotConfiguredError: If configure() has not been called
    """
    instance = _instance
    if instance is None:
        raise NotConfiguredError()
    return instance


def is_configured() -> bool:
    return _instance is not None


def reset() -> None:
    """Drop the shared instance. Useful for testing."""
    global _instance
    with _instance_lock:
        if _instance is not None:
            _instance.close()
        _instance = None
