"""State holder for a feedback list screen."""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable

from feedbackkit.errors import FeedbackKitError
from feedbackkit.models.feedback import (
    Feedback,
    FeedbackCategory,
    FeedbackStatus,
    ListFeedbackOptions,
)
from feedbackkit.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)

# Default for load() arguments meaning "keep the current filter"
_UNSET = object()


class ListPhase(str, Enum):
    """What a list surface should currently show."""

    IDLE = "idle"
    LOADING = "loading"  # First fetch, nothing to show yet
    REFRESHING = "refreshing"  # Re-fetch while existing items stay visible
    ERROR = "error"  # Last fetch failed and there are no items
    READY = "ready"


class FeedbackListState:
    """Loads feedback into an in-memory list and tracks loading/error state.

    Loads run on a thread pool. Only the most recently started load may change
    the list: each load gets a generation number, and a completion whose
    generation is no longer current is discarded. The server-side effects of
    a superseded request are not undone.
    """

    def __init__(
        self,
        feedback: FeedbackService,
        status_filter: FeedbackStatus | None = None,
        category_filter: FeedbackCategory | None = None,
        executor: ThreadPoolExecutor | None = None,
    ):
        self.feedback = feedback
        self.items: list[Feedback] = []
        self.is_loading = False
        self.is_refreshing = False
        self.error: FeedbackKitError | None = None
        self.status_filter = status_filter
        self.category_filter = category_filter

        self._lock = threading.RLock()
        self._generation = 0
        self._listeners: list[Callable[["FeedbackListState"], None]] = []
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=4, thread_name_prefix="feedbackkit-list"
        )

    @property
    def phase(self) -> ListPhase:
        with self._lock:
            if self.is_loading or self.is_refreshing:
                return ListPhase.REFRESHING if self.items else ListPhase.LOADING
            if self.items:
                return ListPhase.READY
            if self.error is not None:
                return ListPhase.ERROR
            return ListPhase.IDLE

    def subscribe(
        self, listener: Callable[["FeedbackListState"], None]
    ) -> Callable[[], None]:
        """Call ``listener(state)`` after every change. Returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(self)
            except Exception:
                logger.exception("Feedback list listener failed")

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self, status=_UNSET, category=_UNSET) -> Future:
        """Load feedback, replacing the list and remembering the filters on success.

        Omitted filters keep their current value; pass None to clear one.
        A load already in flight keeps running but its result is discarded.

        Returns:
            Future resolving to True if this load's result was applied, False
            if a newer load superseded it
        """
        with self._lock:
            if status is _UNSET:
                status = self.status_filter
            if category is _UNSET:
                category = self.category_filter
            future = self._start(status, category, refreshing=False)
        self._notify()
        return future

    def refresh(self) -> Future:
        """Re-fetch with the current filters, keeping items visible meanwhile."""
        with self._lock:
            future = self._start(
                self.status_filter, self.category_filter, refreshing=True
            )
        self._notify()
        return future

    def _start(
        self,
        status: FeedbackStatus | None,
        category: FeedbackCategory | None,
        refreshing: bool,
    ) -> Future:
        self._generation += 1
        generation = self._generation
        self.is_loading = not refreshing
        self.is_refreshing = refreshing
        self.error = None

        return self._executor.submit(
            self._run_load, generation, status, category, not refreshing
        )

    def _run_load(
        self,
        generation: int,
        status: FeedbackStatus | None,
        category: FeedbackCategory | None,
        remember_filters: bool,
    ) -> bool:
        with self._lock:
            # Superseded while queued
            if generation != self._generation:
                return False
        try:
            items = self.feedback.list(
                ListFeedbackOptions(status=status, category=category)
            )
        except Exception as e:
            error = FeedbackKitError.from_exception(e)
            with self._lock:
                if generation != self._generation:
                    return False
                logger.warning("Failed to load feedback: %r", error)
                self.error = error
                self.is_loading = False
                self.is_refreshing = False
        else:
            with self._lock:
                if generation != self._generation:
                    logger.debug("Discarding stale feedback load %d", generation)
                    return False
                self.items = list(items)
                if remember_filters:
                    self.status_filter = status
                    self.category_filter = category
                self.is_loading = False
                self.is_refreshing = False

        self._notify()
        return True

    # =========================================================================
    # Local mutations
    # =========================================================================

    def update_feedback(self, updated: Feedback) -> None:
        """Replace the item with the same ID, keeping its position."""
        with self._lock:
            self.items = [updated if item.id == updated.id else item for item in self.items]
        self._notify()

    def add_feedback(self, feedback: Feedback) -> None:
        """Insert an item at the top of the list."""
        with self._lock:
            self.items = [feedback] + self.items
        self._notify()

    def remove_feedback(self, feedback_id: str) -> None:
        with self._lock:
            self.items = [item for item in self.items if item.id != feedback_id]
        self._notify()

    def clear_error(self) -> None:
        with self._lock:
            self.error = None
        self._notify()

    # =========================================================================
    # Filters
    # =========================================================================

    def filter_by_status(self, status: FeedbackStatus | None) -> Future:
        return self.load(status=status)

    def filter_by_category(self, category: FeedbackCategory | None) -> Future:
        return self.load(category=category)

    def clear_filters(self) -> Future:
        return self.load(status=None, category=None)

    def close(self) -> None:
        """Stop the internal thread pool, if this state created it.

        Loads still queued on it are cancelled.
        """
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
