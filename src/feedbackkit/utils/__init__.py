"""Utility modules for the FeedbackKit SDK."""

from .storage import FeedbackKitStorage, default_storage_path

__all__ = [
    "FeedbackKitStorage",
    "default_storage_path",
]
