"""Preference persistence."""

from .base import PreferenceSink
from .exceptions import PreferenceStorageError
from .preference_store import PreferenceStore

__all__ = [
    "PreferenceSink",
    "PreferenceStorageError",
    "PreferenceStore",
]
