"""Protocols for preference storage backends."""

from typing import Protocol

from pyqt_appearance.core.preference import Preference


class PreferenceSink(Protocol):
    """Protocol for preference storage backends.

    Implementations never raise: load() degrades to SYSTEM and save() is
    best-effort.
    """

    def load(self) -> Preference:
        ...

    def save(self, preference: Preference) -> None:
        ...
