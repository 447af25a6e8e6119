"""pytest configuration and fixtures for pyqt-appearance tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from pyqt_appearance.core import Preference
from pyqt_appearance.protocols import AppearanceSurface, SystemAppearanceSource


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class FakeSystemAppearance(SystemAppearanceSource):
    """System signal whose dark preference is flipped by the test."""

    def __init__(self, dark: bool = False):
        super().__init__()
        self.dark = dark
        self.watching = False

    def is_dark(self) -> bool:
        return self.dark

    def set_dark(self, dark: bool) -> None:
        self.dark = dark
        self._notify()

    def _start_watching(self) -> None:
        self.watching = True

    def _stop_watching(self) -> None:
        self.watching = False


class RecordingSurface(AppearanceSurface):
    """Surface that records every apply() call."""

    def __init__(self):
        self.applied = []

    def apply(self, appearance) -> None:
        self.applied.append(appearance)


class MemoryStore:
    """In-memory preference store recording writes."""

    def __init__(self, stored: Preference = None):
        self.stored = stored
        self.saves = []

    def load(self) -> Preference:
        return Preference.parse(self.stored)

    def save(self, preference: Preference) -> None:
        self.saves.append(preference)
        self.stored = preference


@pytest.fixture
def system_source():
    return FakeSystemAppearance()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "appearance.ini"


@pytest.fixture
def settings_factory(settings_path):
    """Factory returning INI-format QSettings isolated in tmp_path."""
    return lambda: QSettings(str(settings_path), QSettings.Format.IniFormat)
