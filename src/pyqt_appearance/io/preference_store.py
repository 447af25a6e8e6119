"""
QSettings-backed preference persistence.

Stores a single string value under one key. Reading never fails: an absent,
unreadable or unrecognized value yields ``Preference.SYSTEM``. Writing is a
single best-effort attempt; failures are logged and swallowed so the
in-memory preference stays authoritative for the session.
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QSettings

from pyqt_appearance.core.preference import Preference
from pyqt_appearance.io.exceptions import PreferenceStorageError
from pyqt_appearance.protocols import get_appearance_config

logger = logging.getLogger(__name__)

SettingsFactory = Callable[[], QSettings]


def _default_settings() -> QSettings:
    config = get_appearance_config()
    return QSettings(config.organization_name, config.application_name)


class PreferenceStore:
    """
    Reads and writes the appearance preference through QSettings.

    Usage:
        store = PreferenceStore()
        store.save(Preference.DARK)
        store.load()  # → Preference.DARK
    """

    def __init__(self, settings_factory: Optional[SettingsFactory] = None,
                 key: Optional[str] = None):
        """
        Initialize the store.

        Args:
            settings_factory: Callable returning the QSettings to use (defaults to
                organization/application scope from AppearanceConfig)
            key: Settings key (defaults to AppearanceConfig.settings_key)
        """
        self._settings_factory = settings_factory or _default_settings
        self._key = key or get_appearance_config().settings_key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Preference:
        """Return the stored preference, or SYSTEM if absent, invalid or unreadable."""
        try:
            value = self._read()
        except Exception as e:
            logger.debug(f"Preference storage unavailable, using system: {e}")
            return Preference.SYSTEM
        return Preference.parse(value)

    def save(self, preference: Preference) -> None:
        """Persist the preference. Failures are logged, never raised."""
        try:
            self._write(preference.value)
        except Exception as e:
            logger.warning(f"Failed to persist appearance preference {preference.value!r}: {e}")

    def _read(self):
        settings = self._settings_factory()
        if settings.status() != QSettings.Status.NoError:
            raise PreferenceStorageError(f"cannot read {settings.fileName()}: {settings.status().name}")
        return settings.value(self._key, None)

    def _write(self, value: str) -> None:
        settings = self._settings_factory()
        settings.setValue(self._key, value)
        settings.sync()
        if settings.status() != QSettings.Status.NoError:
            raise PreferenceStorageError(f"cannot write {settings.fileName()}: {settings.status().name}")
