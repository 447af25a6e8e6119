"""Tests for QSettings-backed preference persistence."""

import pytest
from PyQt6.QtCore import QSettings

from pyqt_appearance.core import Preference
from pyqt_appearance.io import PreferenceStore
from pyqt_appearance.protocols import AppearanceConfig, set_appearance_config


def _raising_factory():
    raise OSError("settings backend disabled")


@pytest.mark.parametrize("preference", list(Preference))
def test_save_then_load_returns_saved_value(settings_factory, preference):
    store = PreferenceStore(settings_factory)
    store.save(preference)
    assert store.load() is preference


def test_load_returns_system_when_empty(settings_factory):
    assert PreferenceStore(settings_factory).load() is Preference.SYSTEM


def test_load_returns_system_on_unrecognized_value(settings_factory):
    settings = settings_factory()
    settings.setValue("appearance/theme", "blue")
    settings.sync()

    assert PreferenceStore(settings_factory).load() is Preference.SYSTEM


def test_load_does_not_rewrite_unrecognized_value(settings_factory):
    settings = settings_factory()
    settings.setValue("appearance/theme", "blue")
    settings.sync()

    PreferenceStore(settings_factory).load()
    assert settings_factory().value("appearance/theme") == "blue"


def test_load_returns_system_when_storage_raises():
    assert PreferenceStore(_raising_factory).load() is Preference.SYSTEM


def test_save_swallows_storage_failure():
    PreferenceStore(_raising_factory).save(Preference.DARK)


def test_save_writes_plain_string(settings_factory):
    PreferenceStore(settings_factory).save(Preference.DARK)
    assert settings_factory().value("appearance/theme") == "dark"


def test_custom_key(settings_factory):
    store = PreferenceStore(settings_factory, key="ui/mode")
    store.save(Preference.LIGHT)
    assert settings_factory().value("ui/mode") == "light"
    assert store.key == "ui/mode"


def test_key_defaults_from_config(settings_factory):
    set_appearance_config(AppearanceConfig(settings_key="custom/theme"))
    try:
        store = PreferenceStore(settings_factory)
        store.save(Preference.DARK)
        assert settings_factory().value("custom/theme") == "dark"
    finally:
        set_appearance_config(AppearanceConfig())


def test_unreadable_settings_file_falls_back(settings_path):
    settings_path.write_bytes(b"\xff\xfe[broken\x00")
    store = PreferenceStore(lambda: QSettings(str(settings_path), QSettings.Format.IniFormat))
    assert store.load() is Preference.SYSTEM
