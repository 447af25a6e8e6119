"""Tests for the host environment contracts."""

import pytest

from pyqt_appearance.protocols import AppearanceSurface, SystemAppearanceSource


def test_abstract_contracts_fail_loud():
    with pytest.raises(TypeError):
        SystemAppearanceSource()
    with pytest.raises(TypeError):
        AppearanceSurface()


def test_duplicate_subscribe_keeps_one_listener(system_source):
    calls = []
    callback = lambda: calls.append(1)

    system_source.subscribe(callback)
    system_source.subscribe(callback)
    system_source.set_dark(True)

    assert system_source.listener_count() == 1
    assert calls == [1]


def test_watching_follows_listener_presence(system_source):
    first, second = (lambda: None), (lambda: None)

    system_source.subscribe(first)
    assert system_source.watching
    system_source.subscribe(second)
    system_source.unsubscribe(first)
    assert system_source.watching
    system_source.unsubscribe(second)
    assert not system_source.watching


def test_unsubscribe_unknown_callback_is_ignored(system_source):
    system_source.unsubscribe(lambda: None)
    assert system_source.listener_count() == 0
    assert not system_source.watching


def test_callback_may_unsubscribe_during_notification(system_source):
    calls = []

    def once():
        calls.append(1)
        system_source.unsubscribe(once)

    system_source.subscribe(once)
    system_source.set_dark(True)
    system_source.set_dark(False)

    assert calls == [1]
