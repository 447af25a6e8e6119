"""Tests for scoped theme lookup."""

import pytest
from PyQt6 import sip
from PyQt6.QtWidgets import QWidget

from pyqt_appearance.core import Preference, ResolvedAppearance
from pyqt_appearance.protocols import SystemAppearanceSource
from pyqt_appearance.theming import ThemeResolver, ThemeScopeError, provide_theme, use_theme


class StaticSource(SystemAppearanceSource):
    def __init__(self, dark):
        super().__init__()
        self.dark = dark

    def is_dark(self):
        return self.dark


@pytest.fixture
def make_resolver(memory_store, system_source, surface):
    return lambda: ThemeResolver(memory_store, system_source, surface)


def test_use_theme_outside_scope_raises(qapp):
    orphan = QWidget()
    with pytest.raises(ThemeScopeError, match="outside of a theme scope"):
        use_theme(orphan)


def test_use_theme_finds_ancestor(qapp, make_resolver):
    root = QWidget()
    child = QWidget(root)
    grandchild = QWidget(child)
    resolver = make_resolver()
    provide_theme(root, resolver)

    theme = use_theme(grandchild)

    assert theme.resolver is resolver
    assert use_theme(root).resolver is resolver


def test_context_exposes_resolver_state(qapp, make_resolver, memory_store):
    root = QWidget()
    resolver = make_resolver()
    theme = provide_theme(root, resolver)
    resolver.initialize()

    theme.set_preference("dark")

    assert theme.preference is Preference.DARK
    assert theme.resolved_appearance is resolver.resolved_appearance
    assert memory_store.stored is Preference.DARK


def test_independent_scopes(qapp, memory_store, surface):
    first_root, second_root = QWidget(), QWidget()
    first = ThemeResolver(memory_store, StaticSource(dark=False), surface)
    second = ThemeResolver(memory_store, StaticSource(dark=True), surface)
    provide_theme(first_root, first)
    provide_theme(second_root, second)
    first.initialize()
    second.initialize()

    assert use_theme(QWidget(first_root)).resolved_appearance is ResolvedAppearance.LIGHT
    assert use_theme(QWidget(second_root)).resolved_appearance is ResolvedAppearance.DARK


def test_nearest_scope_wins(qapp, make_resolver):
    outer_root = QWidget()
    inner_root = QWidget(outer_root)
    outer, inner = make_resolver(), make_resolver()
    provide_theme(outer_root, outer)
    provide_theme(inner_root, inner)

    assert use_theme(QWidget(inner_root)).resolver is inner


def test_provide_theme_reparents_unowned_resolver(qapp, make_resolver):
    root = QWidget()
    resolver = make_resolver()
    provide_theme(root, resolver)
    assert resolver.parent() is root


def test_destroying_scope_releases_subscription(qapp, make_resolver, system_source):
    root = QWidget()
    resolver = make_resolver()
    provide_theme(root, resolver)
    resolver.initialize()
    assert system_source.listener_count() == 1

    sip.delete(root)

    assert system_source.listener_count() == 0

