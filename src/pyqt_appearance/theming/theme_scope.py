"""
Scoped theme lookup for QObject subtrees.

A resolver is bound to a scope root with provide_theme(); any QObject below
that root obtains it with use_theme(), which walks the parent chain. Several
independent scopes can coexist in one process. Looking up a theme outside of
any scope is a wiring bug and raises ThemeScopeError.

Usage:
    resolver = create_theme_resolver()
    provide_theme(main_window, resolver)
    resolver.initialize_later()

    # anywhere below main_window:
    theme = use_theme(self)
    theme.set_preference(Preference.DARK)
"""

import logging
from typing import Optional, Union

from PyQt6.QtCore import QObject, pyqtBoundSignal

from pyqt_appearance.core.preference import Preference, ResolvedAppearance
from .theme_resolver import ThemeResolver

logger = logging.getLogger(__name__)

_SCOPE_PROPERTY = "_pyqt_appearance_theme_resolver"


class ThemeScopeError(RuntimeError):
    """Raised when a theme is looked up outside of any theme scope."""


class ThemeContext:
    """Consumer-facing view of the resolver that owns a scope."""

    __slots__ = ("_resolver",)

    def __init__(self, resolver: ThemeResolver):
        self._resolver = resolver

    @property
    def resolver(self) -> ThemeResolver:
        return self._resolver

    @property
    def preference(self) -> Preference:
        return self._resolver.preference

    @property
    def resolved_appearance(self) -> ResolvedAppearance:
        return self._resolver.resolved_appearance

    @property
    def preference_changed(self) -> pyqtBoundSignal:
        return self._resolver.preference_changed

    @property
    def appearance_changed(self) -> pyqtBoundSignal:
        return self._resolver.appearance_changed

    def set_preference(self, preference: Union[Preference, str]) -> None:
        self._resolver.set_preference(preference)


def provide_theme(scope_root: QObject, resolver: ThemeResolver) -> ThemeContext:
    """
    Bind a resolver to scope_root and everything parented below it.

    An unparented resolver is reparented to scope_root. The resolver's
    system signal subscription is released when scope_root is destroyed.

    Args:
        scope_root: QObject at the top of the scope
        resolver: Resolver serving the scope

    Returns:
        ThemeContext: Context for the new scope
    """
    if resolver.parent() is None:
        # Qt ownership keeps the resolver alive as long as the scope
        resolver.setParent(scope_root)
    scope_root.setProperty(_SCOPE_PROPERTY, resolver)
    scope_root.destroyed.connect(resolver.shutdown)
    logger.debug(f"Theme scope provided on {type(scope_root).__name__}")
    return ThemeContext(resolver)


def find_theme_resolver(obj: QObject) -> Optional[ThemeResolver]:
    """Return the nearest resolver above obj (inclusive), or None."""
    current = obj
    while current is not None:
        resolver = current.property(_SCOPE_PROPERTY)
        if isinstance(resolver, ThemeResolver):
            return resolver
        current = current.parent()
    return None


def use_theme(obj: QObject) -> ThemeContext:
    """
    Look up the theme context serving obj.

    Raises:
        ThemeScopeError: If no ancestor of obj has a theme provided
    """
    resolver = find_theme_resolver(obj)
    if resolver is None:
        raise ThemeScopeError(
            f"use_theme() called for {type(obj).__name__} outside of a theme scope; "
            f"call provide_theme() on one of its ancestors first"
        )
    return ThemeContext(resolver)
