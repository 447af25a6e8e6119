"""
Appearance resolution and theming.

Preference state machine, system appearance synchronization, scoped
consumer lookup, and the palette applied for each resolved appearance.
"""

from .color_scheme import ColorScheme
from .system_appearance import QtSystemAppearance
from .application_surface import QtApplicationSurface
from .theme_resolver import ThemeResolver, create_theme_resolver
from .theme_scope import ThemeContext, ThemeScopeError, provide_theme, use_theme, find_theme_resolver

__all__ = [
    "ColorScheme",
    "QtSystemAppearance",
    "QtApplicationSurface",
    "ThemeResolver",
    "create_theme_resolver",
    "ThemeContext",
    "ThemeScopeError",
    "provide_theme",
    "use_theme",
    "find_theme_resolver",
]
