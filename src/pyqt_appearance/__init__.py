"""
pyqt-appearance: light/dark/system appearance handling for PyQt6.

Resolves the user's appearance preference against the live system color
scheme, persists it with QSettings, and applies the result application-wide.

Architecture:
- Core: Preference values and the resolution rule (no Qt)
- Protocols: ABCs for the system signal and rendering surface, configuration
- IO: QSettings-backed preference store
- Theming: ThemeResolver state machine, scoped lookup, palettes
- Widgets: Consumer widgets bound to a theme scope

Usage:
    from pyqt_appearance import create_theme_resolver, provide_theme

    resolver = create_theme_resolver(app)
    provide_theme(main_window, resolver)
    resolver.initialize()
"""

__version__ = "0.1.0"

from pyqt_appearance.core import Preference, ResolvedAppearance, resolve
from pyqt_appearance.io import PreferenceStore
from pyqt_appearance.protocols import AppearanceConfig, set_appearance_config, get_appearance_config
from pyqt_appearance.theming import (
    ThemeResolver,
    ThemeContext,
    ThemeScopeError,
    create_theme_resolver,
    provide_theme,
    use_theme,
)

__all__ = [
    "__version__",
    "Preference",
    "ResolvedAppearance",
    "resolve",
    "PreferenceStore",
    "AppearanceConfig",
    "set_appearance_config",
    "get_appearance_config",
    "ThemeResolver",
    "ThemeContext",
    "ThemeScopeError",
    "create_theme_resolver",
    "provide_theme",
    "use_theme",
]
