"""Base configuration for appearance handling.

Provides hooks for applications to customize where the preference is stored
and how the resolved appearance is marked on the application.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class AppearanceConfig:
    """Configuration for appearance persistence and application.

    Applications can subclass this to provide custom configuration.

    Attributes:
        organization_name: QSettings organization scope
        application_name: QSettings application scope
        settings_key: Key holding the stored preference
        appearance_property: Dynamic property set to "light" or "dark" on the application
        dark_property: Boolean dynamic property set on the application
        apply_palette: Whether to install a QPalette for the resolved appearance
        repolish_widgets: Whether to repolish widgets so property selectors update
    """

    organization_name: str = "pyqt-appearance"
    application_name: str = "pyqt-appearance"
    settings_key: str = "appearance/theme"
    appearance_property: str = "appearance"
    dark_property: str = "dark"
    apply_palette: bool = True
    repolish_widgets: bool = True


# Global config instance (set by application)
_appearance_config: Optional[AppearanceConfig] = None


def set_appearance_config(config: AppearanceConfig) -> None:
    """Set the global appearance configuration.

    Args:
        config: AppearanceConfig instance
    """
    global _appearance_config
    _appearance_config = config


def get_appearance_config() -> AppearanceConfig:
    """Get the current appearance configuration.

    Returns:
        Current AppearanceConfig or default if not set
    """
    if _appearance_config is None:
        return AppearanceConfig()
    return _appearance_config
