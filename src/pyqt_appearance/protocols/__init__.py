"""
Host environment contracts and configuration.

ABC-based contracts for the system appearance signal and the rendering
surface, plus the application-level appearance configuration.
"""

from .appearance_protocols import SystemAppearanceSource, AppearanceSurface
from .appearance_config import AppearanceConfig, set_appearance_config, get_appearance_config

__all__ = [
    "SystemAppearanceSource",
    "AppearanceSurface",
    "AppearanceConfig",
    "set_appearance_config",
    "get_appearance_config",
]
