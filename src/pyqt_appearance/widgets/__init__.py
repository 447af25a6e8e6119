"""
Appearance widgets.

Consumer widgets that look up their theme scope and drive the resolver.
"""

from .appearance_selector import AppearanceSelector, PREFERENCE_LABELS

__all__ = [
    "AppearanceSelector",
    "PREFERENCE_LABELS",
]
