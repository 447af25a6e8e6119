"""
Core appearance values.

Pure value types with no Qt dependency: the user preference, the resolved
binary appearance, and the rule mapping one to the other.
"""

from .preference import Preference, ResolvedAppearance, resolve

__all__ = [
    "Preference",
    "ResolvedAppearance",
    "resolve",
]
