"""Appearance preference values and the resolution rule."""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Preference(Enum):
    """User's stated appearance intent."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @classmethod
    def parse(cls, value: Any) -> "Preference":
        """
        Interpret a stored value, falling back to SYSTEM.

        Only the exact strings "light", "dark" and "system" are recognized;
        missing or unrecognized values never propagate.

        Args:
            value: Raw value read from storage (may be None or any type)

        Returns:
            Preference: Parsed preference, SYSTEM if unrecognized
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        if value is not None:
            logger.debug(f"Unrecognized stored preference {value!r}, using system")
        return cls.SYSTEM


class ResolvedAppearance(Enum):
    """Binary appearance actually displayed."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_dark_flag(cls, is_dark: bool) -> "ResolvedAppearance":
        return cls.DARK if is_dark else cls.LIGHT

    @property
    def is_dark(self) -> bool:
        return self is ResolvedAppearance.DARK


def resolve(preference: Preference, system_appearance: ResolvedAppearance) -> ResolvedAppearance:
    """Return the system appearance when following the system, else the explicit choice."""
    return system_appearance if preference is Preference.SYSTEM else ResolvedAppearance(preference.value)
