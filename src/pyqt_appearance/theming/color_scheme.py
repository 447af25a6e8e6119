"""
PyQt6 Color Scheme for light and dark appearances.

Semantic color sets for each resolved appearance and the QPalette built
from them.
"""

import logging
from dataclasses import dataclass
from typing import Tuple
from PyQt6.QtGui import QColor, QPalette

from pyqt_appearance.core.preference import ResolvedAppearance

logger = logging.getLogger(__name__)

Role = QPalette.ColorRole
Group = QPalette.ColorGroup

# (color group, role, scheme field); group None sets all groups
_PALETTE_ROLES = (
    (None, Role.Window, "window_bg"),
    (None, Role.WindowText, "text_primary"),
    (None, Role.Base, "input_bg"),
    (None, Role.AlternateBase, "panel_bg"),
    (None, Role.Text, "input_text"),
    (None, Role.Button, "button_normal_bg"),
    (None, Role.ButtonText, "button_text"),
    (None, Role.Highlight, "selection_bg"),
    (None, Role.HighlightedText, "selection_text"),
    (None, Role.Link, "text_link"),
    (None, Role.ToolTipBase, "panel_bg"),
    (None, Role.ToolTipText, "text_primary"),
    (None, Role.Mid, "border_color"),
    (None, Role.Dark, "separator_color"),
    (None, Role.Light, "border_light"),
    (Group.Disabled, Role.WindowText, "text_disabled"),
    (Group.Disabled, Role.Text, "text_disabled"),
    (Group.Disabled, Role.ButtonText, "button_disabled_text"),
    (Group.Disabled, Role.Button, "button_disabled_bg"),
)


@dataclass(frozen=True)
class ColorScheme:
    """
    Semantic color scheme for the application palette.

    Defaults describe the dark appearance; ``create_light_theme`` overrides
    them for light backgrounds.
    """

    # ========== BASE UI ARCHITECTURE COLORS ==========

    window_bg: Tuple[int, int, int] = (43, 43, 43)      # #2b2b2b - Main window/dialog backgrounds
    panel_bg: Tuple[int, int, int] = (30, 30, 30)       # #1e1e1e - Panel/widget backgrounds
    border_color: Tuple[int, int, int] = (85, 85, 85)   # #555555 - Primary borders
    border_light: Tuple[int, int, int] = (102, 102, 102) # #666666 - Secondary borders
    separator_color: Tuple[int, int, int] = (51, 51, 51) # #333333 - Separators/dividers

    # ========== TEXT HIERARCHY COLORS ==========

    text_primary: Tuple[int, int, int] = (255, 255, 255)   # #ffffff - Primary text
    text_disabled: Tuple[int, int, int] = (102, 102, 102)  # #666666 - Disabled text
    text_link: Tuple[int, int, int] = (0, 170, 255)        # #00aaff - Links

    # ========== INTERACTIVE ELEMENT COLORS ==========

    button_normal_bg: Tuple[int, int, int] = (64, 64, 64)    # #404040 - Normal button background
    button_disabled_bg: Tuple[int, int, int] = (42, 42, 42)  # #2a2a2a - Disabled button background
    button_text: Tuple[int, int, int] = (255, 255, 255)      # #ffffff - Button text
    button_disabled_text: Tuple[int, int, int] = (102, 102, 102) # #666666 - Disabled button text
    input_bg: Tuple[int, int, int] = (64, 64, 64)        # #404040 - Input field background
    input_text: Tuple[int, int, int] = (255, 255, 255)   # #ffffff - Input field text

    # ========== SELECTION COLORS ==========

    selection_bg: Tuple[int, int, int] = (0, 120, 212)   # #0078d4 - Primary selection background
    selection_text: Tuple[int, int, int] = (255, 255, 255) # #ffffff - Selected text

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        return QColor(*color_tuple)

    def create_palette(self) -> QPalette:
        """
        Build a QPalette from this scheme.

        Disabled colors are set after the all-group colors so they win.

        Returns:
            QPalette: Palette ready for QApplication.setPalette()
        """
        palette = QPalette()
        for group, role, name in _PALETTE_ROLES:
            color = self.to_qcolor(getattr(self, name))
            if group is None:
                palette.setColor(role, color)
            else:
                palette.setColor(group, role, color)
        return palette

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Create the dark appearance scheme (the dataclass defaults)."""
        return cls()

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """
        Create the light appearance scheme.

        Returns:
            ColorScheme: Colors adjusted for light backgrounds
        """
        return cls(
            window_bg=(245, 245, 245),          # Light gray background
            panel_bg=(255, 255, 255),           # White panel background
            border_color=(180, 180, 180),       # Medium gray borders
            border_light=(160, 160, 160),       # Lighter borders
            separator_color=(200, 200, 200),    # Light separators
            text_primary=(0, 0, 0),             # Black primary text
            text_disabled=(160, 160, 160),      # Light gray disabled text
            text_link=(0, 100, 200),            # Darker blue links
            button_normal_bg=(230, 230, 230),   # Light button background
            button_disabled_bg=(250, 250, 250), # Disabled button background
            button_text=(0, 0, 0),              # Black button text
            button_disabled_text=(160, 160, 160), # Light gray disabled text
            input_bg=(255, 255, 255),           # White input background
            input_text=(0, 0, 0),               # Black input text
            selection_bg=(0, 120, 215),         # Blue selection background
            selection_text=(255, 255, 255),     # White selected text
        )

    @classmethod
    def for_appearance(cls, appearance: ResolvedAppearance) -> 'ColorScheme':
        """Return the preset matching a resolved appearance."""
        if appearance is ResolvedAppearance.DARK:
            return cls.create_dark_theme()
        return cls.create_light_theme()
