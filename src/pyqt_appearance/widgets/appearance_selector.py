"""Combo box for choosing the appearance preference within a theme scope."""

import logging
from typing import Optional

from PyQt6.QtCore import QSignalBlocker
from PyQt6.QtWidgets import QComboBox, QWidget

from pyqt_appearance.core.preference import Preference
from pyqt_appearance.theming import ThemeContext, use_theme

logger = logging.getLogger(__name__)

PREFERENCE_LABELS = (
    (Preference.LIGHT, "Light"),
    (Preference.DARK, "Dark"),
    (Preference.SYSTEM, "System"),
)


class AppearanceSelector(QComboBox):
    """
    Light / Dark / System selector bound to the enclosing theme scope.

    The theme is looked up from ``parent`` at construction, so the parent
    must already sit inside a scope created with provide_theme().

    Usage:
        provide_theme(window, resolver)
        selector = AppearanceSelector(parent=settings_panel)
    """

    def __init__(self, parent: QWidget, theme: Optional[ThemeContext] = None):
        super().__init__(parent)
        self._theme = theme or use_theme(parent)

        for preference, label in PREFERENCE_LABELS:
            self.addItem(label, preference.value)

        self._show_preference(self._theme.preference)
        self.currentIndexChanged.connect(self._on_index_changed)
        self._theme.preference_changed.connect(self._show_preference)

    @property
    def theme(self) -> ThemeContext:
        return self._theme

    def selected_preference(self) -> Preference:
        return Preference(self.currentData())

    def _on_index_changed(self, index: int) -> None:
        value = self.itemData(index)
        if value is None:
            return
        preference = Preference(value)
        logger.debug(f"AppearanceSelector: user selected {preference.value}")
        self._theme.set_preference(preference)
        # Not applied before the resolver is ready; snap back to what is in effect
        self._show_preference(self._theme.preference)

    def _show_preference(self, preference: Preference) -> None:
        index = self.findData(preference.value)
        if index < 0 or index == self.currentIndex():
            return
        # Programmatic change; don't echo it back as a user selection
        with QSignalBlocker(self):
            self.setCurrentIndex(index)
