"""
Application-wide rendering surface.

Marks the QApplication and its top-level windows as light or dark through
dynamic properties and installs the matching palette. Stylesheets select on
the window property, e.g. ``QMainWindow[dark="true"] QLabel``. Windows shown
after the appearance was applied are marked when they first show.
"""

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtGui import QPalette
from PyQt6.QtWidgets import QApplication, QWidget

from pyqt_appearance.core.preference import ResolvedAppearance
from pyqt_appearance.protocols import AppearanceConfig, AppearanceSurface, get_appearance_config
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class _WindowMarker(QObject):
    """Application event filter marking top-level windows as they show."""

    def __init__(self, surface: "QtApplicationSurface"):
        super().__init__()
        self._surface = surface

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.Show and isinstance(obj, QWidget) and obj.isWindow():
            self._surface._mark_window(obj)
        return False


class QtApplicationSurface(AppearanceSurface):
    """Applies a resolved appearance to a QApplication."""

    def __init__(self, app: Optional[QApplication] = None,
                 config: Optional[AppearanceConfig] = None):
        """
        Initialize the surface.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)
            config: Appearance configuration (uses the global config if None)
        """
        self._app = app
        self._config = config or get_appearance_config()
        self._applied: Optional[ResolvedAppearance] = None
        self._palettes: Dict[ResolvedAppearance, QPalette] = {}
        self._original_palette: Optional[QPalette] = None
        self._window_marker: Optional[_WindowMarker] = None

    @property
    def applied_appearance(self) -> Optional[ResolvedAppearance]:
        return self._applied

    def _application(self) -> Optional[QApplication]:
        return self._app or QApplication.instance()

    def apply(self, appearance: ResolvedAppearance) -> None:
        app = self._application()
        if app is None:
            logger.warning("No QApplication instance found, cannot apply appearance")
            return

        # Windows may have been created since the last apply; always re-mark
        self._mark(app, appearance.value, appearance.is_dark)
        self._watch_windows(app)
        if appearance is self._applied:
            return

        if self._config.apply_palette:
            if self._original_palette is None:
                self._original_palette = app.palette()
            app.setPalette(self._palette_for(appearance))

        if self._config.repolish_widgets:
            self._repolish(app)

        self._applied = appearance
        logger.info(f"Applied {appearance.value} appearance to application")

    def reset(self) -> None:
        """Clear the appearance markers and restore the original palette."""
        app = self._application()
        if app is None or self._applied is None:
            return
        if self._window_marker is not None:
            app.removeEventFilter(self._window_marker)
            self._window_marker = None
        self._mark(app, None, None)
        if self._original_palette is not None:
            app.setPalette(self._original_palette)
            self._original_palette = None
        self._applied = None

    def _palette_for(self, appearance: ResolvedAppearance) -> QPalette:
        if appearance not in self._palettes:
            self._palettes[appearance] = ColorScheme.for_appearance(appearance).create_palette()
        return self._palettes[appearance]

    def _watch_windows(self, app: QApplication) -> None:
        if self._window_marker is None:
            self._window_marker = _WindowMarker(self)
            app.installEventFilter(self._window_marker)

    def _mark(self, app: QApplication, appearance_value, dark_value) -> None:
        # None removes the dynamic property
        for target in [app, *app.topLevelWidgets()]:
            target.setProperty(self._config.appearance_property, appearance_value)
            target.setProperty(self._config.dark_property, dark_value)

    def _mark_window(self, window: QWidget) -> None:
        if self._applied is None:
            return
        window.setProperty(self._config.appearance_property, self._applied.value)
        window.setProperty(self._config.dark_property, self._applied.is_dark)

    @staticmethod
    def _repolish(app: QApplication) -> None:
        for widget in app.allWidgets():
            style = widget.style()
            style.unpolish(widget)
            style.polish(widget)
            widget.update()
