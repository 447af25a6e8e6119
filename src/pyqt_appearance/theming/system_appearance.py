"""
Qt-backed system appearance signal.

Reads the platform color scheme from ``QStyleHints`` and forwards
``colorSchemeChanged`` to subscribed callbacks. The Qt signal is only
connected while at least one callback is subscribed.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QStyleHints

from pyqt_appearance.protocols import SystemAppearanceSource

logger = logging.getLogger(__name__)


class QtSystemAppearance(SystemAppearanceSource):
    """
    System appearance source reading QStyleHints.colorScheme().

    An unknown color scheme (platforms without a preference) counts as light.
    """

    def __init__(self, app: Optional[QGuiApplication] = None):
        super().__init__()
        self._app = app
        self._watched_hints: Optional[QStyleHints] = None

    def _style_hints(self) -> Optional[QStyleHints]:
        app = self._app or QGuiApplication.instance()
        if app is None:
            return None
        return app.styleHints()

    def is_dark(self) -> bool:
        hints = self._style_hints()
        if hints is None:
            return False
        return hints.colorScheme() == Qt.ColorScheme.Dark

    def _start_watching(self) -> None:
        hints = self._style_hints()
        if hints is None:
            logger.warning("No QGuiApplication instance found, cannot watch system color scheme")
            return
        hints.colorSchemeChanged.connect(self._on_color_scheme_changed)
        self._watched_hints = hints
        logger.debug("Watching system color scheme changes")

    def _stop_watching(self) -> None:
        if self._watched_hints is None:
            return
        try:
            self._watched_hints.colorSchemeChanged.disconnect(self._on_color_scheme_changed)
        except TypeError:
            # Already disconnected (e.g. application torn down first)
            pass
        self._watched_hints = None
        logger.debug("Stopped watching system color scheme changes")

    def _on_color_scheme_changed(self, scheme: Qt.ColorScheme) -> None:
        logger.debug(f"System color scheme changed to {scheme.name}")
        self._notify()
