"""
Theme resolver: preference state machine and system signal synchronization.

Holds the user's appearance preference and the resolved light/dark
appearance, applies the resolved appearance to a rendering surface, and keeps
it in sync with the system signal while the preference is ``system``.

Lifecycle:
    1. Constructed with defaults (system / light), not ready, unsubscribed.
    2. initialize() loads the stored preference, applies it, marks ready and
       subscribes to the system signal if the preference is ``system``.
    3. set_preference() transitions between light, dark and system. Each
       transition recomputes, applies and persists; entering ``system``
       subscribes, leaving it unsubscribes.
    4. shutdown() releases the system signal subscription.

Nothing is persisted or reapplied before initialize() completes, so a
transient default never overwrites the stored value.
"""

import logging
from typing import Optional, Union

from PyQt6.QtCore import QObject, QSettings, QTimer, pyqtSignal
from PyQt6.QtWidgets import QApplication

from pyqt_appearance.core.preference import Preference, ResolvedAppearance, resolve
from pyqt_appearance.io import PreferenceSink, PreferenceStore
from pyqt_appearance.protocols import (
    AppearanceConfig,
    AppearanceSurface,
    SystemAppearanceSource,
    get_appearance_config,
)
from .application_surface import QtApplicationSurface
from .system_appearance import QtSystemAppearance

logger = logging.getLogger(__name__)


class ThemeResolver(QObject):
    """
    Resolves and applies the appearance for one rendering scope.

    Signals:
        preference_changed(Preference): emitted after the preference changes
        appearance_changed(ResolvedAppearance): emitted after the resolved appearance changes

    Usage:
        resolver = ThemeResolver(PreferenceStore(), QtSystemAppearance(), QtApplicationSurface())
        resolver.initialize()
        resolver.set_preference(Preference.DARK)
    """

    preference_changed = pyqtSignal(object)
    appearance_changed = pyqtSignal(object)

    def __init__(self, store: PreferenceSink, system_source: SystemAppearanceSource,
                 surface: AppearanceSurface, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store
        self._system_source = system_source
        self._surface = surface

        self._preference = Preference.SYSTEM
        self._resolved = ResolvedAppearance.LIGHT
        self._ready = False
        self._subscribed = False

    # ========== STATE ACCESS ==========

    @property
    def preference(self) -> Preference:
        return self._preference

    @property
    def resolved_appearance(self) -> ResolvedAppearance:
        return self._resolved

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def is_subscribed(self) -> bool:
        return self._subscribed

    def current_preference(self) -> Preference:
        return self._preference

    def current_resolved_appearance(self) -> ResolvedAppearance:
        return self._resolved

    # ========== LIFECYCLE ==========

    def initialize(self) -> None:
        """Load the stored preference, apply it and start following the system if needed."""
        if self._ready:
            logger.debug("ThemeResolver already initialized, ignoring")
            return

        previous = self._preference
        self._preference = self._store.load()
        logger.debug(f"Loaded appearance preference: {self._preference.value}")

        self._reapply(force=True)
        self._ready = True
        self._sync_subscription()

        if self._preference is not previous:
            self.preference_changed.emit(self._preference)

    def initialize_later(self) -> None:
        """Defer initialize() to the next event loop iteration."""
        QTimer.singleShot(0, self.initialize)

    def shutdown(self) -> None:
        """Release the system signal subscription."""
        self._unsubscribe()

    # ========== TRANSITIONS ==========

    def set_preference(self, preference: Union[Preference, str]) -> None:
        """
        Change the preference, apply the new appearance and persist it.

        Args:
            preference: Preference or its string value ("light", "dark", "system")

        Raises:
            ValueError: If preference is not a recognized value
        """
        preference = Preference(preference)

        if not self._ready:
            logger.warning(f"set_preference({preference.value!r}) before initialize(), ignoring")
            return

        changed = preference is not self._preference
        self._preference = preference
        self._reapply()
        self._store.save(preference)
        self._sync_subscription()

        if changed:
            logger.debug(f"Appearance preference changed to {preference.value}")
            self.preference_changed.emit(preference)

    def _on_system_appearance_changed(self) -> None:
        if not self._ready or self._preference is not Preference.SYSTEM:
            return
        self._reapply()

    def _reapply(self, force: bool = False) -> None:
        system_appearance = ResolvedAppearance.from_dark_flag(self._system_source.is_dark())
        resolved = resolve(self._preference, system_appearance)
        changed = resolved is not self._resolved
        self._resolved = resolved
        self._surface.apply(resolved)
        if changed or force:
            self.appearance_changed.emit(resolved)

    # ========== SYSTEM SIGNAL SUBSCRIPTION ==========

    def _sync_subscription(self) -> None:
        if self._preference is Preference.SYSTEM:
            self._subscribe()
        else:
            self._unsubscribe()

    def _subscribe(self) -> None:
        if self._subscribed:
            return
        self._system_source.subscribe(self._on_system_appearance_changed)
        self._subscribed = True
        logger.debug("Subscribed to system appearance changes")

    def _unsubscribe(self) -> None:
        if not self._subscribed:
            return
        self._system_source.unsubscribe(self._on_system_appearance_changed)
        self._subscribed = False
        logger.debug("Unsubscribed from system appearance changes")


def create_theme_resolver(app: Optional[QApplication] = None,
                          config: Optional[AppearanceConfig] = None,
                          parent: Optional[QObject] = None) -> ThemeResolver:
    """
    Build a resolver wired to QSettings, QStyleHints and the QApplication.

    Args:
        app: QApplication instance (uses QApplication.instance() if None)
        config: Appearance configuration (uses the global config if None)
        parent: Optional QObject parent for the resolver

    Returns:
        ThemeResolver: Uninitialized resolver; call initialize() or initialize_later()
    """
    config = config or get_appearance_config()

    def settings_factory() -> QSettings:
        return QSettings(config.organization_name, config.application_name)

    return ThemeResolver(
        PreferenceStore(settings_factory, config.settings_key),
        QtSystemAppearance(app),
        QtApplicationSurface(app, config),
        parent,
    )
