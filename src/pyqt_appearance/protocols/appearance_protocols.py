"""
ABC contracts for the host environment collaborators.

The resolver talks to the outside world through two explicit contracts:
a source of the system-level appearance signal and a surface that the
resolved appearance is applied to. Both fail loud when left unimplemented.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from pyqt_appearance.core.preference import ResolvedAppearance

logger = logging.getLogger(__name__)


class SystemAppearanceSource(ABC):
    """
    ABC for the host's "system prefers dark" signal.

    Subclasses implement ``is_dark`` and, when they observe a real signal,
    ``_start_watching``/``_stop_watching``. Listener bookkeeping lives here so
    every source honours the same contract: callbacks receive no payload,
    a callback is registered at most once, and the underlying signal is only
    watched while at least one listener exists.
    """

    def __init__(self):
        self._listeners: List[Callable[[], None]] = []

    @abstractmethod
    def is_dark(self) -> bool:
        """
        Query the current system preference.

        Returns:
            True if the host currently prefers a dark appearance.
        """
        pass

    def subscribe(self, callback: Callable[[], None]) -> None:
        """
        Register a change callback.

        Args:
            callback: Called with no arguments whenever the system preference changes
        """
        if callback in self._listeners:
            logger.debug(f"{type(self).__name__}: callback already subscribed, ignoring")
            return
        self._listeners.append(callback)
        if len(self._listeners) == 1:
            self._start_watching()

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        """
        Remove a previously registered change callback.

        Args:
            callback: Callback passed to subscribe(); unknown callbacks are ignored
        """
        if callback not in self._listeners:
            return
        self._listeners.remove(callback)
        if not self._listeners:
            self._stop_watching()

    def listener_count(self) -> int:
        return len(self._listeners)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    def _start_watching(self) -> None:
        pass

    def _stop_watching(self) -> None:
        pass


class AppearanceSurface(ABC):
    """
    ABC for the rendering surface that displays the resolved appearance.

    ``apply`` must be idempotent: applying the same appearance twice leaves
    the surface unchanged.
    """

    @abstractmethod
    def apply(self, appearance: "ResolvedAppearance") -> None:
        """
        Mark the surface as light or dark.

        Args:
            appearance: Resolved appearance to display
        """
        pass
