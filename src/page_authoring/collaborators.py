from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Session(Protocol):
    def is_logged_in(self) -> bool:
        ...


class MenuNotifier(Protocol):
    def refresh(self) -> None:
        ...


class StaticSession:
    def __init__(self, *, logged_in: bool) -> None:
        self._logged_in = logged_in

    def is_logged_in(self) -> bool:
        return self._logged_in


class NullMenuNotifier:
    """Menu notifier for sessions without a navigation menu to redraw."""

    def refresh(self) -> None:
        logger.debug("Menu refresh requested")


__all__ = ["MenuNotifier", "NullMenuNotifier", "Session", "StaticSession"]
