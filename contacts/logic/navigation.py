"""
Navigator - two-screen navigation with a back stack.

Graph:
    view_contacts  --navigate-->  add_contact
    add_contact    --pop------->  view_contacts

view_contacts is the start destination and never leaves the stack.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from contacts.enum.screen import Screen
from contacts.exceptions.errors import NavigationError

logger = logging.getLogger(__name__)

ScreenListener = Callable[[Screen], None]

START_DESTINATION = Screen.VIEW_CONTACTS

_ALLOWED: dict[Screen, frozenset[Screen]] = {
    Screen.VIEW_CONTACTS: frozenset({Screen.ADD_CONTACT}),
    Screen.ADD_CONTACT: frozenset({Screen.VIEW_CONTACTS}),
}


class Navigator:
    """Tracks the current screen and informs subscribers on change."""

    def __init__(self) -> None:
        self._stack: List[Screen] = [START_DESTINATION]
        self._listeners: List[ScreenListener] = []

    @property
    def current(self) -> Screen:
        return self._stack[-1]

    @property
    def back_stack(self) -> tuple[Screen, ...]:
        return tuple(self._stack)

    def navigate(self, screen: Screen | str) -> None:
        target = self._screen(screen)
        if target is self.current:
            return
        if target not in _ALLOWED[self.current]:
            raise NavigationError(f"No route from {self.current.value} to {target.value}")
        if target in self._stack:
            # Going "forward" to a screen already below us means returning to it.
            while self.current is not target:
                self._stack.pop()
        else:
            self._stack.append(target)
        logger.debug("Navigated to %s", target.value)
        self._notify()

    def pop_back_stack(self) -> bool:
        """Return to the previous screen; False when already at the start."""
        if len(self._stack) <= 1:
            return False
        left = self._stack.pop()
        logger.debug("Back from %s to %s", left.value, self.current.value)
        self._notify()
        return True

    def subscribe(self, callback: ScreenListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: ScreenListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------ #
    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self.current)

    @staticmethod
    def _screen(screen: Screen | str) -> Screen:
        try:
            return Screen(screen)
        except ValueError as ex:
            raise NavigationError(f"Unknown screen: {screen!r}") from ex
