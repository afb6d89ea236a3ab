"""
ContactsView - host frame of the contacts feature.

Owns the ContactsController and stacks the two screens in one grid cell;
show_screen() raises the one matching the navigator. UI only, all state
lives in the controller and the shared ContactStore.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Mapping, Optional

from contacts.controllers.contacts_controller import ContactsController
from contacts.dto.form_controls_state import FormControlsState
from contacts.enum.screen import Screen
from contacts.gui.add_contact_view import AddContactView
from contacts.gui.contact_list_view import ContactListView
from contacts.gui.i18n import tr
from contacts.logic.contact_store import ContactStore
from contacts.models.contact import Contact


class ContactsView(ttk.Frame):
    """
    Tkinter view. GUI only; keeps logic in the controller.

    DI (resolved by MainWindow via signature introspection):
        contact_store: ContactStore
        set_status: optional status bar callback of the host window
    """

    def __init__(
        self,
        parent: tk.Misc,
        *,
        contact_store: ContactStore,
        set_status: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(parent)
        self._set_status = set_status
        self._last_count: Optional[int] = None

        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self.ctrl = ContactsController(self, store=contact_store)

        self._screens: dict[Screen, ttk.Frame] = {
            Screen.VIEW_CONTACTS: ContactListView(
                self, on_add=self.ctrl.action_request_add, on_delete=self.ctrl.action_delete
            ),
            Screen.ADD_CONTACT: AddContactView(
                self,
                on_change=self.ctrl.on_field_changed,
                on_submit=self.ctrl.action_submit,
                on_back=self.ctrl.action_back,
            ),
        }
        for frame in self._screens.values():
            frame.grid(row=0, column=0, sticky="nsew")

        self.bind("<Destroy>", self._on_destroy, add="+")
        self.ctrl.start()

    # --------------------------------------------------------- view contract
    def render_contacts(self, contacts: tuple[Contact, ...]) -> None:
        self._screens[Screen.VIEW_CONTACTS].render(contacts)  # type: ignore[attr-defined]
        count = len(contacts)
        if self._last_count is not None and count != self._last_count:
            key, default = (
                ("contacts.status.added", "Contact added") if count > self._last_count
                else ("contacts.status.deleted", "Contact deleted")
            )
            self._status(f"{tr(key, default)} ({count})")
        self._last_count = count

    def show_screen(self, screen: Screen) -> None:
        frame = self._screens[screen]
        frame.tkraise()
        if screen is Screen.ADD_CONTACT:
            frame.focus_first()  # type: ignore[attr-defined]

    def render_form(self, state: FormControlsState, values: Mapping[str, str]) -> None:
        self._screens[Screen.ADD_CONTACT].render(state, values)  # type: ignore[attr-defined]

    # ---------------------------------------------------------------- helpers
    def _status(self, message: str) -> None:
        if callable(self._set_status):
            self._set_status(message)

    def _on_destroy(self, event: tk.Event) -> None:
        if event.widget is self:
            self.ctrl.dispose()
