"""
===============================================================================
Contacts Controller - list/add screens, store and form glue
-------------------------------------------------------------------------------
Purpose:
    - Translate user actions into store, form and navigation calls.
    - Push the resulting state back to the view. No tkinter in here.

Contract to the View:
    - view.render_contacts(contacts: tuple[Contact, ...])
    - view.show_screen(screen: Screen)
    - view.render_form(state: FormControlsState, values: dict[str, str])
===============================================================================
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from contacts.enum.contact_field import ContactField
from contacts.enum.screen import Screen
from contacts.exceptions.errors import FormNotSubmittableError
from contacts.logic.contact_store import ContactStore
from contacts.logic.form_state import AddContactForm
from contacts.logic.navigation import Navigator
from contacts.models.contact import Contact

logger = logging.getLogger(__name__)


class ContactsController:
    """
    UI-only controller for the contacts feature.

    Responsibilities:
        - Keep the view in sync with store contents and current screen.
        - Run validation on every field change.
        - Commit the form on submit and return to the list.
    """

    def __init__(
        self,
        view: Any,
        *,
        store: ContactStore,
        navigator: Optional[Navigator] = None,
        form: Optional[AddContactForm] = None,
    ) -> None:
        """
        Parameters
        ----------
        view : Any
            The GUI view implementing the render contract above.
        store : ContactStore
            Session store; shared across views via AppContext.
        """
        self._view = view
        self._store = store
        self._nav = navigator or Navigator()
        self._form = form or AddContactForm()

        self._store.subscribe(self._on_contacts_changed)
        self._nav.subscribe(self._on_screen_changed)

    # ------------------------------------------------------------------ #
    @property
    def current_screen(self) -> Screen:
        return self._nav.current

    @property
    def form(self) -> AddContactForm:
        return self._form

    def start(self) -> None:
        """Initial render: start destination plus current list."""
        self._view.render_contacts(self._store.list_contacts())
        self._view.show_screen(self._nav.current)

    def dispose(self) -> None:
        """Detach from the shared store (the view is being destroyed)."""
        self._store.unsubscribe(self._on_contacts_changed)
        self._nav.unsubscribe(self._on_screen_changed)

    # ------------------------------------------------------------------ #
    # List screen                                                        #
    # ------------------------------------------------------------------ #
    def action_request_add(self) -> None:
        self._form.reset()
        self._nav.navigate(Screen.ADD_CONTACT)
        self._render_form()

    def action_delete(self, contact: Contact) -> None:
        self._store.delete_contact(contact)

    # ------------------------------------------------------------------ #
    # Add screen                                                         #
    # ------------------------------------------------------------------ #
    def action_back(self) -> None:
        self._form.reset()
        self._nav.pop_back_stack()

    def on_field_changed(self, field: ContactField | str, text: str) -> None:
        self._form.set_field(field, text)
        self._view.render_form(self._form.controls_state, self._form.values)

    def action_submit(self) -> Optional[Contact]:
        """
        Commit the form. Returns the new contact, or None if the form does not
        validate (the view should never let that happen).
        """
        try:
            contact = self._form.submit()
        except FormNotSubmittableError as ex:
            logger.warning("Submit ignored: %s", ex)
            return None

        self._store.add_contact(contact)
        self._form.reset()
        self._render_form()
        self._nav.pop_back_stack()
        return contact

    # ------------------------------------------------------------------ #
    # Observers                                                          #
    # ------------------------------------------------------------------ #
    def _on_contacts_changed(self, contacts: tuple[Contact, ...]) -> None:
        self._view.render_contacts(contacts)

    def _on_screen_changed(self, screen: Screen) -> None:
        self._view.show_screen(screen)

    def _render_form(self) -> None:
        self._view.render_form(self._form.controls_state, self._form.values)
