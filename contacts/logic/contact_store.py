"""
ContactStore
------------
Session-scoped, in-memory contact list.

Owned by AppContext (not by a view) so it survives screen switches and can be
tested without Tk. Nothing is persisted; the list is gone when the process
exits.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List

from contacts.models.contact import Contact

logger = logging.getLogger(__name__)

ContactsListener = Callable[[tuple[Contact, ...]], None]


class ContactStore:
    """
    Ordered list of contacts with append and remove-by-value.

    Observers registered via subscribe() receive a snapshot after every
    mutation that changed the list.
    """

    def __init__(self) -> None:
        self._contacts: List[Contact] = []
        self._listeners: List[ContactsListener] = []

    # --- Public API ---------------------------------------------------------

    def add_contact(self, contact: Contact) -> None:
        """Append to the end. No validation here; that is the form's job."""
        self._contacts.append(contact)
        logger.info("Contact added: %s (total=%d)", contact.name, len(self._contacts))
        self._notify()

    def delete_contact(self, contact: Contact) -> None:
        """
        Remove every entry equal to *contact*.

        Deleting a contact that is not stored is a silent no-op.
        """
        remaining = [c for c in self._contacts if c != contact]
        removed = len(self._contacts) - len(remaining)
        if not removed:
            logger.debug("Delete ignored, contact not stored: %s", contact.name)
            return
        self._contacts = remaining
        logger.info("Contact deleted: %s (removed=%d, total=%d)",
                    contact.name, removed, len(self._contacts))
        self._notify()

    def list_contacts(self) -> tuple[Contact, ...]:
        """Read-only snapshot in insertion order."""
        return tuple(self._contacts)

    # --- Observers ----------------------------------------------------------

    def subscribe(self, callback: ContactsListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: ContactsListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # --- Container protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.list_contacts())

    def __contains__(self, contact: object) -> bool:
        return contact in self._contacts

    # --- Internal helpers ---------------------------------------------------

    def _notify(self) -> None:
        snapshot = self.list_contacts()
        for callback in list(self._listeners):
            callback(snapshot)
