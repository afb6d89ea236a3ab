"""
contacts/tests/test_contacts_controller.py

Exercises the controller through a recording fake view (no Tk needed).
"""

from __future__ import annotations

import unittest

from contacts.controllers.contacts_controller import ContactsController
from contacts.enum.contact_field import ContactField
from contacts.enum.screen import Screen
from contacts.logic.contact_store import ContactStore
from contacts.models.contact import Contact


class _FakeView:
    def __init__(self) -> None:
        self.contacts: tuple[Contact, ...] | None = None
        self.screens: list[Screen] = []
        self.forms: list[tuple] = []

    def render_contacts(self, contacts):
        self.contacts = contacts

    def show_screen(self, screen):
        self.screens.append(screen)

    def render_form(self, state, values):
        self.forms.append((state, dict(values)))


class TestContactsController(unittest.TestCase):
    def setUp(self) -> None:
        self.store = ContactStore()
        self.view = _FakeView()
        self.ctrl = ContactsController(self.view, store=self.store)
        self.ctrl.start()

    def _type_valid_contact(self) -> None:
        self.ctrl.on_field_changed(ContactField.NAME, "Ann Lee")
        self.ctrl.on_field_changed(ContactField.PHONE, "12345678901")
        self.ctrl.on_field_changed(ContactField.EMAIL, "a@b.com")

    def test_start_renders_list_screen(self) -> None:
        self.assertEqual(self.view.contacts, ())
        self.assertEqual(self.view.screens, [Screen.VIEW_CONTACTS])

    def test_add_flow(self) -> None:
        self.ctrl.action_request_add()
        self.assertIs(self.ctrl.current_screen, Screen.ADD_CONTACT)

        self._type_valid_contact()
        state, values = self.view.forms[-1]
        self.assertTrue(state.can_submit)
        self.assertEqual(values["email"], "a@b.com")

        contact = self.ctrl.action_submit()
        self.assertEqual(contact, Contact("Ann Lee", "12345678901", "a@b.com"))
        self.assertEqual(self.view.contacts, (contact,))
        self.assertIs(self.ctrl.current_screen, Screen.VIEW_CONTACTS)
        self.assertEqual(self.view.screens[-1], Screen.VIEW_CONTACTS)

        # fields are cleared for the next visit
        state, values = self.view.forms[-1]
        self.assertEqual(values, {"name": "", "phone": "", "email": ""})
        self.assertFalse(state.can_submit)

    def test_invalid_submit_is_ignored(self) -> None:
        self.ctrl.action_request_add()
        self.ctrl.on_field_changed(ContactField.PHONE, "12345678901")
        self.ctrl.on_field_changed(ContactField.EMAIL, "a@b.com")
        self.assertFalse(self.view.forms[-1][0].can_submit)

        with self.assertLogs("contacts.controllers.contacts_controller", level="WARNING"):
            self.assertIsNone(self.ctrl.action_submit())
        self.assertEqual(self.store.list_contacts(), ())
        self.assertIs(self.ctrl.current_screen, Screen.ADD_CONTACT)

    def test_back_discards_input(self) -> None:
        self.ctrl.action_request_add()
        self.ctrl.on_field_changed(ContactField.NAME, "Half typed")
        self.ctrl.action_back()
        self.assertIs(self.ctrl.current_screen, Screen.VIEW_CONTACTS)
        self.assertEqual(self.ctrl.form.values["name"], "")
        self.assertEqual(self.store.list_contacts(), ())

    def test_delete_rerenders_list(self) -> None:
        ann = Contact("Ann Lee", "12345678901", "a@b.com")
        self.store.add_contact(ann)
        self.assertEqual(self.view.contacts, (ann,))
        self.ctrl.action_delete(ann)
        self.assertEqual(self.view.contacts, ())

    def test_dispose_detaches_from_store(self) -> None:
        self.ctrl.dispose()
        self.store.add_contact(Contact("x", "y", "z"))
        self.assertEqual(self.view.contacts, ())


if __name__ == "__main__":
    unittest.main()
