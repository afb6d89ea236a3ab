"""Unit tests for the session contact store."""

from __future__ import annotations

import unittest

from contacts.logic.contact_store import ContactStore
from contacts.models.contact import Contact

ANN = Contact(name="Ann Lee", phone="12345678901", email="a@b.com")
BOB = Contact(name="Bob", phone="10987654321", email="bob@example.org")


class TestContactStore(unittest.TestCase):
    def setUp(self) -> None:
        self.store = ContactStore()
        self.events: list[tuple[Contact, ...]] = []
        self.store.subscribe(self.events.append)

    def test_starts_empty(self) -> None:
        self.assertEqual(self.store.list_contacts(), ())
        self.assertEqual(len(self.store), 0)

    def test_add_appends_at_end(self) -> None:
        self.store.add_contact(ANN)
        self.assertEqual(self.store.list_contacts(), (ANN,))
        self.store.add_contact(BOB)
        self.assertEqual(self.store.list_contacts(), (ANN, BOB))

    def test_add_performs_no_validation(self) -> None:
        junk = Contact(name="", phone="x", email="y")
        self.store.add_contact(junk)
        self.assertIn(junk, self.store)

    def test_delete_removes_all_structural_matches(self) -> None:
        for c in (ANN, BOB, Contact("Ann Lee", "12345678901", "a@b.com")):
            self.store.add_contact(c)
        self.store.delete_contact(Contact("Ann Lee", "12345678901", "a@b.com"))
        self.assertEqual(self.store.list_contacts(), (BOB,))

    def test_delete_absent_is_noop(self) -> None:
        self.store.add_contact(ANN)
        self.events.clear()
        self.store.delete_contact(BOB)
        self.assertEqual(self.store.list_contacts(), (ANN,))
        self.assertEqual(self.events, [])

    def test_snapshot_cannot_mutate_store(self) -> None:
        self.store.add_contact(ANN)
        snapshot = self.store.list_contacts()
        self.assertIsInstance(snapshot, tuple)
        with self.assertRaises(AttributeError):
            snapshot.append(BOB)  # type: ignore[attr-defined]
        self.assertEqual(list(self.store), [ANN])

    def test_listeners_receive_snapshots(self) -> None:
        self.store.add_contact(ANN)
        self.store.add_contact(BOB)
        self.store.delete_contact(ANN)
        self.assertEqual(self.events, [(ANN,), (ANN, BOB), (BOB,)])

    def test_unsubscribe_stops_events(self) -> None:
        self.store.unsubscribe(self.events.append)
        self.store.add_contact(ANN)
        self.assertEqual(self.events, [])
        # unknown callbacks are ignored
        self.store.unsubscribe(print)

    def test_subscribe_is_idempotent(self) -> None:
        self.store.subscribe(self.events.append)
        self.store.add_contact(ANN)
        self.assertEqual(len(self.events), 1)


if __name__ == "__main__":
    unittest.main()
