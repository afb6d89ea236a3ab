"""
core/tests/test_app_context.py

AppContext service registry and the T() translation shortcut.
"""

from __future__ import annotations

import unittest

from core.common.app_context import AppContext, T
from contacts.logic.contact_store import ContactStore


class TestAppContext(unittest.TestCase):
    def setUp(self) -> None:
        self._lang = AppContext.language
        AppContext.set_language("en")

    def tearDown(self) -> None:
        AppContext.language = self._lang

    def test_contact_store_is_registered(self) -> None:
        store = AppContext.services["contact_store"]
        self.assertIsInstance(store, ContactStore)
        self.assertIs(store, AppContext.contact_store)

    def test_translate_switches_language(self) -> None:
        self.assertEqual(T("contacts.title"), "Contacts")
        AppContext.set_language("ru")
        self.assertEqual(T("contacts.title"), "Список контактов")

    def test_unsupported_language_is_ignored(self) -> None:
        with self.assertLogs("core.common.app_context", level="WARNING"):
            AppContext.set_language("xx")
        self.assertEqual(AppContext.language, "en")


if __name__ == "__main__":
    unittest.main()
