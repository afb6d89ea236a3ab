"""
ContactCard - one row of the contact list: three text lines plus a delete button.
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable

from contacts.gui.i18n import tr
from contacts.models.contact import Contact


class ContactCard(ttk.Frame):
    def __init__(self, parent: tk.Misc, contact: Contact, *, on_delete: Callable[[Contact], None]) -> None:
        super().__init__(parent, padding=12, relief="groove", borderwidth=1)
        self.contact = contact
        self.columnconfigure(0, weight=1)

        name, phone, email = contact.display_lines
        rows = (
            (tr("contacts.field.name", "Full name"), name),
            (tr("contacts.field.phone", "Phone"), phone),
            (tr("contacts.field.email", "Email"), email),
        )
        for i, (label, value) in enumerate(rows):
            ttk.Label(self, text=f"{label}: {value}", anchor="w").grid(row=i, column=0, sticky="ew")

        ttk.Button(
            self,
            text=tr("contacts.delete", "Delete"),
            command=lambda: on_delete(self.contact),
        ).grid(row=0, column=1, rowspan=3, sticky="e", padx=(12, 0))
