"""
===============================================================================
ContactListView - "view_contacts" screen
-------------------------------------------------------------------------------
Responsibility
- Scrollable list of ContactCard widgets, one per stored contact.
- "Add contact" button in the header.
- Delegates to on_add() / on_delete(contact). No store access here.
===============================================================================
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, List

from contacts.gui.contact_card import ContactCard
from contacts.gui.i18n import tr
from contacts.models.contact import Contact


class ContactListView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Misc,
        *,
        on_add: Callable[[], None],
        on_delete: Callable[[Contact], None],
    ) -> None:
        super().__init__(parent)
        self._on_delete = on_delete
        self._cards: List[ContactCard] = []

        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        # Header
        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))
        header.columnconfigure(0, weight=1)
        ttk.Label(header, text=tr("contacts.title", "Contacts"),
                  font=("Segoe UI", 16, "bold")).grid(row=0, column=0, sticky="w")
        ttk.Button(header, text="+ " + tr("contacts.add", "Add contact"),
                   command=on_add).grid(row=0, column=1, sticky="e")

        # Scrollable body (canvas + inner frame)
        body = ttk.Frame(self)
        body.grid(row=1, column=0, sticky="nsew", padx=16, pady=(0, 16))
        body.columnconfigure(0, weight=1)
        body.rowconfigure(0, weight=1)

        self._canvas = tk.Canvas(body, highlightthickness=0)
        vsb = ttk.Scrollbar(body, orient="vertical", command=self._canvas.yview)
        self._canvas.configure(yscrollcommand=vsb.set)
        self._canvas.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")

        self._inner = ttk.Frame(self._canvas)
        self._inner.columnconfigure(0, weight=1)
        self._window_id = self._canvas.create_window((0, 0), window=self._inner, anchor="nw")

        self._inner.bind("<Configure>", lambda _e: self._canvas.configure(scrollregion=self._canvas.bbox("all")))
        self._canvas.bind("<Configure>", lambda e: self._canvas.itemconfigure(self._window_id, width=e.width))

        self._empty_lbl = ttk.Label(self._inner, text=tr("contacts.empty", "No contacts yet"),
                                    foreground="#757575")

    # data rendering
    def render(self, contacts: Iterable[Contact]) -> None:
        for card in self._cards:
            card.destroy()
        self._cards.clear()
        self._empty_lbl.grid_remove()

        contacts = list(contacts)
        if not contacts:
            self._empty_lbl.grid(row=0, column=0, sticky="w", pady=8)
            return

        for i, contact in enumerate(contacts):
            card = ContactCard(self._inner, contact, on_delete=self._on_delete)
            card.grid(row=i, column=0, sticky="ew", pady=4)
            self._cards.append(card)
