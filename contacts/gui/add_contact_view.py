"""
===============================================================================
AddContactView - "add_contact" screen
-------------------------------------------------------------------------------
Responsibility
- Back button, three inputs (name, phone, email), save button.
- Every keystroke is forwarded to on_change(field, text); the controller
  answers with render(state, values).
- Valid inputs get a green border, the save button follows state.can_submit.

SRP
- Pure GUI + delegation. Validation lives in contacts.logic.validation.
===============================================================================
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, Mapping

from contacts.dto.form_controls_state import FormControlsState
from contacts.enum.contact_field import ContactField
from contacts.gui.i18n import tr

VALID_COLOR = "#4CAF50"
NEUTRAL_COLOR = "#9E9E9E"


class AddContactView(ttk.Frame):
    def __init__(
        self,
        parent: tk.Misc,
        *,
        on_change: Callable[[ContactField, str], None],
        on_submit: Callable[[], None],
        on_back: Callable[[], None],
    ) -> None:
        super().__init__(parent)
        self._on_change = on_change

        # Guard flag to suppress change callbacks while values are rendered
        self._rendering: bool = False

        self.columnconfigure(0, weight=1)

        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew", padx=16, pady=(16, 8))
        ttk.Button(header, text="← " + tr("contacts.back", "Back"), command=on_back)\
            .grid(row=0, column=0, sticky="w")
        ttk.Label(header, text=tr("contacts.add.title", "Add contact"),
                  font=("Segoe UI", 16, "bold")).grid(row=0, column=1, sticky="w", padx=(12, 0))

        form = ttk.Frame(self)
        form.grid(row=1, column=0, sticky="ew", padx=16)
        form.columnconfigure(0, weight=1)

        labels = {
            ContactField.NAME: tr("contacts.field.name", "Full name"),
            ContactField.PHONE: tr("contacts.field.phone", "Phone"),
            ContactField.EMAIL: tr("contacts.field.email", "Email"),
        }
        self._vars: Dict[ContactField, tk.StringVar] = {}
        self._entries: Dict[ContactField, tk.Entry] = {}

        for i, field in enumerate(ContactField):
            ttk.Label(form, text=labels[field]).grid(row=2 * i, column=0, sticky="w", pady=(8, 2))
            var = tk.StringVar()
            entry = tk.Entry(
                form,
                textvariable=var,
                relief="flat",
                highlightthickness=2,
                highlightbackground=NEUTRAL_COLOR,
                highlightcolor=NEUTRAL_COLOR,
            )
            entry.grid(row=2 * i + 1, column=0, sticky="ew", ipady=4)
            var.trace_add("write", lambda *_a, f=field: self._changed(f))
            self._vars[field] = var
            self._entries[field] = entry

        self._btn_submit = ttk.Button(self, text=tr("contacts.save", "Save contact"),
                                      command=on_submit, state="disabled")
        self._btn_submit.grid(row=2, column=0, sticky="ew", padx=16, pady=16)

    # --- rendering -----------------------------------------------------------
    def render(self, state: FormControlsState, values: Mapping[str, str]) -> None:
        self._rendering = True
        try:
            for field, var in self._vars.items():
                text = values.get(field.value, "")
                if var.get() != text:
                    var.set(text)
                color = VALID_COLOR if state.is_valid(field) else NEUTRAL_COLOR
                self._entries[field].configure(highlightbackground=color, highlightcolor=color)
        finally:
            self._rendering = False
        self._btn_submit.configure(state="normal" if state.can_submit else "disabled")

    def focus_first(self) -> None:
        self._entries[ContactField.NAME].focus_set()

    # --- events --------------------------------------------------------------
    def _changed(self, field: ContactField) -> None:
        if self._rendering:
            return
        self._on_change(field, self._vars[field].get())
