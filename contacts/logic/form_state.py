"""
Add-contact form state machine.

    EDITING --submit() [form valid]--> SUBMITTED --reset()--> EDITING

submit() hands out the new Contact and clears all three fields. The view
keeps the save button disabled while the form is invalid, so a failing
submit() is a programming error and raises.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict

from contacts.dto.form_controls_state import FormControlsState
from contacts.enum.contact_field import ContactField
from contacts.exceptions.errors import FormNotSubmittableError, FormStateError
from contacts.logic.validation import validate_form
from contacts.models.contact import Contact

logger = logging.getLogger(__name__)


class FormPhase(str, Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"


class AddContactForm:
    """Holds the raw text of the three inputs and the current phase."""

    def __init__(self) -> None:
        self.phase: FormPhase = FormPhase.EDITING
        self._values: Dict[ContactField, str] = {f: "" for f in ContactField}

    # ------------------------------------------------------------------ #
    @property
    def values(self) -> Dict[str, str]:
        return {f.value: v for f, v in self._values.items()}

    def value(self, field: ContactField | str) -> str:
        return self._values[self._field(field)]

    @property
    def controls_state(self) -> FormControlsState:
        return validate_form(
            self._values[ContactField.NAME],
            self._values[ContactField.PHONE],
            self._values[ContactField.EMAIL],
        )

    # ------------------------------------------------------------------ #
    def set_field(self, field: ContactField | str, text: str) -> FormControlsState:
        if self.phase is not FormPhase.EDITING:
            raise FormStateError("Form already submitted; call reset() before editing")
        self._values[self._field(field)] = text
        return self.controls_state

    def submit(self) -> Contact:
        if self.phase is not FormPhase.EDITING:
            raise FormStateError("Form already submitted")
        state = self.controls_state
        if not state.can_submit:
            raise FormNotSubmittableError(
                f"Form is not valid (name={state.name_valid}, "
                f"phone={state.phone_valid}, email={state.email_valid})"
            )
        contact = Contact(
            name=self._values[ContactField.NAME],
            phone=self._values[ContactField.PHONE],
            email=self._values[ContactField.EMAIL],
        )
        self._clear()
        self.phase = FormPhase.SUBMITTED
        logger.debug("Form submitted for %s", contact.name)
        return contact

    def reset(self) -> None:
        self._clear()
        self.phase = FormPhase.EDITING

    # ------------------------------------------------------------------ #
    def _clear(self) -> None:
        for f in ContactField:
            self._values[f] = ""

    @staticmethod
    def _field(field: ContactField | str) -> ContactField:
        try:
            return ContactField(field)
        except ValueError as ex:
            raise FormStateError(f"Unknown form field: {field!r}") from ex
