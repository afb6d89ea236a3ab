"""FormControlsState DTO for the add-contact form."""

from __future__ import annotations
from dataclasses import dataclass

from contacts.enum.contact_field import ContactField


@dataclass(frozen=True)
class FormControlsState:
    """
    Per-field validity flags and submit enablement.

    Immutable DTO - computed by the validator, rendered by AddContactView
    (green border for valid fields, disabled save button otherwise).
    """

    name_valid: bool
    phone_valid: bool
    email_valid: bool

    @property
    def can_submit(self) -> bool:
        return self.name_valid and self.phone_valid and self.email_valid

    def is_valid(self, field: ContactField) -> bool:
        return {
            ContactField.NAME: self.name_valid,
            ContactField.PHONE: self.phone_valid,
            ContactField.EMAIL: self.email_valid,
        }[ContactField(field)]

    @staticmethod
    def empty() -> "FormControlsState":
        """Factory for a freshly opened form (nothing entered yet)."""
        return FormControlsState(name_valid=False, phone_valid=False, email_valid=False)
