"""
Form validation rules for the add-contact screen.

Pure, stateless predicates; the view re-evaluates them on every keystroke.
"""

from __future__ import annotations

from contacts.dto.form_controls_state import FormControlsState

PHONE_LENGTH = 11
_ASCII_DIGITS = frozenset("0123456789")


def is_name_valid(text: str) -> bool:
    return len(text) > 0


def is_phone_valid(text: str) -> bool:
    """Exactly 11 ASCII digits. str.isdigit() is not used: it accepts e.g. '٣' or '²'."""
    return len(text) == PHONE_LENGTH and all(ch in _ASCII_DIGITS for ch in text)


def is_email_valid(text: str) -> bool:
    """Requires an '@' and a '.' anywhere in the text, nothing more."""
    return "@" in text and "." in text


def is_form_valid(name: str, phone: str, email: str) -> bool:
    return is_name_valid(name) and is_phone_valid(phone) and is_email_valid(email)


def validate_form(name: str, phone: str, email: str) -> FormControlsState:
    """Bundle all field checks into the state consumed by the view."""
    return FormControlsState(
        name_valid=is_name_valid(name),
        phone_valid=is_phone_valid(phone),
        email_valid=is_email_valid(email),
    )
