"""Contacts feature exceptions."""
from __future__ import annotations


class ContactsError(Exception):
    """Base exception for contacts feature."""


class FormStateError(ContactsError):
    """Raised when the add form is used outside its editing state."""


class FormNotSubmittableError(FormStateError):
    """Raised when submit is requested for a form that does not validate."""


class NavigationError(ContactsError):
    """Raised for unknown screens or transitions outside the navigation graph."""
