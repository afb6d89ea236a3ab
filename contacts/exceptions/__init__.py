from contacts.exceptions.errors import (
    ContactsError,
    FormNotSubmittableError,
    FormStateError,
    NavigationError,
)

__all__ = [
    "ContactsError",
    "FormStateError",
    "FormNotSubmittableError",
    "NavigationError",
]
