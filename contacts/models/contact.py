"""
Contact domain model.

Keeps the data layer independent from UI and validation details: the record
itself accepts any text, the add form decides what is submittable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    Immutable contact record.

    Equality is structural (name, phone and email), so two entries with the
    same three values are indistinguishable.
    """

    name: str
    phone: str
    email: str

    @property
    def display_lines(self) -> tuple[str, str, str]:
        return self.name, self.phone, self.email
