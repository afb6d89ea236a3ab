"""Domain models for the contacts feature."""

from contacts.models.contact import Contact

__all__ = ["Contact"]
