from contacts.enum.contact_field import ContactField
from contacts.enum.screen import Screen

__all__ = ["ContactField", "Screen"]
