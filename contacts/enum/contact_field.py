"""Input fields of the add-contact form."""
from __future__ import annotations

from enum import Enum


class ContactField(str, Enum):

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
