"""contacts/enum/screen.py
=========================

Named destinations of the contacts feature. The host view and the navigator
use these ids instead of hardcoding strings.
"""
from __future__ import annotations

from enum import Enum


class Screen(str, Enum):
    """Navigable screens."""

    VIEW_CONTACTS = "view_contacts"
    ADD_CONTACT = "add_contact"
