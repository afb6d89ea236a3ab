"""Data Transfer Objects for the contacts module.

DTOs are immutable data containers for transferring state to the views.
"""

from contacts.dto.form_controls_state import FormControlsState

__all__ = ["FormControlsState"]
