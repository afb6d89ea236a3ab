"""Controllers for the contacts module.

Coordinate UI actions and business logic.
Stateless towards tkinter: views are reached only through their render methods.
"""

from contacts.controllers.contacts_controller import ContactsController

__all__ = ["ContactsController"]
