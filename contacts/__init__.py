"""
Contacts feature package.

The logic layer (models, logic, controllers) imports no tkinter; GUI modules
live in contacts.gui and are only pulled in by the main window.
"""
