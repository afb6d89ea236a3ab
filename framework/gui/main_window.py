"""
framework/gui/main_window.py
============================

Root window hosting the contacts feature.
- Window title and geometry come from ConfigService.
- The feature view is instantiated with dependencies resolved from
  AppContext.services by constructor signature.
"""

from __future__ import annotations

import inspect
import logging
import traceback
import tkinter as tk
from tkinter import Frame, Label, X, messagebox
from typing import Optional

from core.common.app_context import AppContext, T
from contacts.gui.main_view import ContactsView

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
#  MainWindow                                                                 #
# --------------------------------------------------------------------------- #
class MainWindow(tk.Tk):
    """Main application window with display area and status bar."""

    # ------------------------------------------------------------------ #
    # Konstruktor                                                        #
    # ------------------------------------------------------------------ #
    def __init__(self) -> None:
        super().__init__()

        cfg = AppContext.config

        # Window properties
        self.title(cfg.general.app_name or "Contacts")
        self.geometry(cfg.window.geometry)

        # State
        self.active_view: Optional[tk.Frame] = None

        # ---------- Frames ---------------------------------------------
        self.display_area = Frame(self)
        self.display_area.pack(fill="both", expand=True)

        self.status_bar = Label(self, text="", anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

        # ---------- Initial view ---------------------------------------
        self.load_view(ContactsView)
        self.set_status(T("contacts.status.ready"))

    # ------------------------------------------------------------------ #
    # View-Handling                                                      #
    # ------------------------------------------------------------------ #
    def clear_display_area(self) -> None:
        for widget in self.display_area.winfo_children():
            widget.destroy()
        self.active_view = None

    def load_view(self, view_cls: type) -> None:
        """Instantiate *view_cls* into the display area with injected services."""
        self.clear_display_area()

        sig = inspect.signature(view_cls.__init__)
        kwargs = {}

        # NOTE: parameters are typically: (self, parent, ...)
        for name, param in list(sig.parameters.items())[2:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            if name in AppContext.services:
                kwargs[name] = AppContext.services[name]
                continue

            if name in ("ctx", "context", "app_context"):
                kwargs[name] = AppContext
                continue

            if hasattr(self, name) and callable(getattr(self, name)):
                kwargs[name] = getattr(self, name)
                continue

            if param.default is inspect.Parameter.empty:
                logger.error("Missing dependency '%s' for %s", name, view_cls.__name__)
                messagebox.showerror(
                    "View error",
                    f"Missing dependency '{name}' for '{view_cls.__name__}'.\n\n"
                    f"Constructor signature: {sig}",
                    parent=self,
                )
                return

        try:
            self.active_view = view_cls(self.display_area, **kwargs)
        except Exception as exc:  # pragma: no cover
            logger.exception("Failed to instantiate %s", view_cls.__name__)
            messagebox.showerror(
                "View error",
                f"Failed to instantiate '{view_cls.__name__}'.\n\n{exc}\n\n{traceback.format_exc()}",
                parent=self,
            )
            return

        self.active_view.pack(fill="both", expand=True)
        logger.debug("%s loaded", view_cls.__name__)

    # ------------------------------------------------------------------ #
    # Sonstige Helfer                                                    #
    # ------------------------------------------------------------------ #
    def set_status(self, message: str) -> None:
        self.status_bar.config(text=message)


# --------------------------------------------------------------------------- #
# Stand-alone-Start                                                           #
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    MainWindow().mainloop()
