"""Application entry point: configure logging, open the main window."""

from __future__ import annotations

import logging

from core.config.config_service import config_service
from core.logging.logic.logging_setup import configure_logging


def main() -> None:
    configure_logging(config_service)
    logging.getLogger(__name__).info(
        "Starting %s %s (language=%s)",
        config_service.general.app_name,
        config_service.general.version,
        config_service.general.language,
    )

    # Import after logging is set up so import-time messages are formatted.
    from framework.gui.main_window import MainWindow

    MainWindow().mainloop()


if __name__ == "__main__":
    main()
