"""
core/logging/logic/logging_setup.py
===================================

Central logging configuration for the application.

Feature modules only ever do ``logger = logging.getLogger(__name__)``; this
module wires handlers and the level from the ``[Logging]`` config section
once at startup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from core.config.config_service import ConfigService, LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# Marks handlers installed here so a second call replaces instead of stacking.
_HANDLER_ATTR = "_contacts_handler"


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    config: Optional[ConfigService] = None,
    *,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """
    Install console (and optional file) handlers on the target logger.

    Args:
        config: ConfigService to read ``[Logging]`` from. Falls back to the
            global singleton.
        logger_name: Logger to configure; root logger when omitted.

    Returns:
        logging.Logger: The configured logger.
    """
    if config is None:
        from core.config.config_service import config_service  # lazy singleton
        config = config_service
    log_cfg: LoggingConfig = config.logging

    target = logging.getLogger(logger_name)
    target.setLevel(_resolve_level(log_cfg.level))

    for handler in list(target.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            target.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    setattr(console, _HANDLER_ATTR, True)
    target.addHandler(console)

    if log_cfg.file:
        path = Path(log_cfg.file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_ATTR, True)
        target.addHandler(file_handler)

    target.debug("Logging configured (level=%s, file=%s)", log_cfg.level, log_cfg.file or "-")
    return target
