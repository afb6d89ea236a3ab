"""Unit tests for configure_logging()."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from core.config.config_service import ConfigService
from core.logging.logic.logging_setup import configure_logging


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.name = "contacts.test_logging_setup"

    def tearDown(self) -> None:
        target = logging.getLogger(self.name)
        for h in list(target.handlers):
            target.removeHandler(h)
            h.close()
        self._tmp.cleanup()

    def _config(self, **env: str) -> ConfigService:
        environ = {"CONTACTS_CONFIG_PATH": str(self.tmp / "none.ini"), **env}
        return ConfigService(defaults_ini=self.tmp / "none-defaults.ini", environ=environ)

    def test_level_and_console_handler(self) -> None:
        target = configure_logging(self._config(CONTACTS_LOGGING__LEVEL="debug"),
                                   logger_name=self.name)
        self.assertEqual(target.level, logging.DEBUG)
        self.assertEqual(len(target.handlers), 1)

    def test_reconfigure_does_not_stack_handlers(self) -> None:
        cfg = self._config()
        configure_logging(cfg, logger_name=self.name)
        target = configure_logging(cfg, logger_name=self.name)
        self.assertEqual(len(target.handlers), 1)

    def test_unknown_level_falls_back_to_info(self) -> None:
        target = configure_logging(self._config(CONTACTS_LOGGING__LEVEL="chatty"),
                                   logger_name=self.name)
        self.assertEqual(target.level, logging.INFO)

    def test_file_handler(self) -> None:
        log_file = self.tmp / "logs" / "contacts.log"
        target = configure_logging(self._config(CONTACTS_LOGGING__FILE=str(log_file)),
                                   logger_name=self.name)
        target.info("hello")
        for h in target.handlers:
            h.flush()
        self.assertIn("hello", log_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
