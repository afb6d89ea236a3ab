"""
core/tests/test_config_service.py

Layer precedence of ConfigService, using an injected environment so the
developer's real config files never leak into the test.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.missing_defaults = self.tmp / "no-defaults.ini"
        self.user_ini = self.tmp / "user.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _service(self, **env: str) -> ConfigService:
        environ = {"CONTACTS_CONFIG_PATH": str(self.user_ini), **env}
        return ConfigService(defaults_ini=self.missing_defaults, environ=environ)

    def test_embedded_defaults(self) -> None:
        svc = self._service()
        self.assertEqual(svc.general.app_name, "Contacts")
        self.assertEqual(svc.general.language, "en")
        self.assertEqual(svc.logging.level, "INFO")
        self.assertIsInstance(svc.files.labels_tsv, Path)
        self.assertEqual(svc.meta_source("General", "language")["layer"], "code")

    def test_env_overrides_defaults(self) -> None:
        svc = self._service(CONTACTS_GENERAL__LANGUAGE="ru", CONTACTS_IGNORED="x")
        self.assertEqual(svc.general.language, "ru")
        self.assertEqual(svc.meta_source("General", "language")["layer"], "env")

    def test_user_file_overrides_env(self) -> None:
        self.user_ini.write_text("[Window]\ngeometry = 800x600\n[General]\nlanguage = en\n",
                                 encoding="utf-8")
        svc = self._service(CONTACTS_GENERAL__LANGUAGE="ru")
        self.assertEqual(svc.window.geometry, "800x600")
        self.assertEqual(svc.general.language, "en")
        self.assertEqual(svc.meta_source("Window", "geometry")["source"], str(self.user_ini))

    def test_defaults_ini_layer(self) -> None:
        defaults = self.tmp / "defaults.ini"
        defaults.write_text("[Logging]\nlevel = DEBUG\n", encoding="utf-8")
        svc = ConfigService(defaults_ini=defaults,
                            environ={"CONTACTS_CONFIG_PATH": str(self.user_ini)})
        self.assertEqual(svc.logging.level, "DEBUG")

    def test_get_with_cast(self) -> None:
        svc = self._service(CONTACTS_WINDOW__SCALE="2")
        self.assertEqual(svc.get("Window", "scale", cast=int), 2)
        self.assertIsNone(svc.get("Window", "missing"))


if __name__ == "__main__":
    unittest.main()
