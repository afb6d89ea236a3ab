"""Typed, layered configuration loader with precedence handling."""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Optional, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

def _find_project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "core").is_dir():
            return parent
    return here.parent

PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "core" / "config"
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"

ENV_PREFIX = "CONTACTS_"
ENV_CONFIG_PATH = "CONTACTS_CONFIG_PATH"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "General": {
        "app_name": "Contacts",
        "version": "1.0.0",
        "language": "en",
    },
    "Window": {
        "geometry": "480x640",
    },
    "Logging": {
        "level": "INFO",
        "file": "",
    },
    "Files": {
        "labels_tsv": (PROJECT_ROOT / "core" / "i18n" / "labels.tsv").as_posix(),
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class GeneralConfig:
    app_name: str = "Contacts"
    version: str = "1.0.0"
    language: str = "en"


@dataclass
class WindowConfig:
    geometry: str = "480x640"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = ""


@dataclass
class FilesConfig:
    labels_tsv: Path


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    # dataclass annotations are strings under `from __future__ import annotations`
    if typ in (Path, "Path"):
        return Path(str(value)).expanduser()
    if typ in (bool, "bool"):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ in (int, "int"):
        return int(value)
    if typ in (float, "float"):
        return float(value)
    return str(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        kwargs[field.name] = _cast(val, field.type)
    return cls(**kwargs)


def _env_overlays(environ: Optional[Dict[str, str]] = None) -> Dict[str, Dict[str, Any]]:
    env = os.environ if environ is None else environ
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in env.items():
        if not env_key.startswith(ENV_PREFIX) or env_key == ENV_CONFIG_PATH:
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path(environ: Optional[Dict[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    explicit = env.get(ENV_CONFIG_PATH)
    if explicit:
        return Path(explicit).expanduser()
    if os.name == "nt":
        appdata = env.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "Contacts" / "config.ini"
    return Path(env.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "contacts" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """
    Facade merging layered configuration with type safety.

    Layers (later wins):
        0) embedded defaults
        1) core/config/defaults.ini
        2) environment variables CONTACTS_<SECTION>__<KEY>
        3) user config.ini (CONTACTS_CONFIG_PATH or the platform config dir)

    Nothing is ever written back; the app keeps no state between sessions.
    """

    def __init__(self, *, defaults_ini: Path = DEFAULTS_INI,
                 environ: Optional[Dict[str, str]] = None) -> None:
        self._lock = RLock()
        self._defaults_ini = defaults_ini
        self._environ = environ
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if self._defaults_ini.exists():
                _apply(merged, _read_ini(self._defaults_ini), "defaults.ini",
                       str(self._defaults_ini), sources)

            # Layer 2: environment variables
            _apply(merged, _env_overlays(self._environ), "env", "os.environ", sources)

            # Layer 3: user overrides
            user_ini = _user_config_path(self._environ)
            if user_ini.exists():
                _apply(merged, _read_ini(user_ini), "user", str(user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.general = _build_dataclass(GeneralConfig, merged.get("General", {}))
            self.window = _build_dataclass(WindowConfig, merged.get("Window", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))
            self.files = _build_dataclass(FilesConfig, merged.get("Files", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
