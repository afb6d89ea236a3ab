# core/common/app_context.py
"""
Global runtime context & service registry for the Contacts app.

IMPORTANT ARCHITECTURE RULE:
- ConfigService is the SINGLE source of truth for paths and settings.
- This file must not implement its own root strategy.
- No GUI state lives here; the contact store is session-scoped and owned here
  so every view sees the same list.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.config.config_service import PROJECT_ROOT, config_service
from core.i18n.translation_manager import translations
from contacts.logic.contact_store import ContactStore

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------ #
#  Load translation files once                                        #
# ------------------------------------------------------------------ #
root: Path = PROJECT_ROOT.resolve()

# Central dictionary from ConfigService (preferred), then feature dictionaries
central_file = Path(config_service.files.labels_tsv).resolve()
module_candidates = sorted(root.glob("*/labels.tsv"))

seen: set[Path] = set()
label_files: list[Path] = []


def _add(p: Path | None) -> None:
    """
    Add file path to the label list only if it exists and hasn't been added yet.
    """
    if not p:
        return
    rp = p.resolve()
    if rp.exists() and rp not in seen:
        seen.add(rp)
        label_files.append(rp)


_add(central_file)
for p in module_candidates:
    _add(p)

if label_files:
    translations.load_files(label_files)
else:
    logger.warning("No labels.tsv found (looked for %s)", central_file)
    translations.translations = {"en": {}}


# ------------------------------------------------------------------ #
#  Central AppContext                                                 #
# ------------------------------------------------------------------ #
class AppContext:
    """Central runtime context (no GUI state)."""

    config = config_service
    contact_store = ContactStore()
    language: str = config_service.general.language

    # ---------- Service registry for DI -------------------------------
    services: dict[str, object] = {
        "config": config,
        "contact_store": contact_store,
    }

    @classmethod
    def register_service(cls, name: str, instance: object) -> None:
        cls.services[name] = instance

    @classmethod
    def set_language(cls, lang: str) -> None:
        """Switch UI language; unknown codes keep the current one."""
        if lang in translations.available_languages():
            cls.language = lang
        else:
            logger.warning("Unsupported language '%s', keeping '%s'", lang, cls.language)


# ------------------------------------------------------------------ #
#  Translation shortcut                                              #
# ------------------------------------------------------------------ #
def T(label: str) -> str:
    return translations.t(label, AppContext.language)


AppContext.T = staticmethod(T)           # type: ignore[attr-defined]
