# contacts/gui/i18n.py
# Small translation helper to ensure readable labels when host translations are missing.

from __future__ import annotations

from core.common.app_context import T as _T


def tr(key: str, default: str) -> str:
    """
    Translation getter with fallback:
    - If host returns an empty string -> use default
    - If host returns the key itself (missing label) -> use default
    """
    s = str(_T(key)).strip()
    if not s or s == key:
        return default
    return s
