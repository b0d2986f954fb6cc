"""Interface strings. English is the reference pack; fr and zh borrow any key they lack from it."""

import os
from typing import List, Optional

from config import get_user_lang
from core.interface.constants import LANG_PACK

BASE_LANG = "en"


def _complete_packs() -> None:
    reference = LANG_PACK[BASE_LANG]
    for lang, strings in LANG_PACK.items():
        missing = reference.keys() - strings.keys()
        strings.update({key: reference[key] for key in missing})


_complete_packs()


def available_langs() -> List[str]:
    return sorted(LANG_PACK)


def normalize_lang(code: Optional[str]) -> Optional[str]:
    """``fr_FR.UTF-8``, ``zh-CN`` and ``EN`` map to a pack code; anything else is ``None``."""
    if not code:
        return None
    base = code.strip().lower().split(".", 1)[0].replace("-", "_").split("_", 1)[0]
    return base if base in LANG_PACK else None


def effective_lang(preferred: Optional[str] = None) -> str:
    """``KANBAN_MD_LANG`` first; tests always run in English; then ``preferred`` or the user config."""
    forced = normalize_lang(os.getenv("KANBAN_MD_LANG"))
    if forced:
        return forced
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    return normalize_lang(preferred or get_user_lang()) or BASE_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    template = LANG_PACK[effective_lang(lang)].get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError):
        return template


__all__ = ["BASE_LANG", "available_langs", "effective_lang", "normalize_lang", "translate"]
