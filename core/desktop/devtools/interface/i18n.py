"""Message lookup for the todo CLI/TUI."""

import os
from typing import Dict, Optional, Tuple

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

BASE_LANG = "en"
LANG_ENV = "TODO_TUI_LANG"


def _backfill(base_lang: str = BASE_LANG) -> None:
    base = LANG_PACK[base_lang]
    for lang, messages in LANG_PACK.items():
        if lang == base_lang:
            continue
        for key, text in base.items():
            messages.setdefault(key, text)


_backfill()


def supported_langs() -> Tuple[str, ...]:
    return tuple(LANG_PACK)


def _known(lang: Optional[str]) -> str:
    return lang if lang in LANG_PACK else BASE_LANG


def effective_lang(preferred: Optional[str] = None) -> str:
    """Pick the UI language.

    Order: TODO_TUI_LANG, then English while pytest runs, then `preferred`,
    then the `lang` key of the user config.
    """
    forced = os.getenv(LANG_ENV)
    if forced:
        return _known(forced)
    if os.getenv("PYTEST_CURRENT_TEST"):
        return BASE_LANG
    return _known(preferred or get_user_lang())


def messages(lang: Optional[str] = None) -> Dict[str, str]:
    return LANG_PACK[effective_lang(lang)]


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Look up `key`; unknown keys come back as-is, bad placeholders leave the template."""
    template = messages(lang).get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["BASE_LANG", "supported_langs", "effective_lang", "messages", "translate"]
