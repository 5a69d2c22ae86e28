from core.desktop.devtools.interface import i18n
from core.desktop.devtools.interface.constants import LANG_PACK


def test_english_under_tests(monkeypatch):
    monkeypatch.delenv("TODO_TUI_LANG", raising=False)
    assert i18n.effective_lang("ru") == "en"
    assert i18n.translate("ITEMS_LEFT", count=3) == "3 items left"


def test_env_selects_language(monkeypatch):
    monkeypatch.setenv("TODO_TUI_LANG", "ru")
    assert i18n.translate("FILTER_ALL") == "Все"


def test_unknown_env_language_falls_back(monkeypatch):
    monkeypatch.setenv("TODO_TUI_LANG", "xx")
    assert i18n.effective_lang() == "en"


def test_missing_translations_backfilled_from_english(monkeypatch):
    monkeypatch.setenv("TODO_TUI_LANG", "ru")
    assert set(LANG_PACK["en"]) <= set(LANG_PACK["ru"])
    assert i18n.translate("KEYS_HINT") == LANG_PACK["en"]["KEYS_HINT"]


def test_unknown_key_and_bad_format_args(monkeypatch):
    monkeypatch.delenv("TODO_TUI_LANG", raising=False)
    assert i18n.translate("NO_SUCH_KEY") == "NO_SUCH_KEY"
    assert i18n.translate("ITEMS_LEFT") == "{count} items left"


def test_supported_langs_lists_pack():
    assert i18n.supported_langs() == ("en", "ru")
