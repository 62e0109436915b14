"""Tests for the locale catalogue and bundled dictionaries."""

import json
import re
from pathlib import Path

import pytest

from tarjama.i18n import (
    DEFAULT_LOCALE,
    RTL_LOCALES,
    SUPPORTED_LOCALES,
    _cache,
    _dir,
    get_translations,
    load_all,
    next_locale,
    normalize_locale,
    text_direction,
)


class TestI18nConfig:
    def test_default_locale_is_english(self):
        assert DEFAULT_LOCALE == "en"

    def test_supported_locales(self):
        assert SUPPORTED_LOCALES == ["en", "ar"]

    def test_fallback_is_supported(self):
        assert DEFAULT_LOCALE in SUPPORTED_LOCALES

    def test_rtl_locales_are_supported(self):
        assert RTL_LOCALES <= set(SUPPORTED_LOCALES)


class TestNormalize:
    @pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
    def test_supported_unchanged(self, locale):
        assert normalize_locale(locale) == locale

    @pytest.mark.parametrize("locale", ["fr", "AR", "ar-SA", "", None])
    def test_unsupported_becomes_fallback(self, locale):
        assert normalize_locale(locale) == DEFAULT_LOCALE


class TestDirection:
    def test_arabic_rtl(self):
        assert text_direction("ar") == "rtl"

    def test_english_ltr(self):
        assert text_direction("en") == "ltr"


class TestNextLocale:
    def test_cycles(self):
        assert next_locale("en") == "ar"
        assert next_locale("ar") == "en"

    def test_unsupported_treated_as_fallback(self):
        assert next_locale("fr") == "ar"


class TestLoadAll:
    def test_load_all_populates_cache(self):
        _cache.clear()
        load_all()
        assert set(_cache) == set(SUPPORTED_LOCALES)
        for locale in SUPPORTED_LOCALES:
            assert len(_cache[locale]) > 0

    def test_all_locales_parse(self):
        for locale in SUPPORTED_LOCALES:
            with open(_dir / f"{locale}.json", encoding="utf-8") as f:
                data = json.load(f)
            assert isinstance(data, dict)
            assert all(isinstance(v, str) for v in data.values())


class TestGetTranslations:
    def test_locales_share_keys(self):
        en_keys = set(get_translations("en"))
        for locale in SUPPORTED_LOCALES:
            assert set(get_translations(locale)) == en_keys, locale

    def test_not_merged_across_locales(self):
        en = get_translations("en")
        ar = get_translations("ar")
        differences = sum(1 for k in en if ar[k] != en[k])
        assert differences == len(en)

    def test_unsupported_locale_returns_fallback(self):
        assert get_translations("xx") == get_translations("en")

    def test_returns_copy(self):
        get_translations("en")["app.name"] = "changed"
        assert get_translations("en")["app.name"] != "changed"


# ---------------------------------------------------------------------------
# Code ↔ JSON sync: every key the UI renders must exist in every dictionary,
# and every dictionary key should be rendered somewhere.
# ---------------------------------------------------------------------------

_UI_ROOT = Path(__file__).resolve().parent.parent.parent / "tarjama" / "ui"
_KEY_RE = re.compile(r'(?:_t\["|i18n_text\(\s*")([^"]+)"')


def _collect_keys_from_code() -> set[str]:
    from tarjama.ui.components.layout import NAV_ITEMS
    from tarjama.ui.pages.home import SERVICES

    keys: set[str] = set()
    for py_file in _UI_ROOT.rglob("*.py"):
        keys.update(_KEY_RE.findall(py_file.read_text(encoding="utf-8")))
    keys.update(key for key, _href in NAV_ITEMS)
    for prefix, _icon in SERVICES:
        keys.update({f"{prefix}.title", f"{prefix}.body"})
    return keys


class TestCodeJsonSync:
    def test_all_code_keys_exist_in_every_locale(self):
        code_keys = _collect_keys_from_code()
        for locale in SUPPORTED_LOCALES:
            missing = code_keys - set(get_translations(locale))
            assert not missing, f"Keys used in code but missing from {locale}.json: {sorted(missing)}"

    def test_no_orphan_keys_in_json(self):
        orphans = set(get_translations("en")) - _collect_keys_from_code()
        assert not orphans, f"Keys in en.json but never used in code: {sorted(orphans)}"
