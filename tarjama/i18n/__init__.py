"""Locale catalogue: supported tags, fallback, text direction and bundled dictionaries."""

import json
from pathlib import Path

SUPPORTED_LOCALES = ["en", "ar"]
DEFAULT_LOCALE = "en"
RTL_LOCALES = frozenset({"ar"})

_cache: dict[str, dict[str, str]] = {}
_dir = Path(__file__).parent


def is_supported(locale: str | None) -> bool:
    return locale in SUPPORTED_LOCALES


def normalize_locale(locale: str | None) -> str:
    """Return ``locale`` when supported, otherwise the fallback locale."""
    return locale if is_supported(locale) else DEFAULT_LOCALE


def text_direction(locale: str) -> str:
    return "rtl" if locale in RTL_LOCALES else "ltr"


def next_locale(locale: str) -> str:
    """Locale selected by the language toggle when ``locale`` is active."""
    current = normalize_locale(locale)
    index = SUPPORTED_LOCALES.index(current)
    return SUPPORTED_LOCALES[(index + 1) % len(SUPPORTED_LOCALES)]


def load_all() -> None:
    """Load every bundled JSON dictionary into the module cache."""
    for locale in SUPPORTED_LOCALES:
        path = _dir / f"{locale}.json"
        with open(path, encoding="utf-8") as f:
            _cache[locale] = json.load(f)


def get_translations(locale: str) -> dict[str, str]:
    """Return a copy of the bundled dictionary for one locale.

    Dictionaries are never merged across locales; unsupported locales get
    the fallback dictionary.
    """
    if not _cache:
        load_all()
    return dict(_cache.get(normalize_locale(locale), {}))
