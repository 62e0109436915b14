"""Locale preference resolution and persistence."""

import logging
from typing import Protocol

from tarjama.config import settings
from tarjama.i18n import DEFAULT_LOCALE, is_supported

_log = logging.getLogger(__name__)

# Locales picked up from the browser/device language when nothing is stored
_DETECTED_LOCALES = ("ar",)


class PreferenceStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Process-local key-value storage."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class LocaleStore:
    def __init__(
        self,
        storage: PreferenceStorage,
        environment_language: str = "",
        *,
        key: str = "",
    ):
        self._storage = storage
        self._environment_language = environment_language or ""
        self.key = key or settings.preference_key

    def resolve_initial_locale(self) -> str:
        """Persisted preference first, then the environment language signal, then fallback.

        A stored preference that is not supported resolves straight to the
        fallback; the environment signal only applies when nothing is stored.
        """
        saved = self._storage.get(self.key)
        if saved:
            if is_supported(saved):
                return saved
            _log.debug("Ignoring unsupported stored locale %r", saved)
            return DEFAULT_LOCALE

        signal = self._environment_language.strip().lower()
        for locale in _DETECTED_LOCALES:
            if signal.startswith(locale):
                return locale
        return DEFAULT_LOCALE

    def persist(self, locale: str) -> None:
        self._storage.set(self.key, locale)
