"""Tests for LocaleStore — preference resolution and persistence."""

import pytest

from tarjama.services.locale_store import LocaleStore, MemoryStorage


class TestResolveInitialLocale:
    def test_no_preference_arabic_browser(self):
        store = LocaleStore(MemoryStorage(), "ar-SA")
        assert store.resolve_initial_locale() == "ar"

    def test_environment_signal_is_case_insensitive(self):
        assert LocaleStore(MemoryStorage(), "AR-eg").resolve_initial_locale() == "ar"

    def test_accept_language_header_value(self):
        store = LocaleStore(MemoryStorage(), "ar-EG,ar;q=0.9,en;q=0.8")
        assert store.resolve_initial_locale() == "ar"

    @pytest.mark.parametrize("signal", ["en-US", "fr-FR", "", "  "])
    def test_other_signals_fall_back(self, signal):
        assert LocaleStore(MemoryStorage(), signal).resolve_initial_locale() == "en"

    def test_saved_preference_wins_over_environment(self):
        store = LocaleStore(MemoryStorage({"lang": "en"}), "ar-SA")
        assert store.resolve_initial_locale() == "en"

    def test_saved_arabic_preference(self):
        store = LocaleStore(MemoryStorage({"lang": "ar"}), "en-GB")
        assert store.resolve_initial_locale() == "ar"

    def test_unsupported_saved_preference_resolves_to_fallback(self):
        store = LocaleStore(MemoryStorage({"lang": "fr"}), "ar-SA")
        assert store.resolve_initial_locale() == "en"

    def test_empty_saved_value_counts_as_absent(self):
        store = LocaleStore(MemoryStorage({"lang": ""}), "ar")
        assert store.resolve_initial_locale() == "ar"


class TestPersist:
    def test_persist_writes_preference(self):
        storage = MemoryStorage()
        LocaleStore(storage).persist("ar")
        assert storage.get("lang") == "ar"

    def test_persisted_value_read_back(self):
        storage = MemoryStorage()
        LocaleStore(storage).persist("ar")
        assert LocaleStore(storage, "en-US").resolve_initial_locale() == "ar"

    def test_custom_key(self):
        storage = MemoryStorage()
        LocaleStore(storage, key="site.lang").persist("ar")
        assert storage.get("site.lang") == "ar"
        assert storage.get("lang") is None
