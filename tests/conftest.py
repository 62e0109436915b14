from types import MappingProxyType

import pytest

from tarjama import hooks
from tarjama.services.dictionary_fetcher import FetchError
from tarjama.ui.document import Document

PAGE_HTML = """
<!doctype html>
<html>
<body>
  <header id="siteHeader" class="backdrop-blur bg-white/70">
    <h1 data-i18n="app.name">Tarjama Studio</h1>
    <button id="langToggle"><span id="langShort">AR</span><span id="langSpinner"></span></button>
    <button id="openSidebar"><span class="icon">menu</span></button>
  </header>
  <aside id="sidebar">
    <button id="closeSidebar">x</button>
    <a href="#about" data-i18n="nav.about">About</a>
  </aside>
  <section id="hero" data-aso="fade-up">
    <h2 data-i18n="hero.title">Websites that speak</h2>
    <p data-i18n="hero.subtitle">Bilingual sites</p>
    <p data-i18n="legacy.note">Authored text</p>
  </section>
  <div id="card" data-aso="zoom-in" data-aos-delay="100"></div>
</body>
</html>
"""

EN = {
    "app.name": "Tarjama Studio",
    "nav.about": "About us",
    "hero.title": "Websites that speak your customers' language",
    "hero.subtitle": "Bilingual sites, natively.",
}

AR = {
    "app.name": "استوديو ترجمة",
    "nav.about": "من نحن",
    "hero.title": "مواقع تتحدث لغة عملائك",
    "hero.subtitle": "مواقع ثنائية اللغة.",
}


class FakeFetcher:
    """Dictionary source that records requests and fails for chosen locales."""

    def __init__(self, dictionaries=None, failing=()):
        self.dictionaries = dictionaries if dictionaries is not None else {"en": EN, "ar": AR}
        self.failing = set(failing)
        self.calls: list[str] = []
        self.on_fetch = None

    async def fetch_dictionary(self, locale):
        self.calls.append(locale)
        if self.on_fetch is not None:
            self.on_fetch(locale)
        if locale in self.failing:
            raise FetchError(locale, "HTTP 500", status_code=500)
        return MappingProxyType(dict(self.dictionaries[locale]))


class RecordingAnimator:
    def __init__(self):
        self.events: list[tuple] = []

    def init(self, config):
        self.events.append(("init", config))

    def refresh_layout(self):
        self.events.append(("refresh",))

    @property
    def refresh_count(self) -> int:
        return sum(1 for event in self.events if event[0] == "refresh")


@pytest.fixture(autouse=True)
def _clean_hooks():
    hooks.clear()
    yield
    hooks.clear()


@pytest.fixture
def page():
    return Document.from_html(PAGE_HTML)


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def animator():
    return RecordingAnimator()


@pytest.fixture
def scheduled():
    """Scheduler stand-in collecting ``(delay, callback)`` pairs."""
    calls = []

    def schedule(delay, fn):
        calls.append((delay, fn))

    schedule.calls = calls
    return schedule
