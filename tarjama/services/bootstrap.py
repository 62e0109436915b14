"""Page startup: wires the site shell to the page model in a fixed order.

The order matters. Language metadata is applied before anything is fetched
so the page never shows the wrong direction; the first paint finishes
before the animation engine is initialized so it measures translated
content; load and resize refreshes are registered last.
"""

import logging

import httpx

from tarjama import hooks
from tarjama.config import settings
from tarjama.i18n import next_locale
from tarjama.services.animation import AnimationConfig, Debouncer, LayoutAnimator, NoopAnimator
from tarjama.services.dictionary_fetcher import DictionaryFetcher
from tarjama.services.language_controller import (
    LanguageController,
    Scheduler,
    SessionLocaleState,
    SwitchOutcome,
)
from tarjama.services.locale_store import LocaleStore, PreferenceStorage
from tarjama.services.site_chrome import (
    Defer,
    ElementBusyIndicator,
    HeaderScrollObserver,
    SidebarController,
    next_tick,
)
from tarjama.services.string_painter import StringPainter
from tarjama.ui.document import Document, Element, fix_attribute_alias

_log = logging.getLogger(__name__)


class SiteBootstrapper:
    def __init__(
        self,
        document: Document,
        store: LocaleStore,
        fetcher: DictionaryFetcher,
        animator: LayoutAnimator | None = None,
        *,
        animation_config: AnimationConfig | None = None,
        schedule: Scheduler | None = None,
        defer: Defer | None = None,
    ):
        self.document = document
        self.store = store
        self.animator = animator or NoopAnimator()
        self.animation_config = animation_config or AnimationConfig.from_settings()
        self._defer = defer or next_tick
        self.painter = StringPainter(document)
        self.header_observer = HeaderScrollObserver(document.get_element_by_id("siteHeader"))
        self.sidebar = SidebarController(document, self.animator, self._defer)
        self.resize_refresh = Debouncer(self.animator.refresh_layout, settings.resize_debounce)
        self._fetcher = fetcher
        self._schedule = schedule
        self.controller: LanguageController | None = None

    async def start(self) -> SwitchOutcome:
        fixed = fix_attribute_alias(self.document)
        if fixed:
            _log.info("Rewrote %d data-aso attributes to data-aos", fixed)

        hooks.on("window.scroll", self.header_observer)
        self.header_observer(scroll_y=0)
        hooks.on("document.click", self.sidebar.handle_click)

        initial = self.store.resolve_initial_locale()
        self.painter.apply_language(initial)
        self.controller = LanguageController(
            SessionLocaleState(initial),
            self.store,
            self._fetcher,
            self.painter,
            self.animator,
            ElementBusyIndicator(self.document),
            schedule=self._schedule,
        )
        outcome = await self.controller.set_language(initial, initial_load=True)

        self.animator.init(self.animation_config)

        hooks.on("window.load", self._refresh_on_load)
        hooks.on("window.resize", self.resize_refresh)
        hooks.on("document.click", self.handle_language_toggle)
        _log.debug("Site started in %s (%s)", self.controller.current_lang, outcome.value)
        return outcome

    def _refresh_on_load(self, **_event) -> None:
        self.animator.refresh_layout()

    async def handle_language_toggle(self, target: Element, **_event) -> None:
        if target.closest("langToggle") is None or self.controller is None:
            return
        upcoming = next_locale(self.controller.current_lang)
        label = self.document.get_element_by_id("langShort")
        if label is not None:
            label.text = next_locale(upcoming).upper()
        await self.controller.set_language(upcoming, with_spinner=True)
        self._defer(self.animator.refresh_layout)


async def start_site(
    document: Document,
    storage: PreferenceStorage,
    environment_language: str = "",
    animator: LayoutAnimator | None = None,
    client: httpx.AsyncClient | None = None,
) -> SiteBootstrapper:
    """Build the site shell for ``document`` and run its startup sequence."""
    bootstrapper = SiteBootstrapper(
        document,
        LocaleStore(storage, environment_language),
        DictionaryFetcher(client=client),
        animator,
    )
    await bootstrapper.start()
    return bootstrapper
