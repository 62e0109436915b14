"""i18n state — locale, painted strings, first-paint visibility and the toggle spinner."""

import asyncio
import json
from collections.abc import Callable

import reflex as rx

from tarjama.i18n import DEFAULT_LOCALE, get_translations, next_locale, text_direction
from tarjama.services.animation import AnimationConfig, ScriptAnimator
from tarjama.services.dictionary_fetcher import DictionaryFetcher
from tarjama.services.language_controller import LanguageController, SessionLocaleState
from tarjama.services.locale_store import LocaleStore
from tarjama.services.string_painter import StringPainter


def document_root_script(lang: str, direction: str) -> str:
    return (
        f"document.documentElement.lang = {json.dumps(lang)}; "
        f"document.documentElement.dir = {json.dumps(direction)};"
    )


class _StateStorage:
    """Preference storage backed by the browser's localStorage var."""

    def __init__(self, state):
        self._state = state

    def get(self, key: str) -> str | None:
        return self._state.lang_pref or None

    def set(self, key: str, value: str) -> None:
        self._state.lang_pref = value


class _StateNode:
    def __init__(self, state, key: str):
        self._state = state
        self.translation_key = key

    @property
    def text(self) -> str:
        return self._state.translations.get(self.translation_key, "")

    @text.setter
    def text(self, value: str) -> None:
        translations = dict(self._state.translations)
        translations[self.translation_key] = value
        self._state.translations = translations

    @property
    def visible(self) -> bool:
        return not self._state.content_hidden

    @visible.setter
    def visible(self, value: bool) -> None:
        self._state.content_hidden = not value


class _StateSurface:
    """Paint surface over the state vars; language changes are also queued for ``<html>``."""

    def __init__(self, state):
        self._state = state
        self.scripts: list[str] = []

    def translatable_nodes(self) -> list[_StateNode]:
        return [_StateNode(self._state, key) for key in list(self._state.translations)]

    def set_language_metadata(self, lang: str, direction: str) -> None:
        self._state.locale = lang
        self._state.direction = direction
        self.scripts.append(document_root_script(lang, direction))


class _StateSpinner:
    def __init__(self, state):
        self._state = state

    def show(self) -> None:
        self._state.spinner_active = True

    def hide(self) -> None:
        self._state.spinner_active = False


class _DeferredCalls:
    """Collects delayed callbacks instead of running them on the loop."""

    def __init__(self):
        self.calls: list[tuple[float, Callable[[], None]]] = []

    def __call__(self, delay: float, fn: Callable[[], None]) -> None:
        self.calls.append((delay, fn))


def _locale_store(state) -> LocaleStore:
    return LocaleStore(_StateStorage(state), state.router.headers.accept_language or "")


def _build_controller(
    state,
    surface: _StateSurface,
    animator: ScriptAnimator,
    deferred: _DeferredCalls,
) -> LanguageController:
    return LanguageController(
        SessionLocaleState(state.locale),
        _locale_store(state),
        DictionaryFetcher(),
        StringPainter(surface),
        animator,
        _StateSpinner(state),
        schedule=deferred,
    )


class I18nState(rx.State):
    lang_pref: str = rx.LocalStorage("", name="lang")
    locale: str = DEFAULT_LOCALE
    direction: str = "ltr"
    translations: dict[str, str] = get_translations(DEFAULT_LOCALE)
    content_hidden: bool = True
    spinner_active: bool = False
    animations_ready: bool = False

    # Bumped on every toggle so a late release cannot hide a newer spinner
    _spinner_token: int = 0

    @rx.var
    def lang_short(self) -> str:
        return next_locale(self.locale).upper()

    async def load_language(self):
        initial = _locale_store(self).resolve_initial_locale()
        self.locale = initial
        self.direction = text_direction(initial)

        surface = _StateSurface(self)
        animator = ScriptAnimator(initialized=self.animations_ready)
        controller = _build_controller(self, surface, animator, _DeferredCalls())
        await controller.set_language(initial, initial_load=True)

        animator.init(AnimationConfig.from_settings())
        self.animations_ready = True
        for script in surface.scripts + animator.drain():
            yield rx.call_script(script)

    async def toggle_language(self):
        self._spinner_token += 1
        token = self._spinner_token
        self.spinner_active = True
        # push the spinner before the dictionary request starts
        yield

        surface = _StateSurface(self)
        animator = ScriptAnimator(initialized=self.animations_ready)
        deferred = _DeferredCalls()
        controller = _build_controller(self, surface, animator, deferred)
        await controller.set_language(next_locale(self.locale), with_spinner=True)

        animator.refresh_layout()
        for script in surface.scripts + animator.drain():
            yield rx.call_script(script)
        # the controller only defers the spinner release
        for delay, _release in deferred.calls:
            yield I18nState.release_spinner(token, delay)

    @rx.event(background=True)
    async def release_spinner(self, token: int, delay: float):
        await asyncio.sleep(delay)
        async with self:
            if token == self._spinner_token:
                self.spinner_active = False
