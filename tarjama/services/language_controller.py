"""Language switching state machine: fetch, paint, commit, notify.

A switch runs ``Idle(current) -> Switching(target) -> Idle(target)``. When the
fetch fails and the target is not the fallback locale, it makes exactly one
more transition, ``Switching(target) -> Switching(fallback)``. If that fails
too, nothing is mutated and the page keeps its last committed language.

Overlapping switches are ordered by a request token: a dictionary that
arrives after a newer switch was issued is dropped instead of committed.
"""

import asyncio
import enum
import logging
from collections.abc import Callable, Mapping
from typing import Protocol

from tarjama.config import settings
from tarjama.i18n import DEFAULT_LOCALE, normalize_locale
from tarjama.services.animation import LayoutAnimator, NoopAnimator
from tarjama.services.dictionary_fetcher import FetchError
from tarjama.services.locale_store import LocaleStore
from tarjama.services.string_painter import StringPainter

_log = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], object]


class SwitchOutcome(str, enum.Enum):
    COMMITTED = "committed"
    FELL_BACK = "fell_back"
    UNCHANGED = "unchanged"
    FAILED = "failed"
    SUPERSEDED = "superseded"


class DictionarySource(Protocol):
    async def fetch_dictionary(self, locale: str) -> Mapping[str, str]: ...


class BusyIndicator(Protocol):
    def show(self) -> None: ...

    def hide(self) -> None: ...


class NoopIndicator:
    def show(self) -> None:
        pass

    def hide(self) -> None:
        pass


class SessionLocaleState:
    """The committed locale for one page session plus the request counter."""

    def __init__(self, initial: str):
        self._current = normalize_locale(initial)
        self._token = 0

    @property
    def current_lang(self) -> str:
        return self._current

    def commit(self, locale: str) -> None:
        self._current = locale

    def issue_token(self) -> int:
        self._token += 1
        return self._token

    def is_latest(self, token: int) -> bool:
        return token == self._token


def _call_later(delay: float, fn: Callable[[], None]) -> object:
    return asyncio.get_running_loop().call_later(delay, fn)


class LanguageController:
    def __init__(
        self,
        session: SessionLocaleState,
        store: LocaleStore,
        fetcher: DictionarySource,
        painter: StringPainter,
        animator: LayoutAnimator | None = None,
        spinner: BusyIndicator | None = None,
        *,
        fallback: str = DEFAULT_LOCALE,
        spinner_release_delay: float | None = None,
        schedule: Scheduler | None = None,
    ):
        self.session = session
        self._store = store
        self._fetcher = fetcher
        self._painter = painter
        self._animator = animator or NoopAnimator()
        self._spinner = spinner or NoopIndicator()
        self.fallback = fallback
        self.spinner_release_delay = (
            spinner_release_delay
            if spinner_release_delay is not None
            else settings.spinner_release_delay
        )
        self._schedule = schedule or _call_later

    @property
    def current_lang(self) -> str:
        return self.session.current_lang

    async def set_language(
        self,
        requested: str,
        *,
        with_spinner: bool = False,
        initial_load: bool = False,
    ) -> SwitchOutcome:
        target = normalize_locale(requested)

        if target == self.session.current_lang and not initial_load:
            # still counts as the latest request, so a pending switch away is dropped
            self.session.issue_token()
            if with_spinner:
                self._spinner.hide()
            return SwitchOutcome.UNCHANGED

        token = self.session.issue_token()
        if with_spinner:
            self._spinner.show()
        outcome = SwitchOutcome.FAILED
        try:
            if initial_load:
                self._painter.hide_all()

            outcome = await self._switch(target, token, initial_load)
            if outcome is SwitchOutcome.FAILED and not self.session.is_latest(token):
                outcome = SwitchOutcome.SUPERSEDED
            if outcome is SwitchOutcome.FAILED and target != self.fallback:
                if self.fallback == self.session.current_lang and not initial_load:
                    _log.info("%s unavailable; staying on %s", target, self.fallback)
                    return SwitchOutcome.UNCHANGED
                _log.info("Falling back from %s to %s", target, self.fallback)
                outcome = await self._switch(self.fallback, token, initial_load)
                if outcome is SwitchOutcome.COMMITTED:
                    outcome = SwitchOutcome.FELL_BACK
            if outcome is SwitchOutcome.FAILED:
                _log.warning(
                    "No dictionary could be loaded; keeping %s", self.session.current_lang
                )
            return outcome
        finally:
            if initial_load and outcome not in (
                SwitchOutcome.COMMITTED,
                SwitchOutcome.FELL_BACK,
            ):
                # never leave the first paint hidden
                self._painter.show_all()
            if with_spinner:
                self._schedule(self.spinner_release_delay, self._spinner.hide)

    async def _switch(self, target: str, token: int, initial_load: bool) -> SwitchOutcome:
        try:
            dictionary = await self._fetcher.fetch_dictionary(target)
        except FetchError as e:
            _log.warning("Dictionary fetch failed for %s: %s", target, e)
            return SwitchOutcome.FAILED

        if not self.session.is_latest(token):
            _log.info("Discarding stale dictionary for %s", target)
            return SwitchOutcome.SUPERSEDED

        self._painter.paint(dictionary)
        self._painter.apply_language(target)
        self.session.commit(target)
        self._store.persist(target)
        if initial_load:
            self._painter.show_all()

        self._animator.refresh_layout()
        return SwitchOutcome.COMMITTED
