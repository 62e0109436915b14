"""Layout recompute collaborator: the reveal-on-scroll engine seen from the core."""

import asyncio
import json
import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Protocol

from tarjama.config import Settings, settings

_log = logging.getLogger(__name__)

AOS_REFRESH_SCRIPT = "window.AOS?.refreshHard?.()"


@dataclass(frozen=True)
class AnimationConfig:
    duration: int = 800
    once: bool = True
    mirror: bool = False
    offset: int = 80
    easing: str = "ease-out"
    disable: str = "mobile"

    @classmethod
    def from_settings(cls, s: Settings = settings) -> "AnimationConfig":
        return cls(
            duration=s.aos_duration,
            once=s.aos_once,
            mirror=s.aos_mirror,
            offset=s.aos_offset,
            easing=s.aos_easing,
            disable=s.aos_disable,
        )

    def to_options(self) -> dict:
        return asdict(self)


class LayoutAnimator(Protocol):
    def init(self, config: AnimationConfig) -> None: ...

    def refresh_layout(self) -> None: ...


class NoopAnimator:
    """Stands in when no animation engine is present."""

    def init(self, config: AnimationConfig) -> None:
        pass

    def refresh_layout(self) -> None:
        pass


class ScriptAnimator:
    """Queues AOS JavaScript statements for a browser host to run.

    ``refresh_layout`` before ``init`` is a no-op, and only the first ``init``
    is honoured.
    """

    def __init__(self, initialized: bool = False):
        self.initialized = initialized
        self._pending: list[str] = []

    def init(self, config: AnimationConfig) -> None:
        if self.initialized:
            _log.debug("Animation engine already initialized; ignoring init")
            return
        self.initialized = True
        self._pending.append(f"window.AOS?.init({json.dumps(config.to_options())})")

    def refresh_layout(self) -> None:
        if self.initialized:
            self._pending.append(AOS_REFRESH_SCRIPT)

    def drain(self) -> list[str]:
        scripts, self._pending = self._pending, []
        return scripts


class Debouncer:
    """Trailing-edge debounce on the running event loop."""

    def __init__(self, fn: Callable[[], None], delay: float):
        self._fn = fn
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None

    def __call__(self, **_event) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._fn()
