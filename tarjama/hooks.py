"""Window and document event bus for the page model.

Events used by the site shell: ``window.scroll`` (``scroll_y``),
``window.resize``, ``window.load`` and ``document.click`` (``target``).
"""

import inspect
from collections.abc import Callable

_handlers: dict[str, list[Callable]] = {}


def on(event: str, handler: Callable) -> None:
    """Register a handler for an event."""
    _handlers.setdefault(event, []).append(handler)


def off(event: str, handler: Callable) -> None:
    """Remove a handler for an event."""
    handlers = _handlers.get(event, [])
    if handler in handlers:
        handlers.remove(handler)


def emit(event: str, **kwargs) -> None:
    """Dispatch an event to synchronous handlers.

    Coroutine handlers are only awaited by :func:`emit_async`.
    """
    for handler in list(_handlers.get(event, [])):
        result = handler(**kwargs)
        if inspect.iscoroutine(result):
            result.close()
            raise TypeError(f"Handler for {event!r} is async; use emit_async()")


async def emit_async(event: str, **kwargs) -> None:
    """Dispatch an event, awaiting handlers that return awaitables, in order."""
    for handler in list(_handlers.get(event, [])):
        result = handler(**kwargs)
        if inspect.isawaitable(result):
            await result


def handler_count(event: str) -> int:
    return len(_handlers.get(event, []))


def clear() -> None:
    """Remove all handlers. Useful for testing."""
    _handlers.clear()
