"""Header, sidebar and busy indicator behaviour on the page model."""

import asyncio
from collections.abc import Callable

from tarjama.config import settings
from tarjama.services.animation import LayoutAnimator, NoopAnimator
from tarjama.ui.document import Document, Element

OPAQUE_CLASSES = ("bg-white", "shadow-lg")
TRANSLUCENT_CLASSES = ("backdrop-blur", "bg-white/70")

Defer = Callable[[Callable[[], None]], object]


def next_tick(fn: Callable[[], None]) -> object:
    """Run ``fn`` on the next loop iteration (the page model's animation frame)."""
    return asyncio.get_running_loop().call_soon(fn)


class HeaderScrollObserver:
    def __init__(self, header: Element | None, threshold: int | None = None):
        self.header = header
        self.threshold = threshold if threshold is not None else settings.header_opaque_threshold

    def __call__(self, scroll_y: float = 0, **_event) -> bool:
        opaque = scroll_y > self.threshold
        if self.header is None:
            return opaque
        for name in OPAQUE_CLASSES:
            self.header.toggle_class(name, opaque)
        for name in TRANSLUCENT_CLASSES:
            self.header.toggle_class(name, not opaque)
        return opaque


class SidebarController:
    """Slide-out panel; open state lives in the ``data-open`` attribute."""

    def __init__(
        self,
        document: Document,
        animator: LayoutAnimator | None = None,
        defer: Defer | None = None,
        *,
        sidebar_id: str = "sidebar",
        open_button_id: str = "openSidebar",
        close_button_id: str = "closeSidebar",
    ):
        self.document = document
        self._animator = animator or NoopAnimator()
        self._defer = defer or next_tick
        self.sidebar_id = sidebar_id
        self.open_button_id = open_button_id
        self.close_button_id = close_button_id

    def _sidebar(self) -> Element | None:
        return self.document.get_element_by_id(self.sidebar_id)

    @property
    def is_open(self) -> bool:
        sidebar = self._sidebar()
        return sidebar is not None and sidebar.has_attribute("data-open")

    def open(self) -> None:
        sidebar = self._sidebar()
        if sidebar is None:
            return
        sidebar.set_attribute("data-open", "true")
        self._defer(self._animator.refresh_layout)

    def close(self) -> None:
        sidebar = self._sidebar()
        if sidebar is None:
            return
        sidebar.remove_attribute("data-open")
        self._defer(self._animator.refresh_layout)

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def handle_click(self, target: Element, **_event) -> None:
        if target.closest(self.open_button_id) is not None:
            self.toggle()
        if target.closest(self.close_button_id) is not None:
            self.close()
        sidebar = self._sidebar()
        if sidebar is not None and target.tag == "a" and target.is_inside(sidebar):
            self.close()


class ElementBusyIndicator:
    """Spinner shown by adding the ``active`` class to an element."""

    def __init__(self, document: Document, element_id: str = "langSpinner"):
        self.document = document
        self.element_id = element_id

    def _toggle(self, active: bool) -> None:
        element = self.document.get_element_by_id(self.element_id)
        if element is not None:
            element.toggle_class("active", active)

    def show(self) -> None:
        self._toggle(True)

    def hide(self) -> None:
        self._toggle(False)
