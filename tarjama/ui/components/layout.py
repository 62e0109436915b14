"""Site header, slide-out sidebar and page wrapper layout."""

import reflex as rx

from tarjama.ui.components.language_switcher import language_switcher
from tarjama.ui.state.i18n_state import I18nState
from tarjama.ui.state.sidebar_state import SidebarState

_t = I18nState.translations

NAV_ITEMS = [
    ("nav.home", "#home"),
    ("nav.services", "#services"),
    ("nav.about", "#about"),
    ("nav.contact", "#contact"),
]


def i18n_text(key: str, component=rx.text, **props) -> rx.Component:
    """A translatable node: text owned by I18nState, hidden until the first paint."""
    return component(
        _t[key],
        custom_attrs={"data-i18n": key},
        visibility=rx.cond(I18nState.content_hidden, "hidden", "visible"),
        **props,
    )


def nav_link(key: str, href: str, on_click=None) -> rx.Component:
    return rx.link(
        i18n_text(key, rx.text, size="3"),
        href=href,
        underline="none",
        on_click=on_click,
    )


def site_header() -> rx.Component:
    return rx.box(
        rx.hstack(
            i18n_text("app.name", rx.heading, size="5"),
            rx.spacer(),
            rx.hstack(
                *[nav_link(key, href) for key, href in NAV_ITEMS],
                spacing="5",
                display=["none", "none", "flex"],
            ),
            language_switcher(),
            rx.icon_button(
                rx.icon("menu", size=18),
                id="openSidebar",
                on_click=SidebarState.toggle_sidebar,
                aria_label=_t["nav.menu"],
                variant="ghost",
            ),
            align="center",
            spacing="4",
            padding_x="24px",
            padding_y="12px",
        ),
        id="siteHeader",
        class_name="backdrop-blur bg-white/70",
        position="sticky",
        top="0",
        z_index="10",
        width="100%",
    )


def sidebar() -> rx.Component:
    return rx.box(
        rx.vstack(
            rx.hstack(
                i18n_text("nav.menu", rx.heading, size="4"),
                rx.spacer(),
                rx.icon_button(
                    rx.icon("x", size=16),
                    id="closeSidebar",
                    on_click=SidebarState.close_sidebar,
                    aria_label=_t["nav.close"],
                    variant="ghost",
                    size="1",
                ),
                width="100%",
                align="center",
            ),
            rx.separator(),
            *[nav_link(key, href, on_click=SidebarState.close_sidebar) for key, href in NAV_ITEMS],
            spacing="3",
            padding="16px",
        ),
        id="sidebar",
        custom_attrs={"data-open": rx.cond(SidebarState.sidebar_open, "true", "false")},
        display=rx.cond(SidebarState.sidebar_open, "block", "none"),
        width="280px",
        height="100vh",
        bg="var(--gray-2)",
        position="fixed",
        top="0",
        inset_inline_end="0",
        z_index="20",
    )


def page_layout(*children) -> rx.Component:
    return rx.box(
        site_header(),
        sidebar(),
        rx.vstack(
            *children,
            spacing="9",
            width="100%",
            padding="24px",
        ),
        rx.center(
            i18n_text("footer.rights", rx.text, size="1", color="gray"),
            padding="24px",
        ),
        custom_attrs={"lang": I18nState.locale, "dir": I18nState.direction},
    )
