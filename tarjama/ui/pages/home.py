"""Landing page — hero, services, about and contact sections."""

import reflex as rx

from tarjama.ui.components.layout import i18n_text, page_layout

SERVICES = [
    ("services.web", "code"),
    ("services.mobile", "smartphone"),
    ("services.design", "pen-tool"),
]


def _reveal(animation: str = "fade-up", delay: int = 0) -> dict[str, str]:
    attrs = {"data-aos": animation}
    if delay:
        attrs["data-aos-delay"] = str(delay)
    return attrs


def hero_section() -> rx.Component:
    return rx.vstack(
        i18n_text("hero.title", rx.heading, size="9"),
        i18n_text("hero.subtitle", rx.text, size="5", color="gray"),
        rx.link(
            rx.button(i18n_text("hero.cta", rx.text), size="3"),
            href="#contact",
        ),
        id="home",
        spacing="5",
        padding_y="64px",
        custom_attrs=_reveal("fade-up"),
    )


def service_card(prefix: str, icon: str, index: int) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.icon(icon, size=28),
            i18n_text(f"{prefix}.title", rx.heading, size="4"),
            i18n_text(f"{prefix}.body", rx.text, size="2", color="gray"),
            spacing="3",
        ),
        width="100%",
        custom_attrs=_reveal("zoom-in", delay=100 * index),
    )


def services_section() -> rx.Component:
    return rx.vstack(
        i18n_text("services.title", rx.heading, size="7"),
        rx.grid(
            *[service_card(prefix, icon, i) for i, (prefix, icon) in enumerate(SERVICES)],
            columns=rx.breakpoints(initial="1", md="3"),
            spacing="4",
            width="100%",
        ),
        id="services",
        spacing="5",
        width="100%",
    )


def about_section() -> rx.Component:
    return rx.vstack(
        i18n_text("about.title", rx.heading, size="7"),
        i18n_text("about.body", rx.text, size="4"),
        id="about",
        spacing="4",
        custom_attrs=_reveal("fade-right"),
    )


def contact_section() -> rx.Component:
    return rx.vstack(
        i18n_text("contact.title", rx.heading, size="7"),
        i18n_text("contact.body", rx.text, size="4"),
        rx.link(
            rx.button(i18n_text("contact.cta", rx.text), size="3", variant="outline"),
            href="mailto:hello@example.com",
        ),
        id="contact",
        spacing="4",
        custom_attrs=_reveal("fade-up"),
    )


def home_page() -> rx.Component:
    return page_layout(
        hero_section(),
        services_section(),
        about_section(),
        contact_section(),
    )
