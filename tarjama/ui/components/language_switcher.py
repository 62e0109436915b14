"""Header language toggle with its busy spinner."""

import reflex as rx

from tarjama.ui.state.i18n_state import I18nState


def language_switcher() -> rx.Component:
    return rx.button(
        rx.text(I18nState.lang_short, id="langShort", size="2", weight="bold"),
        rx.cond(
            I18nState.spinner_active,
            rx.spinner(size="1", id="langSpinner", class_name="active"),
            rx.fragment(),
        ),
        id="langToggle",
        on_click=I18nState.toggle_language,
        variant="soft",
        size="2",
    )
