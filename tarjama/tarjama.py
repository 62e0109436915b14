import reflex as rx

from tarjama.config import settings
from tarjama.ui.pages.home import home_page
from tarjama.ui.state.i18n_state import I18nState

AOS_VERSION = "2.3.4"

app = rx.App(
    head_components=[
        rx.el.link(rel="icon", href="/favicon.ico", type="image/x-icon"),
        rx.el.link(rel="stylesheet", href=f"https://unpkg.com/aos@{AOS_VERSION}/dist/aos.css"),
        rx.script(src=f"https://unpkg.com/aos@{AOS_VERSION}/dist/aos.js"),
    ],
)

app.add_page(
    home_page,
    route="/",
    title=settings.app_name,
    on_load=I18nState.load_language,
)

# Serve the locale dictionaries from the Starlette backend
from tarjama.services.dictionary_routes import dictionary_routes  # noqa: E402

for _route in dictionary_routes:
    app._api.routes.append(_route)
