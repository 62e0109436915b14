"""Dictionary routes — Starlette routes serving the bundled locale dictionaries."""

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from tarjama.i18n import get_translations, is_supported
from tarjama.services.dictionary_fetcher import NO_CACHE_HEADERS


async def locale_dictionary(request: Request) -> JSONResponse:
    locale = request.path_params["locale"]
    if not is_supported(locale):
        return JSONResponse(
            {"detail": f"Unsupported locale: {locale}"},
            status_code=404,
            headers=NO_CACHE_HEADERS,
        )
    return JSONResponse(get_translations(locale), headers=NO_CACHE_HEADERS)


dictionary_routes = [
    Route("/i18n/{locale}.json", locale_dictionary, methods=["GET"]),
]
