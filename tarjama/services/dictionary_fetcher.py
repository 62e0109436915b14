"""Remote locale dictionary retrieval."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

import httpx

from tarjama.config import settings
from tarjama.i18n import normalize_locale

_log = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class FetchError(RuntimeError):
    """Raised when a dictionary cannot be retrieved or is malformed."""

    def __init__(self, locale: str, reason: str, status_code: int | None = None):
        super().__init__(f"Failed to load i18n {locale}: {reason}")
        self.locale = locale
        self.reason = reason
        self.status_code = status_code


class DictionaryFetcher:
    def __init__(
        self,
        base_url: str = "",
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        path: str = "",
    ):
        self.base_url = (base_url or settings.i18n_base_url).rstrip("/")
        self.path = path or settings.i18n_path
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self._client = client

    def dictionary_url(self, locale: str) -> str:
        return f"{self.base_url}{self.path.format(locale=normalize_locale(locale))}"

    async def fetch_dictionary(self, locale: str) -> Mapping[str, str]:
        safe = normalize_locale(locale)
        url = self.dictionary_url(safe)
        try:
            if self._client is not None:
                resp = await self._client.get(url, headers=NO_CACHE_HEADERS)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, headers=NO_CACHE_HEADERS)
        except httpx.HTTPError as e:
            raise FetchError(safe, f"transport error: {e}") from e

        if not resp.is_success:
            raise FetchError(safe, f"HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError(safe, "response is not JSON", status_code=resp.status_code) from e

        dictionary = _validate(safe, data)
        _log.debug("Loaded %d strings for %s", len(dictionary), safe)
        return dictionary


def _validate(locale: str, data: object) -> Mapping[str, str]:
    """Accept a flat object of string values; ``null`` values count as absent keys."""
    if not isinstance(data, dict):
        raise FetchError(locale, f"expected a JSON object, got {type(data).__name__}")
    strings: dict[str, str] = {}
    for key, value in data.items():
        if value is None:
            continue
        if not isinstance(value, str):
            raise FetchError(locale, f"value for {key!r} is not a string")
        strings[key] = value
    return MappingProxyType(strings)
