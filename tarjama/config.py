import logging
import warnings
from urllib.parse import urlsplit

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Dictionaries
    i18n_base_url: str = "http://localhost:8000"
    i18n_path: str = "/i18n/{locale}.json"
    fetch_timeout: float = 5.0

    # Preference storage
    preference_key: str = "lang"

    # UI timings (seconds)
    spinner_release_delay: float = 0.5
    resize_debounce: float = 0.2

    # Header
    header_opaque_threshold: int = 24

    # Reveal-on-scroll animations
    aos_duration: int = 800
    aos_once: bool = True
    aos_mirror: bool = False
    aos_offset: int = 80
    aos_easing: str = "ease-out"
    aos_disable: str = "mobile"

    # App
    app_name: str = "Tarjama"
    debug: bool = False


settings = Settings()

_log = logging.getLogger(__name__)
_LOOPBACK_HOSTS = ("localhost", "127.0.0.1", "::1")


def check_dictionary_origin(s: Settings) -> None:
    """Warn when dictionaries would be fetched over plain HTTP from a remote host."""
    origin = urlsplit(s.i18n_base_url)
    if origin.scheme != "http" or origin.hostname in _LOOPBACK_HOSTS:
        return
    msg = (
        "I18N_BASE_URL uses plain HTTP. "
        "Set I18N_BASE_URL to an https:// origin in your .env file for production."
    )
    _log.warning(msg)
    if not s.debug:
        warnings.warn(msg, stacklevel=2)


check_dictionary_origin(settings)
