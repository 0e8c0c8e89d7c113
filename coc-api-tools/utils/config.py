"""Settings loaded from the environment (and a .env file, if present)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .cache import DEFAULT_TTL
from .client import CLASH_API_BASE


@dataclass
class Settings:
    api_key: str
    api_base: str = CLASH_API_BASE
    cache_ttl: float = DEFAULT_TTL
    http_timeout: Optional[float] = None
    log_level: str = "INFO"


def _float_env(name: str, default: Optional[float]) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from None


def load_settings(dotenv: bool = True) -> Settings:
    """
    Read settings from environment variables.

    The API key is not checked here: a missing key only shows up as an
    authorization error from the API.

    Environment:
        CLASH_API_KEY: Bearer token for the Clash of Clans API
        CLASH_API_BASE: API base URL (default: official v1 endpoint)
        CLASH_CACHE_TTL: Seconds to keep responses cached (default: 300)
        CLASH_HTTP_TIMEOUT: HTTP timeout in seconds (default: httpx default)
        LOG_LEVEL: Logging level (default: INFO)
    """
    if dotenv:
        load_dotenv()

    return Settings(
        api_key=os.environ.get("CLASH_API_KEY", ""),
        api_base=os.environ.get("CLASH_API_BASE") or CLASH_API_BASE,
        cache_ttl=_float_env("CLASH_CACHE_TTL", DEFAULT_TTL),
        http_timeout=_float_env("CLASH_HTTP_TIMEOUT", None),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
