"""Environment-driven settings for the weather CLI."""

import os
from dataclasses import dataclass
from typing import Mapping

from weather.providers.openweather import DEFAULT_BASE_URL

# Environment variable holding the OpenWeatherMap API key
TOKEN_ENV = "OPENWEATHER_API_TOKEN"

# Optional endpoint override, mostly useful against a local test server
BASE_URL_ENV = "OPENWEATHER_BASE_URL"

# Optional loguru level for diagnostics on stderr (e.g. "DEBUG")
LOG_LEVEL_ENV = "WEATHER_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Settings read from the environment at startup."""

    token: str = ""
    base_url: str = DEFAULT_BASE_URL
    log_level: str | None = None


def _get_env(environ: Mapping[str, str], name: str) -> str | None:
    """Read an environment variable, treating blank values as unset."""
    val = environ.get(name)
    if val is None or not val.strip():
        return None
    return val.strip()


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build ``Settings`` from environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.

    Returns:
        The settings. A missing token is left empty so the client can reject it.
    """
    if environ is None:
        environ = os.environ
    return Settings(
        token=_get_env(environ, TOKEN_ENV) or "",
        base_url=_get_env(environ, BASE_URL_ENV) or DEFAULT_BASE_URL,
        log_level=_get_env(environ, LOG_LEVEL_ENV),
    )
