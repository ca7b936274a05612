"""
weather - current weather conditions from OpenWeatherMap.
"""

from loguru import logger

from weather.conditions import Conditions, kelvin_to_celsius, parse_json
from weather.errors import (
    HTTPError,
    LocationNotProvidedError,
    MalformedResponseError,
    MissingTokenError,
    MissingWeatherDataError,
    TransportError,
    WeatherError,
)
from weather.providers import DEFAULT_BASE_URL, OpenWeatherClient, WeatherClient, format_url

__version__ = "0.1.0"

# Library code stays quiet unless the application enables it
logger.disable("weather")

__all__ = [
    "Conditions",
    "kelvin_to_celsius",
    "parse_json",
    "WeatherClient",
    "OpenWeatherClient",
    "DEFAULT_BASE_URL",
    "format_url",
    "WeatherError",
    "MissingTokenError",
    "LocationNotProvidedError",
    "TransportError",
    "HTTPError",
    "MalformedResponseError",
    "MissingWeatherDataError",
]
