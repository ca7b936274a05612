"""Weather providers."""

from weather.providers.base import WeatherClient
from weather.providers.openweather import DEFAULT_BASE_URL, OpenWeatherClient, format_url

__all__ = ["WeatherClient", "OpenWeatherClient", "DEFAULT_BASE_URL", "format_url"]
