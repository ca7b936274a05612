"""Tests for environment settings."""

from weather.config import Settings, load_settings
from weather.providers.openweather import DEFAULT_BASE_URL


def test_load_settings_defaults():
    """An empty environment yields an empty token and the public endpoint."""
    settings = load_settings({})
    assert settings == Settings(token="", base_url=DEFAULT_BASE_URL, log_level=None)


def test_load_settings_reads_environment():
    """All supported variables are picked up."""
    settings = load_settings({
        "OPENWEATHER_API_TOKEN": "secret",
        "OPENWEATHER_BASE_URL": "http://localhost:8080/weather",
        "WEATHER_LOG_LEVEL": "debug",
    })
    assert settings.token == "secret"
    assert settings.base_url == "http://localhost:8080/weather"
    assert settings.log_level == "debug"


def test_load_settings_blank_values_are_unset():
    """Whitespace-only values count as missing."""
    settings = load_settings({"OPENWEATHER_API_TOKEN": "  ", "OPENWEATHER_BASE_URL": ""})
    assert settings.token == ""
    assert settings.base_url == DEFAULT_BASE_URL


def test_load_settings_uses_process_environment(monkeypatch):
    """Without an explicit mapping the process environment is read."""
    monkeypatch.setenv("OPENWEATHER_API_TOKEN", "from-env")
    assert load_settings().token == "from-env"
