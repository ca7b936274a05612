"""Live tests against the OpenWeatherMap API."""

import os

import pytest

from weather.providers.openweather import OpenWeatherClient

pytestmark = pytest.mark.integration


def test_openweather_api_returns_current_conditions():
    """The real service reports a non-empty summary for London."""
    token = os.environ.get("OPENWEATHER_API_TOKEN")
    if not token:
        pytest.skip("Please set a valid API key in the environment variable OPENWEATHER_API_TOKEN")

    with OpenWeatherClient(token) as client:
        conditions = client.current("London")

    assert conditions.summary
