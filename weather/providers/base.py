"""Base interface for current-weather providers."""

from abc import ABC, abstractmethod

from weather.conditions import Conditions


class WeatherClient(ABC):
    """
    Anything that can report the current conditions of a location.

    The CLI depends on this interface only, so an in-process stub can stand
    in for the HTTP-backed client.
    """

    @abstractmethod
    def current(self, location: str) -> Conditions:
        """
        Fetch the present weather conditions of a location.

        Args:
            location: Free-form place name, optionally ``City,CC``.

        Returns:
            The current conditions.

        Raises:
            WeatherError: If the conditions could not be fetched.
        """
        pass
