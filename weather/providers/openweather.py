"""OpenWeatherMap current-weather client."""

from urllib.parse import quote_plus

import httpx
from loguru import logger

from weather.conditions import Conditions, parse_json
from weather.errors import HTTPError, MissingTokenError, TransportError
from weather.providers.base import WeatherClient

# OpenWeatherMap "current weather data" endpoint
DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

# Seconds before an unanswered request is abandoned
DEFAULT_TIMEOUT = 10.0


def format_url(base_url: str, location: str, token: str) -> str:
    """
    Build the request URL for the current weather of a location.

    The location is escaped as a query-string value (space becomes ``+``,
    comma becomes ``%2C``). The token is appended as-is.

    Args:
        base_url: Endpoint root, e.g. ``DEFAULT_BASE_URL``.
        location: Free-form place name, optionally ``City,CC``.
        token: OpenWeatherMap API key.

    Returns:
        The full request URL.
    """
    return f"{base_url}?q={quote_plus(location)}&appid={token}"


class OpenWeatherClient(WeatherClient):
    """
    API client for fetching current weather conditions from OpenWeatherMap.

    ``base_url`` and ``http_client`` are plain attributes so a test server or
    a mock transport can be swapped in after construction. The token is fixed
    once the client exists.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.Client | None = None,
    ):
        """
        Parameters
        ----------
        token:
            OpenWeatherMap API key; must not be empty.
        base_url:
            Endpoint root; override to point at a test server.
        http_client:
            httpx client used for requests. When omitted the client creates
            and owns its own instance.

        Raises
        ------
        MissingTokenError
            If ``token`` is empty.
        """
        if not token:
            raise MissingTokenError()
        self._token = token
        self.base_url = base_url
        self._owned_http_client = None
        if http_client is None:
            http_client = self._owned_http_client = httpx.Client(timeout=DEFAULT_TIMEOUT)
        self.http_client = http_client

    @property
    def token(self) -> str:
        return self._token

    def format_url(self, location: str) -> str:
        """Return the request URL for the current weather of ``location``."""
        return format_url(self.base_url, location, self._token)

    def current(self, location: str) -> Conditions:
        """
        Fetch the present weather conditions of a location.

        Performs exactly one GET request. The response is streamed and
        always closed before returning, whatever the outcome.

        Args:
            location: Free-form place name, optionally ``City,CC``.

        Returns:
            The current conditions.

        Raises:
            TransportError: If the request could not be completed.
            HTTPError: If the service answers with a status other than 200.
            MalformedResponseError: If the body is not the expected JSON.
            MissingWeatherDataError: If the body has no weather entry.
        """
        url = self.format_url(location)
        logger.debug(f"GET {format_url(self.base_url, location, '***')}")

        try:
            with self.http_client.stream("GET", url) as response:
                logger.debug(f"Response {response.status_code} {response.reason_phrase}")
                if response.status_code != httpx.codes.OK:
                    raise HTTPError(response.status_code, response.reason_phrase)
                body = response.read()
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug(f"Request for {location!r} failed: {e!r}")
            raise TransportError(e) from e

        return parse_json(body)

    def close(self) -> None:
        """Close the httpx client this instance created, if any."""
        if self._owned_http_client is not None:
            self._owned_http_client.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
