"""Errors raised by the weather client library."""


class WeatherError(Exception):
    """Base class for every failure surfaced by the weather library."""
    pass


class MissingTokenError(WeatherError):
    """Raised when a client is constructed without an API token."""

    def __init__(self, message: str = "missing api token"):
        super().__init__(message)


class LocationNotProvidedError(WeatherError):
    """Raised when the command line carries no location."""

    def __init__(self, message: str = "location not provided"):
        super().__init__(message)


class TransportError(WeatherError):
    """
    Raised when the HTTP request could not be completed.

    The underlying httpx exception is kept in ``cause`` and its message is
    reused verbatim.
    """

    def __init__(self, cause: Exception):
        super().__init__(str(cause) or cause.__class__.__name__)
        self.cause = cause


class HTTPError(WeatherError):
    """Raised when the upstream service answers with a status other than 200."""

    def __init__(self, status_code: int, reason: str = ""):
        status_line = f"{status_code} {reason}".strip()
        super().__init__(status_line)
        self.status_code = status_code
        self.reason = reason


class MalformedResponseError(WeatherError):
    """Raised when the response body is not the JSON document we expect."""
    pass


class MissingWeatherDataError(WeatherError):
    """Raised when the response carries no usable ``weather`` entry."""

    def __init__(self, message: str = "invalid response: missing weather data"):
        super().__init__(message)
