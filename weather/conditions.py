"""Current weather conditions and the decoder for OpenWeatherMap responses."""

import json
import math
from dataclasses import dataclass
from typing import IO, Any

from weather.errors import MalformedResponseError, MissingWeatherDataError

# Offset between the Kelvin and Celsius scales
KELVIN_OFFSET = 273.15


@dataclass(frozen=True)
class Conditions:
    """
    Weather summary and temperature of a location.

    Attributes
    ----------
    summary : str
        Short classifier reported upstream, e.g. ``"Drizzle"`` or ``"Clear"``.
    temperature_celsius : float
        Temperature in Celsius, rounded to two decimals.
    """

    summary: str
    temperature_celsius: float

    def __str__(self) -> str:
        return f"{self.summary} {self.temperature_celsius:.1f}ºC"


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert a Kelvin temperature to Celsius, rounded to two decimals."""
    celsius = kelvin - KELVIN_OFFSET
    return round(celsius * 100) / 100


def _reject_constant(name: str) -> Any:
    raise MalformedResponseError(f"invalid response: {name} is not a valid JSON value")


def _load(source: bytes | str | IO[Any]) -> Any:
    if hasattr(source, "read"):
        source = source.read()
    try:
        return json.loads(source, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedResponseError(str(e)) from e


def parse_json(source: bytes | str | IO[Any]) -> Conditions:
    """
    Decode an OpenWeatherMap "current weather" document into ``Conditions``.

    Only ``weather[0].main`` and ``main.temp`` are read; every other field is
    ignored.

    Args:
        source: The JSON document as bytes, text or a readable file object.

    Returns:
        The decoded conditions.

    Raises:
        MalformedResponseError: If the document is not valid JSON or has the
            wrong shape.
        MissingWeatherDataError: If the ``weather`` list is absent or empty.
    """
    data = _load(source)
    if not isinstance(data, dict):
        raise MalformedResponseError(f"invalid response: expected a JSON object, got {type(data).__name__}")

    weather = data.get("weather")
    if weather is None:
        raise MissingWeatherDataError()
    if not isinstance(weather, list):
        raise MalformedResponseError("invalid response: weather is not a list")
    if not weather:
        raise MissingWeatherDataError()

    first = weather[0]
    summary = first.get("main") if isinstance(first, dict) else None
    if not isinstance(summary, str) or not summary:
        raise MissingWeatherDataError()

    main = data.get("main")
    if not isinstance(main, dict):
        raise MalformedResponseError("invalid response: missing main section")
    temp = main.get("temp")
    # bool is an int subclass but never a temperature
    if isinstance(temp, bool) or not isinstance(temp, (int, float)):
        raise MalformedResponseError("invalid response: missing temperature")
    try:
        finite = math.isfinite(temp)
    except OverflowError:
        finite = False
    if not finite:
        raise MalformedResponseError("invalid response: temperature is not a finite number")

    return Conditions(summary=summary, temperature_celsius=kelvin_to_celsius(temp))
