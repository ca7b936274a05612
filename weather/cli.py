"""Command-line interface: ``weather <location tokens…>``."""

import json
import sys
from typing import Sequence, TextIO

from loguru import logger
from rich.console import Console

from weather.config import LOG_LEVEL_ENV, load_settings
from weather.errors import LocationNotProvidedError, WeatherError
from weather.providers.base import WeatherClient
from weather.providers.openweather import OpenWeatherClient

err_console = Console(stderr=True, highlight=False, emoji=False)


def parse_location(argv: Sequence[str]) -> str:
    """
    Turn a raw argument vector into a single location string.

    ``argv[0]`` is the program name and is skipped. Tokens are joined with
    spaces up to and including the first one containing a comma; whatever
    follows is the country code and is appended without separators, so
    ``Kingston upon Hull, UK`` becomes ``"Kingston upon Hull,UK"``.

    Args:
        argv: Full argument vector, including the program name.

    Returns:
        The location to query.

    Raises:
        LocationNotProvidedError: If no location tokens were given.
    """
    if len(argv) < 2:
        raise LocationNotProvidedError()

    city_parts: list[str] = []
    country_parts: list[str] = []
    in_country = False
    for arg in argv[1:]:
        if in_country:
            country_parts.append(arg)
            continue
        city_parts.append(arg)
        if "," in arg:
            in_country = True

    return " ".join(city_parts) + "".join(country_parts)


def _error(message: str) -> None:
    err_console.print(message, style="red", markup=False, soft_wrap=True)


def setup_logging(level: str | None) -> None:
    """Route weather diagnostics to stderr when a log level is configured.

    Raises ValueError if the level is not known to loguru.
    """
    logger.remove()
    if level:
        logger.add(sys.stderr, level=level.upper())
        logger.enable("weather")


def run_cli(client: WeatherClient, argv: Sequence[str] | None = None, stdout: TextIO | None = None) -> int:
    """
    Run the command line against the given weather client.

    Args:
        client: Source of current conditions.
        argv: Full argument vector; defaults to ``sys.argv``.
        stdout: Stream for the rendered conditions; defaults to ``sys.stdout``.

    Returns:
        Process exit code: 0 on success, 1 on any failure.
    """
    if argv is None:
        argv = sys.argv
    if stdout is None:
        stdout = sys.stdout

    try:
        location = parse_location(argv)
    except LocationNotProvidedError as e:
        _error(str(e))
        return 1

    try:
        conditions = client.current(location)
    except WeatherError as e:
        logger.debug(f"Lookup failed with {e.__class__.__name__}")
        _error(
            f"couldn't fetch weather conditions for location "
            f"{json.dumps(location, ensure_ascii=False)}: {e}"
        )
        return 1

    stdout.write(f"{conditions}\n")
    stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read settings from the environment, build the client and run the CLI."""
    settings = load_settings()
    try:
        setup_logging(settings.log_level)
    except ValueError as e:
        _error(f"invalid {LOG_LEVEL_ENV}: {e}")
        return 1

    try:
        client = OpenWeatherClient(settings.token, base_url=settings.base_url)
    except WeatherError as e:
        _error(str(e))
        return 1

    with client:
        return run_cli(client, argv)


def entrypoint() -> None:
    """Console-script entry point."""
    sys.exit(main())
