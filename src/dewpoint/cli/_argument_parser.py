"""
Command-line parsing for ``dewpoint [OPTIONS] TEMPERATURE HUMIDITY``.
"""

import argparse
import math
import re
import sys
from typing import List, NamedTuple, Optional, Sequence, Tuple

from dewpoint.cli._errors import (
    HelpRequested,
    InvalidHumidity,
    InvalidTemperature,
    UnrecognizedOption,
    UsageError,
)
from dewpoint.cli._measurement_locale import default_unit
from dewpoint.shared._shared_enums import TemperatureUnit

_HEX_FLOAT_PREFIX = re.compile(r"\s*[+-]?0[xX]")


class ParsedArguments(NamedTuple):
    unit: TemperatureUnit
    temperature: float
    humidity: float


class _DewpointArgumentParser(argparse.ArgumentParser):
    # Parse failures surface as UsageError; the entry point owns stderr and
    # the exit status.
    def error(self, message: str):
        raise UsageError(f"dewpoint: {message}")


def build_parser(unit_default: TemperatureUnit) -> argparse.ArgumentParser:
    parser = _DewpointArgumentParser(prog="dewpoint", add_help=False)
    parser.add_argument(
        "-c",
        "--celsius",
        "--centigrade",
        dest="unit",
        action="store_const",
        const=TemperatureUnit.CELSIUS,
    )
    parser.add_argument(
        "-f",
        "--fahrenheit",
        dest="unit",
        action="store_const",
        const=TemperatureUnit.FAHRENHEIT,
    )
    parser.add_argument("--help", action="store_true")
    parser.set_defaults(unit=unit_default)
    return parser


def read_float(token: str) -> Optional[float]:
    """
    Parse a float literal that must span the whole token.

    Leading whitespace and a sign are allowed, as are exponents, ``inf``,
    ``nan`` and hexadecimal literals such as ``0x1.8p1``. Trailing
    characters, trailing whitespace included, make the token invalid, and so
    do digit-group underscores.

    Returns
    -------
    float or None
        The parsed value, or None when the token is not a float literal.
    """
    if token != token.rstrip() or "_" in token:
        return None

    try:
        return float(token)
    except ValueError:
        pass

    if _HEX_FLOAT_PREFIX.match(token):
        try:
            return float.fromhex(token)
        except ValueError:
            return None
    return None


def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Separate option tokens from positionals, keeping the order of each.

    Every token after the first ``--`` is a positional. Before it, a token
    is an option when it starts with ``-``, is longer than ``-`` alone and
    is not a float literal, so ``-5``, ``-1e3`` and ``-0x1p3`` are numbers.
    """
    options: List[str] = []
    positionals: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            positionals.extend(tokens)
            break
        if token.startswith("-") and token != "-" and read_float(token) is None:
            options.append(token)
        else:
            positionals.append(token)
    return options, positionals


def parse_arguments(
    argv: Optional[Sequence[str]], measurement_locale: str
) -> ParsedArguments:
    """
    Interpret the argument vector (without the program name).

    Unit flags override the locale default and the last one wins. Options
    may appear before, between or after the positionals; tokens such as
    ``-5`` or ``-1e3`` are read as numbers, not options, and ``--`` ends
    option processing.

    Raises
    ------
    HelpRequested
        ``--help`` was given, whatever else is on the command line.
    UnrecognizedOption
        An option other than the unit flags and ``--help``.
    UsageError
        Not exactly two positionals, or a malformed option.
    InvalidTemperature
        The temperature is not a finite float literal.
    InvalidHumidity
        The humidity is not a finite float literal greater than zero.
    """
    if argv is None:
        argv = sys.argv[1:]
    options, measurements = split_arguments(argv)

    parser = build_parser(default_unit(measurement_locale))
    namespace, unknown = parser.parse_known_args(options)

    if namespace.help:
        raise HelpRequested()

    if unknown:
        raise UnrecognizedOption(unknown[0])

    if len(measurements) != 2:
        raise UsageError()

    temperature_token, humidity_token = measurements

    temperature = read_float(temperature_token)
    if temperature is None or not math.isfinite(temperature):
        raise InvalidTemperature(temperature_token)

    humidity = read_float(humidity_token)
    if humidity is None or not math.isfinite(humidity) or humidity <= 0.0:
        raise InvalidHumidity(humidity_token)

    return ParsedArguments(
        unit=namespace.unit, temperature=temperature, humidity=humidity
    )
