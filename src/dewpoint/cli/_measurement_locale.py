"""
Default temperature unit from the measurement locale.

The locale is read once by the entry point and passed around as a plain
string, e.g. ``"en_US.UTF-8"``.
"""

import os
from typing import Mapping, Optional

from dewpoint.shared._shared_enums import TemperatureUnit

# POSIX precedence for the LC_MEASUREMENT category
LOCALE_ENV_PRECEDENCE = ("LC_ALL", "LC_MEASUREMENT", "LANG")

DEFAULT_LOCALE = "C"

FAHRENHEIT_TERRITORIES = frozenset(
    {
        "US",  # United States
        "LR",  # Liberia
        "FM",  # Micronesia
        "KY",  # Cayman Islands
        "MH",  # Marshall Islands
        "PW",  # Palau
    }
)


def get_measurement_locale(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the measurement locale from the environment.

    Parameters
    ----------
    environ : mapping, optional
        Environment to read, ``os.environ`` when omitted.

    Returns
    -------
    str
        The first non-empty of ``LC_ALL``, ``LC_MEASUREMENT`` and ``LANG``,
        or ``"C"`` when none is set.
    """
    if environ is None:
        environ = os.environ

    for name in LOCALE_ENV_PRECEDENCE:
        value = environ.get(name)
        if value:
            return value
    return DEFAULT_LOCALE


def locale_uses_fahrenheit(locale_name: str) -> bool:
    """
    Whether the locale's territory conventionally uses Fahrenheit.

    The territory is the text between the first ``_`` and the first ``.``.
    Locales without both delimiters in that order (``"C"``, ``"en"``,
    ``"en_US"``) are treated as Celsius. Matching is exact and
    case-sensitive, so ``"en_USA.UTF-8"`` is Celsius.
    """
    underscore = locale_name.find("_")
    dot = locale_name.find(".")
    if underscore == -1 or dot == -1 or dot <= underscore:
        return False

    territory = locale_name[underscore + 1 : dot]
    return territory in FAHRENHEIT_TERRITORIES


def default_unit(locale_name: str) -> TemperatureUnit:
    if locale_uses_fahrenheit(locale_name):
        return TemperatureUnit.FAHRENHEIT
    return TemperatureUnit.CELSIUS
