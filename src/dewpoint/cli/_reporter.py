"""
Output and diagnostics for the command line.

Results and help go to stdout; every diagnostic goes to stderr so that
scripts reading stdout only ever see the dew point.
"""

import sys
from typing import Optional, TextIO

import numpy as np

from dewpoint.cli._errors import DewpointCLIError
from dewpoint.cli._measurement_locale import default_unit

SHORT_USAGE = "Usage: dewpoint TEMPERATURE HUMIDITY\n"

HELP_TEXT = """\
Compute the dew point from a given temperature and humidity. Temperatures are
interpreted by default according to the current locale; humidity is interpreted
as a percentage.

Options:
      -c, --celsius, --centigrade
                              use the Celsius temperature scale
      -f, --fahrenheit        use the Fahrenheit temperature scale
      --help                  display this help and exit
"""

ASK_FOR_HELP = "Try 'dewpoint --help' for more information\n"


def format_dewpoint(dew_point: float) -> str:
    """Nearest integer, ties to even, without a sign on zero."""
    return str(int(np.rint(dew_point)))


def render_help(measurement_locale: str) -> str:
    unit = default_unit(measurement_locale)
    return (
        SHORT_USAGE
        + HELP_TEXT
        + f"\nYour current measurement locale is {measurement_locale}, which uses "
        + f"{unit.display_name} by\ndefault.\n"
    )


def render_error(error: DewpointCLIError) -> str:
    diagnostic = str(error)
    prefix = f"{diagnostic}\n" if diagnostic else ""
    return prefix + SHORT_USAGE + ASK_FOR_HELP


def report_result(dew_point: float, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(format_dewpoint(dew_point) + "\n")


def report_help(measurement_locale: str, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(render_help(measurement_locale))


def report_error(error: DewpointCLIError, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stderr
    stream.write(render_error(error))


def report_warning(message: Warning, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stderr
    stream.write(f"dewpoint: warning: {message}\n")
