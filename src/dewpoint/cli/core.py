"""
Entry point: locale -> arguments -> Magnus formula -> stdout.
"""

import math
import sys
import warnings
from typing import Mapping, Optional, Sequence

from dewpoint.cli._argument_parser import ParsedArguments, parse_arguments
from dewpoint.cli._errors import DewpointCLIError, HelpRequested, UndefinedDewpoint
from dewpoint.cli._measurement_locale import get_measurement_locale
from dewpoint.cli._reporter import (
    report_error,
    report_help,
    report_result,
    report_warning,
)
from dewpoint.magnus.core import Dewpoint


def compute_dewpoint(arguments: ParsedArguments) -> float:
    """
    Run the calculator for one parsed command line.

    User warnings raised by the calculator are reported as plain
    ``dewpoint: warning: ...`` lines on stderr.

    Raises
    ------
    UndefinedDewpoint
        The formula gives no finite dew point for these values.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", UserWarning)
        dew_point = Dewpoint.get_dewpoint(
            temperature=arguments.temperature,
            humidity=arguments.humidity,
            unit=arguments.unit,
        )

    for warning in caught:
        if issubclass(warning.category, UserWarning):
            report_warning(warning.message)
        else:
            warnings.warn_explicit(
                warning.message, warning.category, warning.filename, warning.lineno
            )

    if not math.isfinite(dew_point):
        raise UndefinedDewpoint(arguments.temperature, arguments.humidity)
    return dew_point


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Run one invocation and return the exit status.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments without the program name, ``sys.argv[1:]`` when omitted.
    environ : mapping, optional
        Environment holding the locale variables, ``os.environ`` when omitted.

    Returns
    -------
    int
        0 on success or ``--help``, 1 on any usage or input error.
    """
    measurement_locale = get_measurement_locale(environ)

    try:
        arguments = parse_arguments(argv, measurement_locale)
        dew_point = compute_dewpoint(arguments)
    except HelpRequested:
        report_help(measurement_locale)
        return 0
    except DewpointCLIError as err:
        report_error(err)
        return 1

    report_result(dew_point)
    return 0


def run() -> None:
    sys.exit(main())
