from .core import compute_dewpoint, main, run

from ._argument_parser import ParsedArguments, parse_arguments, read_float, split_arguments
from ._errors import (
    DewpointCLIError,
    HelpRequested,
    InvalidHumidity,
    InvalidTemperature,
    UndefinedDewpoint,
    UnrecognizedOption,
    UsageError,
)
from ._measurement_locale import (
    default_unit,
    get_measurement_locale,
    locale_uses_fahrenheit,
)
from ._reporter import format_dewpoint


__all__ = [
    'compute_dewpoint',
    'main',
    'run',

    'ParsedArguments',
    'parse_arguments',
    'read_float',
    'split_arguments',

    'DewpointCLIError',
    'HelpRequested',
    'InvalidHumidity',
    'InvalidTemperature',
    'UndefinedDewpoint',
    'UnrecognizedOption',
    'UsageError',

    'default_unit',
    'get_measurement_locale',
    'locale_uses_fahrenheit',

    'format_dewpoint',
]
