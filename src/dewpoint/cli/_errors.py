"""
Exceptions raised while interpreting the command line.

Each carries the diagnostic line to print on stderr; the entry point turns
them into exit status 1.
"""


class DewpointCLIError(Exception):
    """Base class for command-line failures."""


class UsageError(DewpointCLIError):
    """Wrong number of positional arguments or malformed options."""


class UnrecognizedOption(UsageError):
    def __init__(self, option: str):
        self.option = option
        super().__init__(f"dewpoint: unrecognized option '{option}'")


class InvalidTemperature(DewpointCLIError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f'dewpoint: invalid temperature "{token}"')


class InvalidHumidity(DewpointCLIError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f'dewpoint: invalid humidity "{token}"')


class HelpRequested(Exception):
    """Not a failure: ``--help`` short-circuits everything else."""


class UndefinedDewpoint(DewpointCLIError):
    """The formula has no finite result for otherwise valid input."""

    def __init__(self, temperature: float, humidity: float):
        self.temperature = temperature
        self.humidity = humidity
        super().__init__(
            f"dewpoint: no dew point for temperature {temperature:g} "
            f"and humidity {humidity:g}"
        )
