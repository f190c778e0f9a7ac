"""
Shared enums for the calculator and the command line.
"""

from enum import Enum


class TemperatureUnit(Enum):
    """
    Temperature scale used for both the input temperature and the dew point.

    The Magnus formula itself works in Celsius. Fahrenheit inputs are
    converted to Celsius before the calculation and the result is converted
    back afterwards.

    Attributes
    ----------
    CELSIUS : str
        Celsius (centigrade) scale.
    FAHRENHEIT : str
        Fahrenheit scale.
    """

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()
