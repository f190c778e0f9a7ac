"""
Reusable tools for validating and parsing enums.
"""

from enum import Enum
from typing import Type, TypeVar, Union

E = TypeVar("E", bound=Enum)


def parse_enum(value: Union[str, E], enum_class: Type[E]) -> E:
    """Parse and validate an enum from a string or an enum instance.

    Strings are matched against the enum values case-insensitively, ignoring
    surrounding whitespace. Enum instances are passed through after checking
    that they belong to ``enum_class``.

    Parameters
    ----------
    value : str or E
        Either a string naming one of the enum values or an instance of
        ``enum_class``.
    enum_class : Type[E]
        The enum class to parse into.

    Returns
    -------
    E
        Valid instance of ``enum_class``.

    Raises
    ------
    ValueError
        If the string does not match any enum member.
    TypeError
        If value is neither a string nor an instance of ``enum_class``.

    Examples
    --------
    >>> from dewpoint.shared._shared_enums import TemperatureUnit
    >>> parse_enum("Fahrenheit", TemperatureUnit)
    <TemperatureUnit.FAHRENHEIT: 'fahrenheit'>

    >>> parse_enum(TemperatureUnit.CELSIUS, TemperatureUnit)
    <TemperatureUnit.CELSIUS: 'celsius'>

    >>> parse_enum("kelvin", TemperatureUnit)
    ValueError: Invalid enum 'kelvin'. Available are the following: [celsius, fahrenheit]

    >>> parse_enum(1, TemperatureUnit)
    TypeError: value must be str or TemperatureUnit, got int
    """
    if isinstance(value, enum_class):
        return value

    if isinstance(value, str):
        try:
            return enum_class(value.strip().lower())

        except ValueError as err:
            valid_enums = ", ".join([e.value for e in enum_class])
            raise ValueError(
                f"Invalid enum '{value}'. Available are the following: [{valid_enums}]"
            ) from err

    raise TypeError(
        f"value must be str or {enum_class.__name__}, got {type(value).__name__}"
    )
