"""
Core interface for calculating the dew point.
"""

from typing import Union

import numpy.typing as npt

from dewpoint.magnus._dewpoint_equations import MagnusDewpointEquation
from dewpoint.shared._enum_tools import parse_enum
from dewpoint.shared._shared_enums import TemperatureUnit


class Dewpoint:
    """
    Unified interface for dew point calculations.

    Methods
    -------
    get_dewpoint(temperature, humidity, unit='celsius')
        Dew point from temperature and relative humidity (percent)

    get_equation(unit='celsius')
        Magnus equation object for a temperature unit

    get_units_available()
        Names of the supported temperature units

    Examples
    --------
    >>> td = Dewpoint.get_dewpoint(temperature=20.0, humidity=50.0)
    >>> print(f"{td:.2f}°C")
    9.26°C

    >>> td = Dewpoint.get_dewpoint(temperature=68.0, humidity=50.0, unit='fahrenheit')
    >>> print(f"{td:.2f}°F")
    48.67°F

    >>> Dewpoint.get_units_available()
    ['celsius', 'fahrenheit']
    """

    @staticmethod
    def get_units_available() -> list[str]:
        """
        Get the list of supported temperature unit names.

        Returns
        -------
        list[str]
            Unit names (lowercase strings) accepted by ``get_dewpoint``
        """
        return [unit.value for unit in TemperatureUnit]

    @staticmethod
    def get_equation(
        unit: Union[str, TemperatureUnit] = TemperatureUnit.CELSIUS,
    ) -> MagnusDewpointEquation:
        unit = parse_enum(value=unit, enum_class=TemperatureUnit)
        return MagnusDewpointEquation(unit=unit)

    @staticmethod
    def get_dewpoint(
        temperature: Union[float, npt.ArrayLike],
        humidity: Union[float, npt.ArrayLike],
        unit: Union[str, TemperatureUnit] = TemperatureUnit.CELSIUS,
    ) -> Union[float, npt.NDArray]:
        """
        Calculate the dew point using the Magnus approximation.

        Parameters
        ----------
        temperature : float or array-like
            Air temperature(s) in ``unit``
        humidity : float or array-like
            Relative humidity(ies) as a percentage (100 is saturation),
            must be > 0
        unit : str or TemperatureUnit, default 'celsius'
            Unit of ``temperature`` and of the result

        Returns
        -------
        float or ndarray
            Dew point temperature(s) in ``unit``, unrounded

        Raises
        ------
        ValueError
            If humidity is not strictly positive or ``unit`` is unknown
        TypeError
            If ``unit`` is neither a string nor a TemperatureUnit

        Examples
        --------
        >>> import numpy as np
        >>> Dewpoint.get_dewpoint(temperature=25.0, humidity=np.array([30.0, 60.0, 100.0]))
        array([ 6.2...,  16.6...,  25. ])
        """
        equation = Dewpoint.get_equation(unit=unit)
        return equation.calculate(temperature=temperature, humidity=humidity)
