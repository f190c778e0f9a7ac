"""
Magnus dew point equation with scalar and vector dispatch.
"""

import warnings
from typing import Callable, NamedTuple, Tuple, Union

import numpy as np
import numpy.typing as npt

from dewpoint.magnus._dewpoint_constants import (
    MAGNUS_LAWRENCE,
    MAGNUS_LAWRENCE_BOUNDS_C,
)
from dewpoint.magnus._jit_equations import (
    _celsius_to_fahrenheit,
    _magnus_equation_fahrenheit_scalar,
    _magnus_equation_fahrenheit_vectorised,
    _magnus_equation_scalar,
    _magnus_equation_vectorised,
)
from dewpoint.shared._enum_tools import parse_enum
from dewpoint.shared._shared_enums import TemperatureUnit


class MagnusDewpointEquation:
    """
    Dew point calculation using the Magnus approximation (Lawrence 2005).

    Computes the dew point of moist air over a water surface from its
    temperature and relative humidity:

        x = ln(H / 100) + A * T / (B + T)
        Td = B * x / (A - x)

    with A = 17.625 and B = 243.04 C. Fahrenheit temperatures are converted
    to Celsius before the formula and back afterwards, so the result is
    always in the same unit as the input temperature.

    Parameters
    ----------
    unit : str or TemperatureUnit, default 'celsius'
        Unit of the input temperature and of the returned dew point:
        - 'celsius'
        - 'fahrenheit'

    Attributes
    ----------
    unit : TemperatureUnit
        Temperature unit of inputs and outputs
    temp_bounds : tuple[float, float]
        Fitted temperature range in ``unit``:
        - Celsius: (-40, 50)
        - Fahrenheit: (-40, 122)
    equation_constants : MagnusDewpointConstants
        Magnus coefficients (A, B)

    Examples
    --------
    >>> magnus = MagnusDewpointEquation(unit='celsius')
    >>> round(magnus.calculate(temperature=20.0, humidity=50.0), 2)
    9.26

    >>> magnus_f = MagnusDewpointEquation(unit='fahrenheit')
    >>> round(magnus_f.calculate(temperature=68.0, humidity=50.0), 2)
    48.67

    >>> # Broadcasting: scalar humidity with array temperatures
    >>> import numpy as np
    >>> magnus.calculate(temperature=np.array([10.0, 20.0, 30.0]), humidity=50.0)
    array([ 0.05...,  9.26..., 18.44...])

    See Also
    --------
    Dewpoint.get_dewpoint : High-level interface
    """

    temp_bounds: Tuple[float, float]
    unit: TemperatureUnit
    equation_constants: NamedTuple = MAGNUS_LAWRENCE

    def __init__(self, unit: Union[str, TemperatureUnit] = TemperatureUnit.CELSIUS):
        self.unit = parse_enum(value=unit, enum_class=TemperatureUnit)
        self._update_temp_bounds()

    def _update_temp_bounds(self) -> None:
        temp_min, temp_max = MAGNUS_LAWRENCE_BOUNDS_C

        if self.unit == TemperatureUnit.CELSIUS:
            self.temp_bounds = (temp_min, temp_max)

        elif self.unit == TemperatureUnit.FAHRENHEIT:
            self.temp_bounds = (
                _celsius_to_fahrenheit(temp_min),
                _celsius_to_fahrenheit(temp_max),
            )

    def calculate(
        self,
        temperature: Union[float, npt.ArrayLike],
        humidity: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        """
        Calculate the dew point temperature.

        Parameters
        ----------
        temperature : float or array-like
            Air temperature(s) in ``self.unit``
        humidity : float or array-like
            Relative humidity(ies) as a percentage, must be > 0

        Returns
        -------
        float or ndarray
            Dew point temperature(s) in ``self.unit``. A float for scalar
            inputs, otherwise an array with the broadcast input shape.
            NaN where the formula is undefined (temperature of -B Celsius,
            or overflow for huge temperatures).

        Raises
        ------
        ValueError
            If any humidity is not strictly positive, or the input shapes
            cannot be broadcast together.

        Warns
        -----
        UserWarning
            If a temperature lies outside ``self.temp_bounds``.
        """
        if self.unit == TemperatureUnit.FAHRENHEIT:
            return self._dispatch_scalar_or_vector(
                temperature=temperature,
                humidity=humidity,
                scalar_func=_magnus_equation_fahrenheit_scalar,
                vector_func=_magnus_equation_fahrenheit_vectorised,
            )

        return self._dispatch_scalar_or_vector(
            temperature=temperature,
            humidity=humidity,
            scalar_func=_magnus_equation_scalar,
            vector_func=_magnus_equation_vectorised,
        )

    def _dispatch_scalar_or_vector(
        self,
        temperature: Union[float, npt.ArrayLike],
        humidity: Union[float, npt.ArrayLike],
        scalar_func: Callable[..., float],
        vector_func: Callable[..., npt.NDArray],
    ) -> Union[float, npt.NDArray]:
        temperature, humidity = self._validate_input(
            temperature=temperature, humidity=humidity
        )

        if temperature.ndim == 0 and humidity.ndim == 0:
            return float(
                scalar_func(
                    float(temperature.item()),
                    float(humidity.item()),
                    *self.equation_constants,
                )
            )

        original_shape = temperature.shape
        dewpoint_temp = vector_func(
            temperature.flatten(), humidity.flatten(), *self.equation_constants
        )
        return dewpoint_temp.reshape(original_shape)

    def _broadcast_input(
        self, temperature: npt.NDArray, humidity: npt.NDArray
    ) -> Tuple[npt.NDArray, npt.NDArray]:
        if temperature.ndim == 0 and humidity.ndim == 0:
            pass

        elif temperature.ndim == 0 and humidity.ndim > 0:
            temperature = np.full_like(humidity, temperature, dtype=np.float64)

        elif humidity.ndim == 0 and temperature.ndim > 0:
            humidity = np.full_like(temperature, humidity, dtype=np.float64)

        elif temperature.shape != humidity.shape:
            raise ValueError(
                f"Input arrays must have the same shape or one must be scalar. "
                f"Got temperature.shape={temperature.shape}, humidity.shape={humidity.shape}"
            )

        return temperature, humidity

    def _validate_input(
        self,
        temperature: Union[float, npt.ArrayLike],
        humidity: Union[float, npt.ArrayLike],
    ) -> Tuple[npt.NDArray, npt.NDArray]:
        temperature = np.asarray(temperature, dtype=np.float64)
        humidity = np.asarray(humidity, dtype=np.float64)

        temperature, humidity = self._broadcast_input(
            temperature=temperature, humidity=humidity
        )

        # ln(H/100) is undefined at or below zero humidity
        if np.any(~(humidity > 0)):
            raise ValueError(
                f"Relative humidity must be greater than 0. "
                f"Got minimum {np.min(humidity)}"
            )

        temp_min, temp_max = self.temp_bounds

        if np.any(temperature < temp_min) or np.any(temperature > temp_max):
            warnings.warn(
                f"Temperature outside valid range "
                f"[{temp_min:g}, {temp_max:g}] {self.unit.display_name} "
                f"for the Magnus approximation. Results may be inaccurate.",
                UserWarning,
                stacklevel=4,
            )
        return temperature, humidity
