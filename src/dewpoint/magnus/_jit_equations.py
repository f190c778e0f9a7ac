"""
Jit equations for the Magnus dew point approximation and unit conversions.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange


@njit(cache=True, error_model="numpy")
def _fahrenheit_to_celsius(temp_f: float) -> float:
    return (temp_f - 32.0) * 5.0 / 9.0


@njit(cache=True, error_model="numpy")
def _celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9.0 / 5.0 + 32.0


@njit(cache=True, error_model="numpy")
def _magnus_equation_scalar(temp_c: float, humidity: float, A: float, B: float) -> float:
    """
    Scalar Magnus formula for dew point calculation.

    Parameters
    ----------
    temp_c : float
        Air temperature in Celsius
    humidity : float
        Relative humidity as a percentage (100 is saturation), must be > 0
    A : float
        Magnus equation coefficient A
    B : float
        Magnus equation coefficient B in Celsius

    Returns
    -------
    float
        Dew point temperature in Celsius

    See Also
    --------
    _magnus_equation_vectorised : Parallel version for arrays
    MagnusDewpointEquation : High-level interface
    """

    # at temp_c == -B the result is nan rather than an exception
    alpha = np.log(humidity * 0.01) + (A * temp_c) / (B + temp_c)
    return (B * alpha) / (A - alpha)


@njit(cache=True, error_model="numpy")
def _magnus_equation_fahrenheit_scalar(
    temp_f: float, humidity: float, A: float, B: float
) -> float:
    """
    Scalar Magnus formula taking and returning Fahrenheit.

    The temperature is converted to Celsius, run through
    ``_magnus_equation_scalar`` and the dew point converted back.
    """
    td_c = _magnus_equation_scalar(_fahrenheit_to_celsius(temp_f), humidity, A, B)
    return _celsius_to_fahrenheit(td_c)


@njit(parallel=True, fastmath=True, error_model="numpy")
def _magnus_equation_vectorised(
    temp_c: npt.ArrayLike, humidity: npt.ArrayLike, A: float, B: float
) -> npt.NDArray:
    """
    Vectorized Magnus formula with parallel processing.

    Parameters
    ----------
    temp_c : ndarray
        Air temperature(s) in Celsius, shape (n,)
    humidity : ndarray
        Relative humidity(ies) as a percentage, shape (n,)
    A : float
        Magnus equation coefficient A
    B : float
        Magnus equation coefficient B (Celsius)

    Returns
    -------
    ndarray
        Dew point temperature(s) in Celsius, shape (n,)
    """

    n = len(temp_c)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _magnus_equation_scalar(temp_c[i], humidity[i], A, B)
    return results


@njit(parallel=True, fastmath=True, error_model="numpy")
def _magnus_equation_fahrenheit_vectorised(
    temp_f: npt.ArrayLike, humidity: npt.ArrayLike, A: float, B: float
) -> npt.NDArray:
    """Vectorized counterpart of ``_magnus_equation_fahrenheit_scalar``."""

    n = len(temp_f)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _magnus_equation_fahrenheit_scalar(temp_f[i], humidity[i], A, B)
    return results
