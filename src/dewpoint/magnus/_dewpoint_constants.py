"""
Named tuple dewpoint constants.
"""

from typing import NamedTuple


class MagnusDewpointConstants(NamedTuple):
    """
    Magnus formula coefficients for dew point calculation over water.

    Attributes
    ----------
    A : float
        Dimensionless coefficient in Magnus formula

    B : float
        Temperature coefficient in Celsius
    """

    A: float
    B: float


# Lawrence (2005), eq. 8, https://doi.org/10.1175/BAMS-86-2-225
MAGNUS_LAWRENCE = MagnusDewpointConstants(A=17.625, B=243.04)

# Range the coefficients were fitted over, in Celsius.
MAGNUS_LAWRENCE_BOUNDS_C = (-40.0, 50.0)
