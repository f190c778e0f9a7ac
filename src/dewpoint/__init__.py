from .magnus import Dewpoint, MagnusDewpointEquation

from .shared import TemperatureUnit


__all__ = [
    'Dewpoint',
    'MagnusDewpointEquation',

    'TemperatureUnit',
]

__version__ = '0.1.0'
