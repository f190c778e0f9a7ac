from .core import Dewpoint

from ._dewpoint_constants import MAGNUS_LAWRENCE, MagnusDewpointConstants
from ._dewpoint_equations import MagnusDewpointEquation


__all__ = [
    'Dewpoint',

    'MagnusDewpointEquation',

    'MagnusDewpointConstants',
    'MAGNUS_LAWRENCE',
]
