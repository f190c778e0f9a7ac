from ._enum_tools import parse_enum
from ._shared_enums import TemperatureUnit

__all__ = ["parse_enum", "TemperatureUnit"]
