#!filepath: datetimekit/core/__init__.py

from .calendar import Fields
from .timestamp import Timestamp
from .units import UnitCode
from .zone import set_local_zone, set_zone_names

__all__ = [
    "Fields",
    "Timestamp",
    "UnitCode",
    "set_local_zone",
    "set_zone_names",
]
