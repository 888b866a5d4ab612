#!filepath: datetimekit/engines/__init__.py

from .mask_formatter import MaskFormatter, format
from .name_tables import reset_tables, set_mask, set_months, set_weekdays
from .timezone_introspector import (
    TimezoneIntrospector,
    hours_from_standard,
    is_daylight_savings,
    is_leap_year,
)
from .unit_comparer import UnitComparer, compare
from .unit_mover import UnitMover, move

__all__ = [
    "MaskFormatter", "format",
    "UnitMover", "move",
    "UnitComparer", "compare",
    "TimezoneIntrospector", "hours_from_standard", "is_daylight_savings", "is_leap_year",
    "set_months", "set_weekdays", "set_mask", "reset_tables",
]
