#!filepath: datetimekit/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .core import Timestamp, UnitCode
from .utils.datetime_utils import DateTimeUtils
from .utils.errors import (
    CoercionFailure,
    InvalidNameTable,
    InvalidTimeZone,
    InvalidUnitCode,
    UserInputError,
)

__version__ = "0.1.0"

datetime_utils = DateTimeUtils

# alias 简化调用
move = DateTimeUtils.move
compare = DateTimeUtils.compare
format = DateTimeUtils.format
hours_from_standard = DateTimeUtils.hours_from_standard
is_daylight_savings = DateTimeUtils.is_daylight_savings
is_leap_year = DateTimeUtils.is_leap_year
parse = DateTimeUtils.parse
set_months = DateTimeUtils.set_months
set_weekdays = DateTimeUtils.set_weekdays
set_mask = DateTimeUtils.set_mask
set_zone_names = DateTimeUtils.set_zone_names
set_local_zone = DateTimeUtils.set_local_zone

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "Timestamp", "UnitCode",
    "datetime_utils", "DateTimeUtils",
    "move", "compare", "format",
    "hours_from_standard", "is_daylight_savings", "is_leap_year",
    "parse",
    "set_months", "set_weekdays", "set_mask", "set_zone_names", "set_local_zone",
    "UserInputError", "InvalidUnitCode", "CoercionFailure", "InvalidNameTable", "InvalidTimeZone",
]
