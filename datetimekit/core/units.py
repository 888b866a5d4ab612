#!filepath: datetimekit/core/units.py
from __future__ import annotations

from enum import Enum

from datetimekit.utils.errors import InvalidUnitCode


class UnitCode(str, Enum):
    """move / compare 的时间粒度"""
    DAY = "d"
    WEEK = "w"
    MONTH = "m"
    QUARTER = "q"
    YEAR = "y"
    HOUR = "h"
    MINUTE = "M"
    SECOND = "s"
    MILLISECOND = "l"

    @classmethod
    def of(cls, part) -> "UnitCode":
        try:
            return cls(part)
        except (ValueError, TypeError):
            raise InvalidUnitCode(part) from None
