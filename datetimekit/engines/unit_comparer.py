#!filepath: datetimekit/engines/unit_comparer.py
from __future__ import annotations

from typing import Callable, Dict

from datetimekit.core.calendar import MS_PER_DAY, MS_PER_MINUTE, trunc_div
from datetimekit.core.timestamp import Timestamp, TimestampLike
from datetimekit.core.units import UnitCode
from datetimekit.utils.logger import logs

Comparer = Callable[[Timestamp, Timestamp], int]


class UnitComparer:
    """
    UnitComparer：date_a 到 date_b 之间相差多少个完整单位

    - l：毫秒直接相减
    - s / M / h：上一级单位的差 × 进制 + 本级字段差（本地字段）
    - d：两者归零到本地午夜后相减，加上时区偏移差补偿，向零取整
    - w / q：d / m 的结果再除以 7 / 3，向零取整
    - m：年月字段差，按 day-of-month 是否“到达”修正 ±1
    - y：年字段相减
    """

    def __init__(self):
        self.comparers: Dict[UnitCode, Comparer] = {
            UnitCode.MILLISECOND: self._milliseconds,
            UnitCode.SECOND: self._seconds,
            UnitCode.MINUTE: self._minutes,
            UnitCode.HOUR: self._hours,
            UnitCode.DAY: self._days,
            UnitCode.WEEK: self._weeks,
            UnitCode.MONTH: self._months,
            UnitCode.QUARTER: self._quarters,
            UnitCode.YEAR: self._years,
        }

    def compare(self, date_a: TimestampLike, date_b: TimestampLike, part) -> int:
        code = UnitCode.of(part)
        a = Timestamp.coerce(date_a)
        b = Timestamp.coerce(date_b)

        result = self.comparers[code](a, b)
        logs.debug(f"[UnitComparer] {a!r} -> {b!r} = {result}{code.value}")
        return result

    # --------------------------------------------------
    # time-of-day units
    # --------------------------------------------------
    @staticmethod
    def _milliseconds(a: Timestamp, b: Timestamp) -> int:
        return b - a

    def _seconds(self, a: Timestamp, b: Timestamp) -> int:
        return self._minutes(a, b) * 60 + b.fields().second - a.fields().second

    def _minutes(self, a: Timestamp, b: Timestamp) -> int:
        return self._hours(a, b) * 60 + b.fields().minute - a.fields().minute

    def _hours(self, a: Timestamp, b: Timestamp) -> int:
        return self._days(a, b) * 24 + b.fields().hour - a.fields().hour

    # --------------------------------------------------
    # calendar units
    # --------------------------------------------------
    @staticmethod
    def _days(a: Timestamp, b: Timestamp) -> int:
        midnight_a = a.copy().set_fields(hour=0, minute=0, second=0, millisecond=0)
        midnight_b = b.copy().set_fields(hour=0, minute=0, second=0, millisecond=0)

        # offset() 以 UTC 以西为正；两个午夜之间跨过 DST 切换时真实间隔是 23h / 25h，
        # 用两个午夜各自的偏移差补回，得到本地日历上的整天数
        compensation = (midnight_a.offset() - midnight_b.offset()) * MS_PER_MINUTE
        return trunc_div(midnight_b - midnight_a + compensation, MS_PER_DAY)

    def _weeks(self, a: Timestamp, b: Timestamp) -> int:
        return trunc_div(self._days(a, b), 7)

    def _months(self, a: Timestamp, b: Timestamp) -> int:
        fa, fb = a.fields(), b.fields()
        diff = (fb.year - fa.year) * 12 + fb.month - fa.month

        # day-of-month 还没“到达”时，这个月不算完整
        if diff >= 0 and fa.day > fb.day:
            diff -= 1
        elif diff < 0 and fa.day < fb.day:
            diff += 1
        return diff

    def _quarters(self, a: Timestamp, b: Timestamp) -> int:
        return trunc_div(self._months(a, b), 3)

    @staticmethod
    def _years(a: Timestamp, b: Timestamp) -> int:
        return b.fields().year - a.fields().year


_comparer = UnitComparer()


def compare(date_a: TimestampLike, date_b: TimestampLike, part) -> int:
    return _comparer.compare(date_a, date_b, part)
