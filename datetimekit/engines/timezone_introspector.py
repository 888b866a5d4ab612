#!filepath: datetimekit/engines/timezone_introspector.py
from __future__ import annotations

from datetimekit.core.timestamp import Timestamp, TimestampLike


class TimezoneIntrospector:
    """
    DST / 闰年判断

    offset 采用宿主约定（UTC 以西为正），夏令时总是让 offset 变小，
    所以一年中 1 月 1 日与 7 月 1 日 offset 的较大者就是标准时间，南北半球一致。
    """

    def hours_from_standard(self, timestamp: TimestampLike) -> float:
        ts = Timestamp.coerce(timestamp)
        year = ts.fields().year

        jan = Timestamp.of_local(year, 0, 1, zone=ts.zone)
        jul = Timestamp.of_local(year, 6, 1, zone=ts.zone)
        standard = max(jan.offset(), jul.offset())

        return (standard - ts.offset()) / 60

    def is_daylight_savings(self, timestamp: TimestampLike) -> bool:
        return self.hours_from_standard(timestamp) != 0

    @staticmethod
    def is_leap_year(year: int) -> bool:
        # 2 月 29 日没有溢出到 3 月即为闰年
        return Timestamp.of_utc(int(year), 1, 29).fields(utc=True).day == 29


_introspector = TimezoneIntrospector()


def hours_from_standard(timestamp: TimestampLike) -> float:
    return _introspector.hours_from_standard(timestamp)


def is_daylight_savings(timestamp: TimestampLike) -> bool:
    return _introspector.is_daylight_savings(timestamp)


def is_leap_year(year: int) -> bool:
    return TimezoneIntrospector.is_leap_year(year)
