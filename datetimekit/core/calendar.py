#!filepath: datetimekit/core/calendar.py
"""
Proleptic Gregorian 日历换算（纯整数运算，不依赖 datetime 的年份范围）

约定：
  - 时间值：自 1970-01-01T00:00:00Z 起的毫秒数（int）
  - month 为 0-based（0 = January）
  - weekday 0 = Sunday
  - 字段允许溢出：month=12 → 次年一月，day=0 → 上个月最后一天
"""
from __future__ import annotations

from typing import NamedTuple, Tuple

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

DAYS_PER_ERA = 146097  # 400 年一个周期


class Fields(NamedTuple):
    """某一时刻在 UTC 或本地时间下的字段快照"""
    year: int
    month: int
    day: int
    weekday: int
    hour: int
    minute: int
    second: int
    millisecond: int


def days_from_civil(year: int, month: int, day: int) -> int:
    """(year, 0-based month, day) → 距 1970-01-01 的天数，month/day 可溢出"""
    y_carry, month = divmod(month, 12)
    year += y_carry

    # 以三月为一年之首，闰日落在年末
    y = year - 1 if month < 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 10) % 12
    doy = (153 * mp + 2) // 5
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * DAYS_PER_ERA + doe - 719468 + (day - 1)


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """距 1970-01-01 的天数 → (year, 0-based month, day)"""
    z = days + 719468
    era = z // DAYS_PER_ERA
    doe = z - era * DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = (mp + 2) % 12
    year = yoe + era * 400 + (1 if month < 2 else 0)
    return year, month, day


def weekday_from_days(days: int) -> int:
    # 1970-01-01 是星期四
    return (days + 4) % 7


def make_time(hour: int, minute: int, second: int, millisecond: int) -> int:
    return hour * MS_PER_HOUR + minute * MS_PER_MINUTE + second * MS_PER_SECOND + millisecond


def compose(
    year: int,
    month: int = 0,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """字段 → 毫秒时间值（所有字段均允许溢出/负数）"""
    return days_from_civil(year, month, day) * MS_PER_DAY + make_time(hour, minute, second, millisecond)


def decompose(value: int) -> Fields:
    """毫秒时间值 → Fields"""
    days, rem = divmod(value, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rem = divmod(rem, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millisecond = divmod(rem, MS_PER_SECOND)
    return Fields(
        year=year,
        month=month,
        day=day,
        weekday=weekday_from_days(days),
        hour=hour,
        minute=minute,
        second=second,
        millisecond=millisecond,
    )


def trunc_div(a: int, b: int) -> int:
    """向零取整的整数除法（区别于 // 的向下取整）"""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q
