#!filepath: tests/engines/test_unit_comparer.py
from __future__ import annotations

import pytest

from datetimekit.core.timestamp import Timestamp
from datetimekit.engines.unit_comparer import compare
from datetimekit.utils.errors import InvalidUnitCode

CHICAGO = "America/Chicago"
ALL_CODES = ["d", "w", "m", "q", "y", "h", "M", "s", "l"]


def utc(*fields) -> Timestamp:
    return Timestamp.of_utc(*fields, zone="UTC")


def chicago(*fields) -> Timestamp:
    return Timestamp.of_local(*fields, zone=CHICAGO)


# -----------------------------------------------------------------------------
# 1. 基本契约
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("part", ALL_CODES)
def test_compare_with_itself_is_zero(part):
    a = utc(2024, 6, 4, 17, 30, 12, 345)
    assert compare(a, a, part) == 0
    assert compare(a, a.copy(), part) == 0


def test_milliseconds_are_exact_and_antisymmetric():
    a = utc(2024, 2, 15, 13, 5, 9, 250)
    b = utc(2024, 2, 15, 13, 5, 10, 0)
    assert compare(a, b, "l") == 750
    assert compare(b, a, "l") == -750


def test_compare_coerces_inputs():
    assert compare("2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z", "l") == 86_400_000
    assert compare("2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z", "d") == 1


@pytest.mark.parametrize("part", ["x", "D", "", None])
def test_invalid_unit_code(part):
    with pytest.raises(InvalidUnitCode):
        compare(utc(2024, 0, 1), utc(2024, 0, 2), part)


# -----------------------------------------------------------------------------
# 2. 日 / 周
# -----------------------------------------------------------------------------
def test_days_count_calendar_days():
    # 47 小时，但跨了两个日历日
    assert compare(utc(2024, 0, 1, 10), utc(2024, 0, 3, 9), "d") == 2
    assert compare(utc(2024, 0, 3, 9), utc(2024, 0, 1, 10), "d") == -2


def test_weeks_truncate_toward_zero():
    assert compare(utc(2024, 0, 1), utc(2024, 0, 20), "w") == 2
    assert compare(utc(2024, 0, 20), utc(2024, 0, 1), "w") == -2


@pytest.mark.parametrize(
    "a, b, expected",
    [
        # 春季跳时（2024-03-10）
        ((2024, 2, 9, 12), (2024, 2, 10, 12), 1),
        ((2024, 2, 8, 12), (2024, 2, 12, 12), 4),
        ((2024, 2, 10, 12), (2024, 2, 9, 12), -1),
        # 秋季回拨（2024-11-03）
        ((2024, 10, 2, 12), (2024, 10, 4, 12), 2),
        ((2024, 10, 3, 0), (2024, 10, 4, 0), 1),
    ],
)
def test_days_are_not_distorted_by_dst(a, b, expected):
    assert compare(chicago(*a), chicago(*b), "d") == expected


def test_days_when_midnight_falls_in_dst_gap():
    # 圣地亚哥 2024-09-08 00:00 不存在（直接跳到 01:00）
    a = Timestamp.of_local(2024, 8, 7, 12, zone="America/Santiago")
    b = Timestamp.of_local(2024, 8, 8, 12, zone="America/Santiago")
    assert compare(a, b, "d") == 1
    assert compare(b, a, "d") == -1
    assert compare(a, b, "h") == 24


# -----------------------------------------------------------------------------
# 3. 时 / 分 / 秒（由上一级单位递推）
# -----------------------------------------------------------------------------
def test_time_of_day_units_build_on_larger_units():
    a = utc(2024, 0, 1, 10, 30, 0)
    b = utc(2024, 0, 2, 12, 15, 0)
    assert compare(a, b, "h") == 26          # 1 天 × 24 + (12 − 10)
    assert compare(a, b, "M") == 1545        # 25h45m
    assert compare(a, b, "s") == 1545 * 60


def test_seconds_use_second_field():
    a = utc(2024, 0, 1, 10, 0, 50)
    b = utc(2024, 0, 1, 10, 1, 5)
    assert compare(a, b, "s") == 15
    assert compare(b, a, "s") == -15


def test_hours_across_spring_forward_use_local_wall_clock():
    a = chicago(2024, 2, 9, 12)
    b = chicago(2024, 2, 10, 12)
    # 真实只过了 23 小时，但本地挂钟相差 24
    assert compare(a, b, "h") == 24
    assert compare(a, b, "l") == 23 * 3_600_000


# -----------------------------------------------------------------------------
# 4. 月 / 季 / 年
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((2023, 0, 31), (2023, 1, 28), 0),    # 31 日还没“到达”
        ((2023, 0, 15), (2023, 2, 15), 2),
        ((2023, 0, 15), (2023, 2, 14), 1),
        ((2023, 11, 10), (2024, 1, 10), 2),
        ((2023, 2, 15), (2023, 0, 20), -1),   # 反向修正
        ((2023, 2, 15), (2023, 0, 10), -2),
        ((2023, 2, 15), (2023, 2, 1), -1),
    ],
)
def test_months_count_complete_months(a, b, expected):
    assert compare(utc(*a), utc(*b), "m") == expected


def test_quarters_truncate_toward_zero():
    assert compare(utc(2023, 0, 15), utc(2023, 9, 14), "q") == 2
    assert compare(utc(2023, 9, 15), utc(2023, 0, 20), "q") == -2


def test_years_are_plain_field_difference():
    assert compare(utc(2023, 11, 31), utc(2024, 0, 1), "y") == 1
    assert compare(utc(2024, 0, 1), utc(2020, 11, 31), "y") == -4
