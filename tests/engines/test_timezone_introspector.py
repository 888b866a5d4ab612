#!filepath: tests/engines/test_timezone_introspector.py
from __future__ import annotations

import pytest

from datetimekit.core.timestamp import Timestamp
from datetimekit.engines.timezone_introspector import (
    hours_from_standard,
    is_daylight_savings,
    is_leap_year,
)

CHICAGO = "America/Chicago"
SYDNEY = "Australia/Sydney"


# -----------------------------------------------------------------------------
# 1. 北半球
# -----------------------------------------------------------------------------
def test_summer_in_chicago_is_one_hour_ahead():
    ts = Timestamp.of_local(2024, 6, 4, 12, zone=CHICAGO)
    assert hours_from_standard(ts) == 1
    assert is_daylight_savings(ts) is True


def test_winter_in_chicago_is_standard():
    ts = Timestamp.of_local(2024, 0, 15, 12, zone=CHICAGO)
    assert hours_from_standard(ts) == 0
    assert is_daylight_savings(ts) is False


# -----------------------------------------------------------------------------
# 2. 南半球：DST 在 1 月
# -----------------------------------------------------------------------------
def test_january_in_sydney_is_daylight_savings():
    ts = Timestamp.of_local(2024, 0, 15, 12, zone=SYDNEY)
    assert hours_from_standard(ts) == 1
    assert is_daylight_savings(ts) is True


def test_july_in_sydney_is_standard():
    ts = Timestamp.of_local(2024, 6, 15, 12, zone=SYDNEY)
    assert hours_from_standard(ts) == 0
    assert is_daylight_savings(ts) is False


# -----------------------------------------------------------------------------
# 3. 无 DST 的时区
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("zone", ["UTC", "Asia/Tokyo"])
def test_zones_without_dst(zone):
    for month in (0, 6):
        ts = Timestamp.of_local(2024, month, 15, zone=zone)
        assert hours_from_standard(ts) == 0
        assert is_daylight_savings(ts) is False


def test_fixed_offset_string_is_never_dst():
    assert is_daylight_savings("2024-07-04T12:00:00-05:00") is False


# -----------------------------------------------------------------------------
# 4. 闰年
# -----------------------------------------------------------------------------
@pytest.mark.parametrize(
    "year, expected",
    [
        (2000, True), (1900, False), (2024, True), (2023, False),
        (1600, True), (2100, False), (0, True), (-4, True), (1, False),
    ],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected
