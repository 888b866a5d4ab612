#!filepath: datetimekit/core/timestamp.py
from __future__ import annotations

import math
import time
from datetime import date, datetime, timezone, tzinfo
from typing import Optional, Union

from dateutil import parser as date_parser

from datetimekit.core.calendar import (
    MS_PER_MINUTE,
    Fields,
    compose,
    decompose,
    trunc_div,
)
from datetimekit.core.zone import (
    EPOCH,
    ONE_MS,
    ZoneLike,
    gmt_offset_text,
    local_to_utc,
    long_zone_name,
    resolve_zone,
    to_aware,
    utc_offset_ms,
    zone_abbreviation,
)
from datetimekit.utils.errors import CoercionFailure

# 与宿主平台一致的可表示范围：±100,000,000 天
MAX_TIME_VALUE = 8_640_000_000_000_000

SETTABLE_FIELDS = ("year", "month", "day", "hour", "minute", "second", "millisecond")

TimestampLike = Union["Timestamp", datetime, date, int, float, str]


class Timestamp:
    """
    毫秒精度的可变时刻（Clock/Calendar primitive）

    - _value：自 1970-01-01T00:00:00Z 起的毫秒数
    - zone：本地投影使用的时区（构造时解析，None → 进程默认本地时区）

    UTC 字段与本地字段永远是同一时刻的两个投影；
    set_fields 写字段时按宿主规则归一化（溢出进位到更大的单位）。
    """

    __slots__ = ("_value", "zone")

    def __init__(self, value: int = 0, zone: ZoneLike = None):
        self._value = int(value)
        self.zone: tzinfo = resolve_zone(zone)

    # ================================================================
    # 构造
    # ================================================================
    @classmethod
    def of_utc(
        cls,
        year: int,
        month: int = 0,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        zone: ZoneLike = None,
    ) -> "Timestamp":
        """按 UTC 字段构造（month 0-based）"""
        return cls(compose(year, month, day, hour, minute, second, millisecond), zone)

    @classmethod
    def of_local(
        cls,
        year: int,
        month: int = 0,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        zone: ZoneLike = None,
    ) -> "Timestamp":
        """按本地字段构造（month 0-based）"""
        tz_ = resolve_zone(zone)
        local_value = compose(year, month, day, hour, minute, second, millisecond)
        return cls(local_to_utc(local_value, tz_), tz_)

    @classmethod
    def now(cls, zone: ZoneLike = None) -> "Timestamp":
        return cls(time.time_ns() // 1_000_000, zone)

    @classmethod
    def coerce(cls, value: TimestampLike, zone: ZoneLike = None) -> "Timestamp":
        """
        输入可能为：
            Timestamp                     → 原对象（不复制）
            datetime / date               → naive 视为本地时间
            1710507909250                 → 毫秒时间戳
            "2024-03-15T13:05:09Z"        → 宿主解析器
        """
        if isinstance(value, Timestamp):
            return value

        # bool 是 int 的子类，单独拦截
        if isinstance(value, bool):
            raise CoercionFailure(value, "bool is not a time value")

        if isinstance(value, datetime):
            return cls._from_datetime(value, zone)

        if isinstance(value, date):
            return cls.of_local(value.year, value.month - 1, value.day, zone=zone)

        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                raise CoercionFailure(value, "not a finite number")
            if abs(value) > MAX_TIME_VALUE:
                raise CoercionFailure(value, "out of range")
            return cls(int(value), zone)

        if isinstance(value, str):
            return cls._from_string(value, zone)

        raise CoercionFailure(value, f"unsupported type {type(value).__name__}")

    @classmethod
    def _from_datetime(cls, value: datetime, zone: ZoneLike) -> "Timestamp":
        if value.tzinfo is None or value.utcoffset() is None:
            tz_ = resolve_zone(zone)
            local_value = compose(
                value.year, value.month - 1, value.day,
                value.hour, value.minute, value.second, value.microsecond // 1000,
            )
            return cls(local_to_utc(local_value, tz_), tz_)

        return cls((value - EPOCH) // ONE_MS, zone if zone is not None else value.tzinfo)

    @classmethod
    def _from_string(cls, text: str, zone: ZoneLike) -> "Timestamp":
        s = text.strip()
        if not s:
            raise CoercionFailure(text, "empty string")

        try:
            parsed = datetime.fromisoformat(s)
        except ValueError:
            try:
                parsed = date_parser.parse(s)
            except (ValueError, OverflowError) as e:
                raise CoercionFailure(text, str(e)) from e

        return cls._from_datetime(parsed, zone)

    # ================================================================
    # 访问器
    # ================================================================
    @property
    def value(self) -> int:
        return self._value

    def fields(self, utc: bool = False) -> Fields:
        """UTC / 本地字段快照（每次调用重新计算，不缓存）"""
        if utc:
            return decompose(self._value)
        return decompose(self._value + utc_offset_ms(self._value, self.zone))

    def set_fields(self, utc: bool = False, **changes: int) -> "Timestamp":
        """
        写入任意字段子集（year, month, day, hour, minute, second, millisecond）
        其余字段保持当前值；溢出按日历归一化。原地修改并返回 self。
        """
        unknown = set(changes) - set(SETTABLE_FIELDS)
        if unknown:
            raise TypeError(f"unknown fields: {sorted(unknown)}")

        current = self.fields(utc)
        merged = {
            name: int(changes[name]) if name in changes else getattr(current, name)
            for name in SETTABLE_FIELDS
        }
        new_value = compose(**merged)
        self._value = new_value if utc else local_to_utc(new_value, self.zone)
        return self

    def offset(self) -> int:
        """距 UTC 的分钟数，UTC 以西为正（UTC-5 → 300）"""
        return trunc_div(-utc_offset_ms(self._value, self.zone), MS_PER_MINUTE)

    def zone_name(self) -> Optional[str]:
        return long_zone_name(zone_abbreviation(self._value, self.zone), -self.offset())

    def time_string(self) -> str:
        """
        本地时间描述，例如 "13:05:09 GMT-0500 (Central Daylight Time)"
        没有可用时区名称时省略括号部分
        """
        f = self.fields(utc=False)
        text = f"{f.hour:02d}:{f.minute:02d}:{f.second:02d} GMT{gmt_offset_text(-self.offset())}"
        name = self.zone_name()
        if name:
            text += f" ({name})"
        return text

    def to_datetime(self, utc: bool = False) -> datetime:
        if utc:
            return to_aware(self._value, timezone.utc)
        return to_aware(self._value, self.zone)

    def copy(self) -> "Timestamp":
        return Timestamp(self._value, self.zone)

    # ================================================================
    # 便捷方法
    # ================================================================
    def format(self, mask: str = "isoDateTime", use_utc: bool = False) -> str:
        from datetimekit.engines.mask_formatter import format as format_timestamp

        return format_timestamp(self, mask, use_utc)

    def move(self, units: int, part) -> "Timestamp":
        from datetimekit.engines.unit_mover import move

        return move(self, units, part)

    # ================================================================
    # 运算 / 比较
    # ================================================================
    def __int__(self) -> int:
        return self._value

    def __sub__(self, other: "Timestamp") -> int:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._value - other._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Timestamp") -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._value < other._value

    # 可变对象，不可哈希
    __hash__ = None

    def __repr__(self) -> str:
        f = self.fields(utc=True)
        return (
            f"Timestamp({f.year:04d}-{f.month + 1:02d}-{f.day:02d}T"
            f"{f.hour:02d}:{f.minute:02d}:{f.second:02d}.{f.millisecond:03d}Z, zone={self.zone!r})"
        )
