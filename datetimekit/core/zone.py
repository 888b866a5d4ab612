#!filepath: datetimekit/core/zone.py
"""
本地时区 provider（dateutil.tz）

- 默认本地时区：dateutil.tz.tzlocal()（系统时区，带 DST 规则）
- 命名时区：dateutil.tz.gettz(name)，找不到系统 zoneinfo 时使用 dateutil 自带数据
- ZoneNames：缩写 → 长名称（"CDT" → "Central Daylight Time"），进程级可替换
  同一缩写被多个时区共用时（"CST" 美国中部 / 中国），用 "缩写±HHMM" 作为键区分，
  查找时先按带偏移的键，再按纯缩写
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, Mapping, Optional, Union

from dateutil import tz

from datetimekit.core.calendar import MS_PER_DAY, compose
from datetimekit.utils.errors import InvalidTimeZone

ZoneLike = Union[str, tzinfo, None]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
EPOCH_NAIVE = datetime(1970, 1, 1)
ONE_MS = timedelta(milliseconds=1)

# datetime 只覆盖 1..9999 年，超出范围时按边界年份取偏移
_MIN_MS = compose(1, 0, 2)
_MAX_MS = compose(9999, 11, 30)

_SYSTEM_ZONE = tz.tzlocal()

DEFAULT_ZONE_NAMES: Dict[str, str] = {
    "UTC": "Coordinated Universal Time",
    "GMT": "Greenwich Mean Time",
    "EST": "Eastern Standard Time",
    "EDT": "Eastern Daylight Time",
    "CST": "Central Standard Time",
    "CDT": "Central Daylight Time",
    "CST+0800": "China Standard Time",
    "CST-0500": "Cuba Standard Time",
    "CDT-0400": "Cuba Daylight Time",
    "AST": "Atlantic Standard Time",
    "ADT": "Atlantic Daylight Time",
    "NST": "Newfoundland Standard Time",
    "NDT": "Newfoundland Daylight Time",
    "MST": "Mountain Standard Time",
    "MDT": "Mountain Daylight Time",
    "PST": "Pacific Standard Time",
    "PDT": "Pacific Daylight Time",
    "AKST": "Alaska Standard Time",
    "AKDT": "Alaska Daylight Time",
    "HST": "Hawaii Standard Time",
    "HDT": "Hawaii-Aleutian Daylight Time",
    "BST": "British Summer Time",
    "IST+0100": "Irish Standard Time",
    "WET": "Western European Standard Time",
    "WEST": "Western European Summer Time",
    "CET": "Central European Standard Time",
    "CEST": "Central European Summer Time",
    "EET": "Eastern European Standard Time",
    "EEST": "Eastern European Summer Time",
    "MSK": "Moscow Standard Time",
    "SAST": "South Africa Standard Time",
    "IST+0200": "Israel Standard Time",
    "IDT+0300": "Israel Daylight Time",
    "PKT": "Pakistan Standard Time",
    "IST+0530": "India Standard Time",
    "WIB": "Western Indonesia Time",
    "SGT": "Singapore Standard Time",
    "HKT": "Hong Kong Standard Time",
    "PST+0800": "Philippine Standard Time",
    "JST": "Japan Standard Time",
    "KST": "Korean Standard Time",
    "AWST": "Australian Western Standard Time",
    "ACST": "Australian Central Standard Time",
    "ACDT": "Australian Central Daylight Time",
    "AEST": "Australian Eastern Standard Time",
    "AEDT": "Australian Eastern Daylight Time",
    "NZST": "New Zealand Standard Time",
    "NZDT": "New Zealand Daylight Time",
}

# 进程级配置（整体替换，不做同步）
zone_names: Dict[str, str] = dict(DEFAULT_ZONE_NAMES)
_local_zone: Optional[tzinfo] = None


# ================================================================
# 时区解析 / 本地时区配置
# ================================================================
def resolve_zone(zone: ZoneLike) -> tzinfo:
    if zone is None:
        return local_zone()
    if isinstance(zone, tzinfo):
        return zone
    if isinstance(zone, str) and zone.strip():
        # gettz("") 会返回本地时区，所以空串在上面就被排除
        found = tz.gettz(zone.strip())
        if found is not None:
            return found
    raise InvalidTimeZone(zone)


def local_zone() -> tzinfo:
    return _local_zone if _local_zone is not None else _SYSTEM_ZONE


def set_local_zone(zone: ZoneLike) -> None:
    """设置进程级默认本地时区；None 恢复系统时区"""
    global _local_zone
    _local_zone = None if zone is None else resolve_zone(zone)


def set_zone_names(names: Mapping[str, str]) -> None:
    global zone_names
    zone_names = dict(names)


def reset_zone_names() -> None:
    global zone_names
    zone_names = dict(DEFAULT_ZONE_NAMES)


# ================================================================
# UTC ↔ 本地 换算
# ================================================================
def _clamp(value: int) -> int:
    return min(max(value, _MIN_MS), _MAX_MS)


def to_aware(value: int, zone: tzinfo) -> datetime:
    return (EPOCH + timedelta(milliseconds=_clamp(value))).astimezone(zone)


def utc_offset_ms(value: int, zone: tzinfo) -> int:
    """本地时间 − UTC（毫秒，东正西负）"""
    return to_aware(value, zone).utcoffset() // ONE_MS


def local_to_utc(local_value: int, zone: tzinfo) -> int:
    """
    把“当作 UTC 计算出来的本地字段毫秒值”换算回真实 UTC 毫秒值。
    不存在的本地时间（春季跳时）按跳变前的偏移解释（02:30 → 03:30 夏令时），
    重复的本地时间取第一次出现。
    """
    naive = EPOCH_NAIVE + timedelta(milliseconds=_clamp(local_value))
    aware = naive.replace(tzinfo=zone)
    if tz.datetime_exists(aware):
        offset = aware.utcoffset() // ONE_MS
    else:
        # 跳变不会在一天之内发生两次，往前一天就是跳变前的偏移
        offset = utc_offset_ms(local_value - MS_PER_DAY, zone)
    return local_value - offset


def zone_abbreviation(value: int, zone: tzinfo) -> Optional[str]:
    return to_aware(value, zone).tzname()


def gmt_offset_text(minutes_east: int) -> str:
    """+480 → "+0800"，-300 → "-0500" """
    sign = "+" if minutes_east >= 0 else "-"
    hh, mm = divmod(abs(minutes_east), 60)
    return f"{sign}{hh:02d}{mm:02d}"


def long_zone_name(abbreviation: Optional[str], minutes_east: Optional[int] = None) -> Optional[str]:
    """
    缩写 → 长名称
    - 表中有 "缩写±HHMM"：返回它（"CST+0800" → China Standard Time）
    - 表中有纯缩写：返回长名称
    - 纯字母缩写但表中没有：原样返回
    - 数字偏移（"+03"）或空：None
    """
    if not abbreviation:
        return None
    names = zone_names
    if minutes_east is not None:
        qualified = abbreviation + gmt_offset_text(minutes_east)
        if qualified in names:
            return names[qualified]
    if abbreviation in names:
        return names[abbreviation]
    if abbreviation.isalpha():
        return abbreviation
    return None
