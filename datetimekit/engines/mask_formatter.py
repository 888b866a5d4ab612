#!filepath: datetimekit/engines/mask_formatter.py
"""
MaskFormatter：按 mask 把 Timestamp 渲染成字符串

mask 字符：
    dddd  完整 weekday 名称          ddd  前 3 个字符
    dd    补零 day-of-month          d    day-of-month
    r     day-of-month 序数后缀（st, nd, rd, th）
    mmmm  完整 month 名称            mmm  前 3 个字符
    mm    补零 month                 m    month（1-12）
    yyyy  年份，至少 4 位            yy   年份后 2 位
    hh/h  12 小时制（补零 / 不补零）  HH/H 24 小时制
    MM/M  分钟                       ss/s 秒
    L     3 位补零毫秒               l    毫秒
    t/tt  a / am                     T/TT A / AM
    z     短时区名（"Central"）      zz   长时区名（"Central Daylight Time"）
    Z     时区缩写（"CDT"）

单引号 / 双引号包起来的内容原样输出（去掉引号），其它字符原样输出。
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Dict, Mapping, Optional, Tuple

from datetimekit.core.calendar import Fields
from datetimekit.core.timestamp import Timestamp, TimestampLike
from datetimekit.engines import name_tables
from datetimekit.utils.logger import logs

DEFAULT_MASK = "isoDateTime"

MASK_PATTERN = re.compile(r"""d{1,4}|m{1,4}|yy(?:yy)?|([HhMsTtz])\1?|[LlrZ]|"([^"]*)"|'([^']*)'""")
ZONE_PATTERN = re.compile(r"[^(]+(?=\))")
ACRONYM_PATTERN = re.compile(r"\b\w")

SUFFIXES = ("th", "st", "nd", "rd")


def pad(value: int, length: int = 2) -> str:
    """补零到最小宽度（不截断），负号不计入宽度"""
    sign = "-" if value < 0 else ""
    return sign + str(abs(value)).rjust(length, "0")


@dataclass(frozen=True)
class RenderContext:
    """单次 format 调用的输入快照（字段 + 名称表），不跨调用共享"""
    timestamp: Timestamp
    fields: Fields
    weekdays: Tuple[str, ...]
    months: Tuple[str, ...]

    @property
    def is_am(self) -> bool:
        return self.fields.hour < 12

    @property
    def hour12(self) -> int:
        return self.fields.hour % 12 or 12

    @cached_property
    def time_zone(self) -> str:
        found = ZONE_PATTERN.search(self.timestamp.time_string())
        if found is None:
            logs.debug(f"[MaskFormatter] no zone name for {self.timestamp!r}")
            return ""
        return found.group(0)


Renderer = Callable[[RenderContext], str]


def _zone_acronym(name: str) -> str:
    # 表外的缩写原样作为名称（"IST"），不再取首字母
    if " " not in name:
        return name
    return "".join(ACRONYM_PATTERN.findall(name))


def _ordinal_suffix(day: int) -> str:
    mod10 = day % 10
    if mod10 > 3 or day % 100 - mod10 == 10:
        return SUFFIXES[0]
    return SUFFIXES[mod10]


DEFAULT_RENDERERS: Dict[str, Renderer] = {
    "d": lambda c: str(c.fields.day),
    "dd": lambda c: pad(c.fields.day),
    "ddd": lambda c: c.weekdays[c.fields.weekday][:3],
    "dddd": lambda c: c.weekdays[c.fields.weekday],
    "m": lambda c: str(c.fields.month + 1),
    "mm": lambda c: pad(c.fields.month + 1),
    "mmm": lambda c: c.months[c.fields.month][:3],
    "mmmm": lambda c: c.months[c.fields.month],
    "yy": lambda c: pad(abs(c.fields.year) % 100),
    "yyyy": lambda c: pad(c.fields.year, 4),
    "h": lambda c: str(c.hour12),
    "hh": lambda c: pad(c.hour12),
    "H": lambda c: str(c.fields.hour),
    "HH": lambda c: pad(c.fields.hour),
    "M": lambda c: str(c.fields.minute),
    "MM": lambda c: pad(c.fields.minute),
    "s": lambda c: str(c.fields.second),
    "ss": lambda c: pad(c.fields.second),
    "l": lambda c: str(c.fields.millisecond),
    "L": lambda c: pad(c.fields.millisecond, 3),
    "t": lambda c: "a" if c.is_am else "p",
    "tt": lambda c: "am" if c.is_am else "pm",
    "T": lambda c: "A" if c.is_am else "P",
    "TT": lambda c: "AM" if c.is_am else "PM",
    "z": lambda c: c.time_zone.split(" ")[0],
    "zz": lambda c: c.time_zone,
    "Z": lambda c: _zone_acronym(c.time_zone),
    "r": lambda c: _ordinal_suffix(c.fields.day),
}


class MaskFormatter:
    """
    输入：
      - timestamp（或可 coerce 的值）
      - mask：命名 mask 或字面模板
      - use_utc：选择 UTC / 本地字段（每次调用独立计算）

    输出：
      - 完整渲染的字符串；coerce 失败直接抛出，不会输出一半
    """

    def __init__(self, renderers: Optional[Mapping[str, Renderer]] = None):
        self.renderers: Dict[str, Renderer] = dict(DEFAULT_RENDERERS if renderers is None else renderers)

    def format(self, timestamp: TimestampLike, mask: Optional[str] = None, use_utc: bool = False) -> str:
        ts = Timestamp.coerce(timestamp)
        template = name_tables.resolve_mask(DEFAULT_MASK if mask is None else mask)

        ctx = RenderContext(
            timestamp=ts,
            fields=ts.fields(utc=bool(use_utc)),
            weekdays=name_tables.weekdays,
            months=name_tables.months,
        )
        logs.debug(f"[MaskFormatter] mask={mask!r} template={template!r} utc={bool(use_utc)}")

        return MASK_PATTERN.sub(lambda match: self._render(match, ctx), template)

    def _render(self, match: re.Match, ctx: RenderContext) -> str:
        token = match.group(0)
        renderer = self.renderers.get(token)
        if renderer is not None:
            return renderer(ctx)

        double_quoted, single_quoted = match.group(2), match.group(3)
        if double_quoted is not None:
            return double_quoted
        if single_quoted is not None:
            return single_quoted
        return token


_formatter = MaskFormatter()


def format(timestamp: TimestampLike, mask: Optional[str] = None, use_utc: bool = False) -> str:
    return _formatter.format(timestamp, mask, use_utc)
