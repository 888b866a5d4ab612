#!filepath: datetimekit/engines/name_tables.py
"""
进程级格式化配置：weekday / month 名称表 + 命名 mask

- 替换是“整体重新绑定”，读者每次调用只取一次引用
- 不做任何同步：并发写入需要调用方自己保证单写多读
"""
from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple

from datetimekit.core import zone
from datetimekit.utils.errors import InvalidNameTable
from datetimekit.utils.logger import logs

DEFAULT_WEEKDAYS: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

DEFAULT_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DEFAULT_MASKS: Dict[str, str] = {
    "shortDate": "m/d/yy",
    "mediumDate": "mmm d, yyyy",
    "longDate": "mmmm d, yyyy",
    "fullDate": "dddd, mmmm d, yyyy",
    "shortTime": "h:MMt",
    "mediumTime": "h:MM:ss TT",
    "longTime": "h:MM:ss TT Z",
    "isoDate": "yyyy-mm-dd",
    "isoTime": "HH:MM:ss",
    "isoDateTime": 'yyyy-mm-dd"T"HH:MM:ss',
}

weekdays: Tuple[str, ...] = DEFAULT_WEEKDAYS
months: Tuple[str, ...] = DEFAULT_MONTHS
masks: Dict[str, str] = dict(DEFAULT_MASKS)


def _as_names(names: Sequence[str], expected: int, kind: str) -> Tuple[str, ...]:
    if isinstance(names, str):
        raise InvalidNameTable(f"{kind} names must be a sequence of strings, got a single string")
    table = tuple(str(n) for n in names)
    if len(table) != expected:
        raise InvalidNameTable(f"{kind} names must have {expected} entries, got {len(table)}")
    return table


def set_weekdays(names: Sequence[str]) -> None:
    """替换 weekday 名称（7 个，index 0 = Sunday）"""
    global weekdays
    weekdays = _as_names(names, 7, "weekday")
    logs.debug(f"[NameTables] weekdays -> {weekdays}")


def set_months(names: Sequence[str]) -> None:
    """替换 month 名称（12 个，index 0 = January）"""
    global months
    months = _as_names(names, 12, "month")
    logs.debug(f"[NameTables] months -> {months}")


def set_mask(name: str, template: str) -> None:
    """注册 / 覆盖命名 mask"""
    masks[name] = template
    logs.debug(f"[MaskRegistry] {name} -> {template!r}")


def set_masks(mapping: Mapping[str, str]) -> None:
    for name, template in mapping.items():
        set_mask(name, template)


def resolve_mask(mask: str) -> str:
    return masks.get(mask, mask)


def reset_tables() -> None:
    """恢复默认名称表 / mask / 时区名称"""
    global weekdays, months, masks
    weekdays = DEFAULT_WEEKDAYS
    months = DEFAULT_MONTHS
    masks = dict(DEFAULT_MASKS)
    zone.reset_zone_names()
