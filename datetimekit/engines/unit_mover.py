#!filepath: datetimekit/engines/unit_mover.py
from __future__ import annotations

from typing import Callable, Dict

from datetimekit.core.timestamp import Timestamp, TimestampLike
from datetimekit.core.units import UnitCode
from datetimekit.utils.logger import logs


def _shift(field: str, factor: int = 1) -> Callable[[Timestamp, int], None]:
    def mover(ts: Timestamp, units: int) -> None:
        current = getattr(ts.fields(utc=True), field)
        ts.set_fields(utc=True, **{field: current + units * factor})

    return mover


class UnitMover:
    """
    UnitMover：timestamp ± N 个单位

    - 原地修改并返回同一个 Timestamp（非 Timestamp 输入先 coerce，修改的是 coerce 结果）
    - 只使用 UTC 字段：与本地时区 / DST 无关
    - 日历溢出（1/31 + 1 月 → 3/2 或 3/3）按 set_fields 的归一化规则处理
    """

    MOVERS: Dict[UnitCode, Callable[[Timestamp, int], None]] = {
        UnitCode.DAY: _shift("day"),
        UnitCode.WEEK: _shift("day", 7),
        UnitCode.MONTH: _shift("month"),
        UnitCode.QUARTER: _shift("month", 3),
        UnitCode.YEAR: _shift("year"),
        UnitCode.HOUR: _shift("hour"),
        UnitCode.MINUTE: _shift("minute"),
        UnitCode.SECOND: _shift("second"),
        UnitCode.MILLISECOND: _shift("millisecond"),
    }

    def move(self, timestamp: TimestampLike, units: int, part) -> Timestamp:
        code = UnitCode.of(part)
        ts = Timestamp.coerce(timestamp)

        # 宿主 setter 对非整数做向零截断
        units = int(units)

        logs.debug(f"[UnitMover] {ts!r} {units:+d}{code.value}")
        self.MOVERS[code](ts, units)
        return ts


_mover = UnitMover()


def move(timestamp: TimestampLike, units: int, part) -> Timestamp:
    return _mover.move(timestamp, units, part)
