#!filepath: datetimekit/utils/datetime_utils.py
from __future__ import annotations

from typing import Mapping, Optional, Sequence

from datetimekit.core import zone
from datetimekit.core.timestamp import Timestamp, TimestampLike
from datetimekit.core.zone import ZoneLike
from datetimekit.engines import (
    mask_formatter,
    name_tables,
    timezone_introspector,
    unit_comparer,
    unit_mover,
)
from datetimekit.utils.logger import init_logging, logs


class DateTimeUtils:
    """
    datetimekit 的统一入口（全部为 classmethod，无实例状态）
    """

    # ================================================================
    # 🔥 move / compare
    # ================================================================
    @classmethod
    def move(cls, ts: TimestampLike, units: int, part) -> Timestamp:
        """
        ts ± units 个 part 单位（原地修改，返回同一对象）
            part: d w m q y h M s l
        """
        return unit_mover.move(ts, units, part)

    @classmethod
    def compare(cls, date_a: TimestampLike, date_b: TimestampLike, part) -> int:
        """date_a 需要加多少个完整 part 单位才能到达 date_b"""
        return unit_comparer.compare(date_a, date_b, part)

    # ================================================================
    # 🔥 format
    # ================================================================
    @classmethod
    def format(cls, ts: TimestampLike, mask: Optional[str] = None, use_utc: bool = False) -> str:
        return mask_formatter.format(ts, mask, use_utc)

    # ---------------------------------------------------------------
    # DST / 闰年
    # ---------------------------------------------------------------
    @classmethod
    def hours_from_standard(cls, ts: TimestampLike) -> float:
        return timezone_introspector.hours_from_standard(ts)

    @classmethod
    def is_daylight_savings(cls, ts: TimestampLike) -> bool:
        return timezone_introspector.is_daylight_savings(ts)

    @classmethod
    def is_leap_year(cls, year: int) -> bool:
        return timezone_introspector.is_leap_year(year)

    # ---------------------------------------------------------------
    # 解析
    # ---------------------------------------------------------------
    @classmethod
    def parse(cls, value: TimestampLike, zone: ZoneLike = None) -> Timestamp:
        return Timestamp.coerce(value, zone)

    # ---------------------------------------------------------------
    # 进程级配置
    # ---------------------------------------------------------------
    @classmethod
    def set_months(cls, names: Sequence[str]) -> None:
        name_tables.set_months(names)

    @classmethod
    def set_weekdays(cls, names: Sequence[str]) -> None:
        name_tables.set_weekdays(names)

    @classmethod
    def set_mask(cls, name: str, template: str) -> None:
        name_tables.set_mask(name, template)

    @classmethod
    def set_zone_names(cls, names: Mapping[str, str]) -> None:
        zone.set_zone_names(names)

    @classmethod
    def set_local_zone(cls, tz_: ZoneLike) -> None:
        zone.set_local_zone(tz_)

    @classmethod
    def configure(cls, cfg) -> None:
        """
        应用 AppConfig：logger + 名称表 + mask + 时区
        名称表先恢复默认再覆盖，重复 configure 结果一致
        """
        init_logging(cfg.log)

        name_tables.reset_tables()
        name_tables.set_weekdays(cfg.format.weekdays)
        name_tables.set_months(cfg.format.months)
        name_tables.set_masks(cfg.format.masks)
        zone.set_zone_names(cfg.format.merged_zone_names())
        zone.set_local_zone(cfg.format.local_zone)

        logs.info(
            f"[DateTimeUtils] configured: masks={len(name_tables.masks)} "
            f"local_zone={cfg.format.local_zone or 'system'}"
        )
