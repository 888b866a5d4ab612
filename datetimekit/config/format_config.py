#!filepath: datetimekit/config/format_config.py
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from datetimekit.core.zone import DEFAULT_ZONE_NAMES
from datetimekit.engines.name_tables import DEFAULT_MONTHS, DEFAULT_WEEKDAYS


class FormatConfig(BaseModel):
    weekdays: List[str] = Field(default_factory=lambda: list(DEFAULT_WEEKDAYS), min_length=7, max_length=7)
    months: List[str] = Field(default_factory=lambda: list(DEFAULT_MONTHS), min_length=12, max_length=12)

    # 追加 / 覆盖的命名 mask（默认 mask 始终存在）
    masks: Dict[str, str] = Field(default_factory=dict)

    # 追加 / 覆盖的时区长名称
    zone_names: Dict[str, str] = Field(default_factory=dict)

    # None → 系统时区
    local_zone: Optional[str] = None

    def merged_zone_names(self) -> Dict[str, str]:
        return {**DEFAULT_ZONE_NAMES, **self.zone_names}
