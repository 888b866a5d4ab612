# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from datetimekit.core import zone
from datetimekit.core.timestamp import Timestamp
from datetimekit.engines import name_tables

CHICAGO = "America/Chicago"
SYDNEY = "Australia/Sydney"


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def reset_process_tables():
    """名称表 / mask / 本地时区是进程级状态，每个测试前后都恢复默认"""
    name_tables.reset_tables()
    zone.set_local_zone(None)
    yield
    name_tables.reset_tables()
    zone.set_local_zone(None)


@pytest.fixture
def sample_ts() -> Timestamp:
    """2024-03-15T13:05:09.250Z（星期五）"""
    return Timestamp.of_utc(2024, 2, 15, 13, 5, 9, 250, zone="UTC")


@pytest.fixture
def chicago_ts() -> Timestamp:
    """同一时刻，本地为 America/Chicago（CDT，08:05:09）"""
    return Timestamp.of_utc(2024, 2, 15, 13, 5, 9, 250, zone=CHICAGO)
