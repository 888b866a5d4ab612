#!filepath: datetimekit/config/__init__.py

from .app_config import AppConfig
from .format_config import FormatConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "FormatConfig", "LogConfig"]
