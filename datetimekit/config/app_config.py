#!filepath: datetimekit/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .format_config import FormatConfig
from .log_config import LogConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    datetimekit/config/app_config.py → datetimekit/config → datetimekit → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    format: FormatConfig = Field(default_factory=FormatConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 路径优先级：参数 > $DATETIMEKIT_CONFIG > 包内 config/base.yml
        - 环境变量 DATETIMEKIT_LOG_LEVEL / DATETIMEKIT_LOCAL_ZONE 覆盖 YAML
        """
        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = os.getenv("DATETIMEKIT_CONFIG") or default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        # 4) 从 env 注入覆盖项
        level = os.getenv("DATETIMEKIT_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        local_zone = os.getenv("DATETIMEKIT_LOCAL_ZONE")
        if local_zone:
            raw.setdefault("format", {})["local_zone"] = local_zone

        return cls(**raw)
