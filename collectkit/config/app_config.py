#!filepath: collectkit/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .collections_config import CollectionsConfig
from .log_config import LogConfig
from collectkit.utils.logger import logs

# 环境变量 → (section, field)
ENV_OVERRIDES = {
    "COLLECTKIT_LOG_LEVEL": ("log", "level"),
    "COLLECTKIT_LOG_DIR": ("log", "dir"),
    "COLLECTKIT_CHUNK_SIZE": ("collections", "chunk_size"),
}


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    collectkit/config/app_config.py → collectkit/config → collectkit → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    collections: CollectionsConfig = CollectionsConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 collectkit/config/base.yml
        - 不依赖当前工作目录
        - COLLECTKIT_* 环境变量覆盖 YAML 中的值
        """
        # 1) 先加载 .env（在项目根目录下，已存在的环境变量优先）
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 环境变量覆盖
        for env_name, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None:
                raw[section] = {**(raw.get(section) or {}), field: value}
                logs.debug(f"[Config] {env_name} overrides {section}.{field}")

        return cls(**raw)
