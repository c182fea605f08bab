#!filepath: collectkit/config/__init__.py
from .app_config import AppConfig
from .collections_config import CollectionsConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "CollectionsConfig", "LogConfig"]
