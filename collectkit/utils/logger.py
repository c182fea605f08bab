#!filepath: collectkit/utils/logger.py
import os
import sys
from contextlib import suppress
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional

_PACKAGE = "collectkit"
_LOGGER_CONFIGURED = False
_SINK_IDS: list = []

# 库默认静默，由调用方 init_logging() 打开
logger.disable(_PACKAGE)


class Logging:
    """
    collectkit 日志模块（loguru 封装）
    ---------------------------------------
    - 默认 disable，不影响宿主应用的 logger
    - configure() 后输出到 stderr，可选按日期切割的文件
    - 支持日志保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

    def configure(self) -> None:
        """
        安装 sink，重复调用时先移除旧 sink（不会叠加）
        """
        global _LOGGER_CONFIGURED

        for sink_id in _SINK_IDS:
            # sink 可能已被外部 logger.remove() 清掉
            with suppress(ValueError):
                logger.remove(sink_id)
        _SINK_IDS.clear()

        _SINK_IDS.append(
            logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                filter=_PACKAGE,
            )
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            _SINK_IDS.append(
                logger.add(
                    sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                    rotation=self.rotation,
                    retention=self.retention,
                    level=self.level,
                    format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                    filter=_PACKAGE,
                    backtrace=True,
                    diagnose=True,
                )
            )

        logger.enable(_PACKAGE)
        _LOGGER_CONFIGURED = True
        logger.info(f"[Logging] configured level={self.level} dir={self.log_dir}")

    @staticmethod
    def is_configured() -> bool:
        return _LOGGER_CONFIGURED

    # ----------- 日志方法 -----------
    # opt(depth=1)：记录调用方位置，而不是本文件
    def debug(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(f"[CALL] {func.__name__} args={args}, kwargs={kwargs}")

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg=None) -> Logging:
    """
    用 LogConfig 重新配置全局 logs 并启用 collectkit 日志
    """
    if cfg is not None:
        logs.log_dir = cfg.dir
        logs.rotation = cfg.rotation
        logs.retention = cfg.retention
        logs.level = cfg.level
    logs.configure()
    return logs


# 默认全局 logs（由 init_logging 配置）
logs = Logging()
