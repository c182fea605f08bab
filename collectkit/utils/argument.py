#!filepath: collectkit/utils/argument.py
from typing import Any, Sized

from collectkit.utils.errors import InvalidArgumentError
from collectkit.utils.logger import logs


class Argument:
    """
    参数前置校验工具：
    - 失败时抛出 InvalidArgumentError（带参数名）
    - 成功时原样返回被校验的值，便于链式写法
    """

    @staticmethod
    def fail(message: str):
        logs.debug(f"[Argument] {message}")
        raise InvalidArgumentError(message)

    @staticmethod
    def not_null(value: Any, name: str) -> Any:
        if value is None:
            Argument.fail(f"Given argument '{name}' may not be None.")
        return value

    @staticmethod
    def not_empty(value: Sized, name: str) -> Sized:
        Argument.not_null(value, name)
        if len(value) == 0:
            Argument.fail(f"Given argument '{name}' may not be empty.")
        return value

    @staticmethod
    def positive(value: int, name: str) -> int:
        # bool 是 int 的子类，这里不接受
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            Argument.fail(f"Given argument '{name}' should be a positive int, got {value!r}.")
        return value

    @staticmethod
    def not_negative(value: int, name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            Argument.fail(f"Given argument '{name}' should be a non-negative int, got {value!r}.")
        return value
