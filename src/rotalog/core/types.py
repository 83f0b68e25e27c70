"""日志数据模型。

- `LogLevel`：有序的日志级别（TRACE < DEBUG < INFO < WARN < ERROR）
- `Color`：终端 ANSI 颜色
- `TimeLayout`：时间格式常量
- `LogRecord`：一次日志调用产生的不可变记录
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

RESET = "\033[0m"


class LogLevel(str, Enum):
    """日志级别枚举，按 `num` 排序。"""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def num(self) -> int:
        return _LEVEL_NUMS[self]

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """把字符串（大小写不敏感）解析为 LogLevel，WARNING 视为 WARN 的别名。"""
        if isinstance(value, LogLevel):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            from .errors import ConfigError

            raise ConfigError(f"unknown log level: {value!r}") from None


_LEVEL_NUMS = {
    LogLevel.TRACE: 1,
    LogLevel.DEBUG: 2,
    LogLevel.INFO: 3,
    LogLevel.WARN: 4,
    LogLevel.ERROR: 5,
}


class Color(str, Enum):
    """ANSI 颜色转义序列。"""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    def wrap(self, text: str) -> str:
        """给 text 着色，并在结尾复位，不影响后续文本。"""
        return f"{self.value}{text}{RESET}"


LEVEL_COLORS = {
    LogLevel.TRACE: Color.BLUE,
    LogLevel.DEBUG: Color.MAGENTA,
    LogLevel.INFO: Color.GREEN,
    LogLevel.WARN: Color.YELLOW,
    LogLevel.ERROR: Color.RED,
}


class TimeLayout:
    """strftime 格式常量。"""

    # 记录时间戳，毫秒部分由格式化器补齐
    DEFAULT = "%Y-%m-%d %H:%M:%S"
    # 时间块标识，例如 202302281655
    BLOCK = "%Y%m%d%H%M"


class LogRecord(BaseModel):
    """一条日志记录。构造后不可变。"""

    model_config = ConfigDict(frozen=True)

    time: datetime = Field(default_factory=datetime.now)
    level: LogLevel
    file: str = Field(..., description="调用方源文件（可能已缩短为文件名）")
    line: int = Field(..., ge=0, description="调用方行号")
    message: str


__all__ = ["RESET", "LogLevel", "Color", "LEVEL_COLORS", "TimeLayout", "LogRecord"]
