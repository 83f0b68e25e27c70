"""日志器接口（抽象基类）。"""

from __future__ import annotations

import abc
from typing import Any, Optional

from .formatter import FormatterLike
from .types import LogLevel


class Logger(abc.ABC):
    """日志器的抽象接口。

    最小合同：
    - trace/debug/info/warn/error(message, *args, **kwargs) 从不向调用方抛出异常
    - 运行期可修改级别、输出流、格式化器与开关
    - destroy() 排空缓冲后释放资源，只能调用一次
    """

    @abc.abstractmethod
    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Trace 级别日志。"""

    @abc.abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Debug 级别日志。"""

    @abc.abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Info 级别日志。"""

    @abc.abstractmethod
    def warn(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Warn 级别日志。"""

    @abc.abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Error 级别日志。"""

    @abc.abstractmethod
    def set_level(self, level: LogLevel | str) -> None:
        """设置最低日志级别。"""

    @abc.abstractmethod
    def set_sink(self, sink: Optional[Any]) -> None:
        """设置附加输出流（文件、网络连接等可写对象）。"""

    @abc.abstractmethod
    def set_formatter(self, formatter: Optional[FormatterLike]) -> None:
        """设置自定义格式化器，None 表示恢复默认格式。"""

    @abc.abstractmethod
    def set_short_path(self, enabled: bool) -> None:
        """是否只记录调用方的文件名。"""

    @abc.abstractmethod
    def set_console(self, enabled: bool) -> None:
        """是否输出到控制台。"""

    @abc.abstractmethod
    def set_color(self, enabled: bool) -> None:
        """是否使用彩色输出。"""

    @abc.abstractmethod
    def destroy(self) -> None:
        """销毁。"""


__all__ = ["Logger"]
