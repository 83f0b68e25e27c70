"""日志格式化器。

默认格式：

    <时间> [<LEVEL>] <文件>:<行号>:<TAB><消息>

开启颜色时，时间使用青色，级别按级别着色；关闭颜色时结构完全相同但没有转义序列。
调用方也可以提供自定义格式化器（例如输出 JSON），它拿到的是原始 `LogRecord`。
"""

from __future__ import annotations

import abc
from typing import Callable, Union

from .types import LEVEL_COLORS, Color, LogRecord, TimeLayout

LEVEL_WIDTH = 18
LOCATION_WIDTH = 30


class Formatter(abc.ABC):
    """格式化器接口：把一条记录渲染为一行文本（应以换行结尾）。"""

    @abc.abstractmethod
    def format(self, record: LogRecord) -> str:
        """渲染 record。"""


class CallableFormatter(Formatter):
    """把普通函数包装为 Formatter。"""

    def __init__(self, func: Callable[[LogRecord], str]) -> None:
        self.func = func

    def format(self, record: LogRecord) -> str:
        return self.func(record)


FormatterLike = Union[Formatter, Callable[[LogRecord], str]]


def as_formatter(value: FormatterLike | None) -> Formatter | None:
    # 允许直接传入函数，内部统一为 Formatter
    if value is None or isinstance(value, Formatter):
        return value
    if callable(value):
        return CallableFormatter(value)
    raise TypeError("formatter must be a Formatter or a callable")


def _pad_left(visible: str, rendered: str, width: int) -> str:
    # 按可见字符宽度右对齐，避免颜色转义序列影响列宽
    return " " * max(0, width - len(visible)) + rendered


class DefaultFormatter(Formatter):
    """内置格式化器，可选 ANSI 颜色。"""

    def __init__(self, color: bool = False) -> None:
        self.color = color

    def format(self, record: LogRecord) -> str:
        timestamp = record.time.strftime(TimeLayout.DEFAULT) + f".{record.time.microsecond // 1000:03d}"
        level = record.level.value
        location = f"{record.file}:{record.line}:\t"

        if self.color:
            timestamp = Color.CYAN.wrap(timestamp)
            level_token = f" [{LEVEL_COLORS.get(record.level, Color.WHITE).wrap(level)}] "
        else:
            level_token = f" [{level}] "

        return "".join(
            (
                timestamp,
                _pad_left(f" [{level}] ", level_token, LEVEL_WIDTH),
                _pad_left(location, location, LOCATION_WIDTH),
                record.message,
                "\n",
            )
        )


__all__ = [
    "Formatter",
    "CallableFormatter",
    "DefaultFormatter",
    "FormatterLike",
    "as_formatter",
]
