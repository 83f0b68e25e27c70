"""rotalog 的异常类型。"""

from __future__ import annotations


class RotalogError(Exception):
    """rotalog 通用错误类型。"""


class ConfigError(RotalogError, ValueError):
    """配置非法（例如无法解析的时长字符串），写入器无法构建。"""


class QueueClosedError(RotalogError):
    """向已关闭的通道投递，或重复关闭通道。"""


class WriterClosedError(RotalogError):
    """写入器已经销毁。"""


__all__ = ["RotalogError", "ConfigError", "QueueClosedError", "WriterClosedError"]
