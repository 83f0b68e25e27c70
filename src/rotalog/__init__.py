"""rotalog：异步、可滚动落盘的日志写入器。

特性：
- 调用方线程完成级别过滤与格式化，有界队列提供背压
- 单消费线程按入队顺序输出到控制台、附加输出流与日志文件
- 按时间块或文件大小滚动，滚动出的文件在后台压缩为 zip
- 可选 ANSI 彩色输出与自定义格式化器（例如 JSON）
"""

from .core import (
    Archiver,
    CallableFormatter,
    Color,
    ConfigError,
    DefaultFormatter,
    Formatter,
    LogLevel,
    LogRecord,
    LogWriter,
    Logger,
    QueueClosedError,
    RotalogError,
    WriterClosedError,
    ZipArchiver,
    get_default_writer,
    new_default_writer,
    reset_default_writer,
)
from .config import Settings, WriterConfig, get_settings

__all__ = [
    "Archiver",
    "CallableFormatter",
    "Color",
    "ConfigError",
    "DefaultFormatter",
    "Formatter",
    "LogLevel",
    "LogRecord",
    "LogWriter",
    "Logger",
    "QueueClosedError",
    "RotalogError",
    "WriterClosedError",
    "ZipArchiver",
    "get_default_writer",
    "new_default_writer",
    "reset_default_writer",
    "Settings",
    "WriterConfig",
    "get_settings",
]
