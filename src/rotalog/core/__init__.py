"""rotalog.core 包：写入管线。"""

from .archive import Archiver, ZipArchiver
from .base import Logger
from .channel import CLOSED, BoundedChannel
from .compression import CompressionWorker
from .errors import ConfigError, QueueClosedError, RotalogError, WriterClosedError
from .files import FileHandleManager
from .filtering import should_emit
from .formatter import CallableFormatter, DefaultFormatter, Formatter, as_formatter
from .rotation import (
    FileState,
    RotationPolicy,
    SizeRotation,
    TimeRotation,
    build_rotation_policy,
    parse_duration,
    time_block,
)
from .types import Color, LogLevel, LogRecord, TimeLayout
from .writer import LogWriter
from .default import get_default_writer, new_default_writer, reset_default_writer

__all__ = [
    "Archiver",
    "ZipArchiver",
    "Logger",
    "CLOSED",
    "BoundedChannel",
    "CompressionWorker",
    "ConfigError",
    "QueueClosedError",
    "RotalogError",
    "WriterClosedError",
    "FileHandleManager",
    "should_emit",
    "CallableFormatter",
    "DefaultFormatter",
    "Formatter",
    "as_formatter",
    "FileState",
    "RotationPolicy",
    "SizeRotation",
    "TimeRotation",
    "build_rotation_policy",
    "parse_duration",
    "time_block",
    "Color",
    "LogLevel",
    "LogRecord",
    "TimeLayout",
    "LogWriter",
    "get_default_writer",
    "new_default_writer",
    "reset_default_writer",
]
