"""进程级默认写入器。

`new_default_writer()` 每次调用都会创建一个新实例；`get_default_writer()` 返回进程内唯一的
实例，首次调用时按 Settings 惰性创建，多线程下只创建一次。
"""

from __future__ import annotations

import atexit
import threading
from typing import Optional

from .writer import LogWriter

_DEFAULT: Optional[LogWriter] = None
_DEFAULT_LOCK = threading.Lock()


def new_default_writer() -> LogWriter:
    """按默认配置创建写入器：INFO 级别、短路径、控制台彩色输出、不落盘。"""
    return LogWriter()


def get_default_writer() -> LogWriter:
    """返回进程级默认写入器（按需从 Settings 创建）。"""
    global _DEFAULT
    if _DEFAULT is None:
        with _DEFAULT_LOCK:
            if _DEFAULT is None:
                # 延迟导入以避免循环依赖
                from rotalog.config.log import build_writer_from_settings

                _DEFAULT = build_writer_from_settings()
    return _DEFAULT


def reset_default_writer() -> None:
    """销毁默认写入器，下次 get_default_writer() 会重新创建。"""
    global _DEFAULT
    with _DEFAULT_LOCK:
        writer, _DEFAULT = _DEFAULT, None
    if writer is not None and not writer.closed:
        writer.destroy()


atexit.register(reset_default_writer)

__all__ = ["new_default_writer", "get_default_writer", "reset_default_writer"]
