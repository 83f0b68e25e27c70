"""异步日志写入器。

数据流：

    调用方 -> 级别过滤 -> 格式化 -> 有界队列（满则阻塞调用方）-> 消费线程
        -> 控制台 / 附加输出流 / 滚动文件
        -> 滚动出的旧文件 -> 压缩线程 -> `<文件>.zip`

- 格式化在调用方线程完成，队列中只传递渲染好的文本
- 只有一个消费线程，所有记录按入队顺序落盘，文件句柄与计数器无需加锁
- 可变配置（级别、开关、格式化器、输出流）由一把读写锁保护
"""

from __future__ import annotations

import os
import sys
import threading
import time
from datetime import datetime
from typing import Any, Optional

from ..config.writer_config import WriterConfig
from ..utils.log import diag
from ..utils.sync import ReadWriteLock
from .archive import Archiver
from .base import Logger
from .channel import BoundedChannel
from .compression import CompressionWorker
from .errors import QueueClosedError, WriterClosedError
from .files import FileHandleManager
from .filtering import should_emit
from .formatter import DefaultFormatter, Formatter, FormatterLike, as_formatter
from .rotation import Clock, build_rotation_policy
from .types import LogLevel, LogRecord


class LogWriter(Logger):
    """带缓冲、可滚动落盘的日志写入器。

    Examples:
        >>> log = LogWriter(WriterConfig(level="DEBUG", log_dir="./logs", log_name="app.log"))
        >>> log.info("我的名字叫{},我今年{}岁了", "二狗子", 18)
        >>> log.destroy()
    """

    def __init__(
        self,
        config: Optional[WriterConfig] = None,
        *,
        archiver: Optional[Archiver] = None,
        clock: Clock = time.time,
        **overrides: Any,
    ) -> None:
        if config is None:
            config = WriterConfig(**overrides)
        elif overrides:
            fields = {name: getattr(config, name) for name in WriterConfig.model_fields}
            config = WriterConfig(**{**fields, **overrides})

        self.config = config
        self._lock = ReadWriteLock()
        self._level = config.level
        self._short_path = config.short_path
        self._console = config.console
        self._color = config.color
        self._sink = config.sink
        self._formatter: Optional[Formatter] = config.formatter
        self._closed = False

        self._queue: BoundedChannel[str] = BoundedChannel(config.queue_size)

        # 滚动方式在这里一次性确定
        self._compressor: Optional[CompressionWorker] = None
        self._files: Optional[FileHandleManager] = None
        if config.file_enabled:
            policy = build_rotation_policy(
                config.rotation_mode, config.roll_by_time, config.roll_by_size, clock=clock
            )
            if policy.enabled:
                self._compressor = CompressionWorker(
                    config.compress_queue_size, archiver=archiver
                ).start()
            self._files = FileHandleManager(
                config.log_dir or "",
                config.log_name or "",
                policy,
                on_rotated=self._compressor.submit if self._compressor else None,
            )

        self._consumer = threading.Thread(target=self._consume, name="rotalog-consumer", daemon=True)
        self._consumer.start()

    # ------------------------------------------------------------------
    # 发射接口
    # ------------------------------------------------------------------

    def trace(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.TRACE, message, args, kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, args, kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, args, kwargs)

    def warn(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.WARN, message, args, kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.WARN, message, args, kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, args, kwargs)

    def is_enabled_for(self, level: LogLevel | str) -> bool:
        with self._lock.read():
            return not self._closed and should_emit(self._level, LogLevel.parse(level))

    def _log(self, level: LogLevel, message: str, args: tuple, kwargs: dict) -> None:
        with self._lock.read():
            if self._closed or not should_emit(self._level, level):
                return
            short_path = self._short_path
            formatter = self._formatter or DefaultFormatter(color=self._color)

        # 调用栈：调用方 -> info() -> _log()
        frame = sys._getframe(2)
        filename = frame.f_code.co_filename
        record = LogRecord(
            time=datetime.now(),
            level=level,
            file=os.path.basename(filename) if short_path else filename,
            line=frame.f_lineno,
            message=_interpolate(message, args, kwargs),
        )
        del frame

        try:
            line = formatter.format(record)
        except Exception as exc:
            diag.error("format record failed, err: {}\tmessage: {}", exc, record.message)
            return

        self.submit(line)

    def submit(self, line: str) -> None:
        """把渲染好的一行放入队列，队列满时阻塞（背压）。

        写入器已关闭时丢弃该行并报告到诊断输出。
        """
        try:
            self._queue.put(line)
        except QueueClosedError:
            diag.warning("writer closed, record dropped: {}", line.rstrip("\n"))

    # ------------------------------------------------------------------
    # 运行期配置
    # ------------------------------------------------------------------

    @property
    def level(self) -> LogLevel:
        with self._lock.read():
            return self._level

    def set_level(self, level: LogLevel | str) -> None:
        parsed = LogLevel.parse(level)
        with self._lock.write():
            self._level = parsed

    def set_sink(self, sink: Optional[Any]) -> None:
        with self._lock.write():
            self._sink = sink

    def set_formatter(self, formatter: Optional[FormatterLike]) -> None:
        converted = as_formatter(formatter)
        with self._lock.write():
            self._formatter = converted

    def set_short_path(self, enabled: bool) -> None:
        with self._lock.write():
            self._short_path = enabled

    def set_console(self, enabled: bool) -> None:
        with self._lock.write():
            self._console = enabled

    def set_color(self, enabled: bool) -> None:
        with self._lock.write():
            self._color = enabled

    # ------------------------------------------------------------------
    # 消费线程
    # ------------------------------------------------------------------

    def _consume(self) -> None:
        try:
            for line in self._queue:
                try:
                    self._deliver(line)
                except Exception as exc:
                    # 单条记录失败不能终止消费线程
                    diag.error("deliver log failed, err: {}\tdata: {!r}", exc, line)
        finally:
            if self._files is not None:
                self._files.close()

    def _deliver(self, line: str) -> None:
        with self._lock.read():
            console = self._console
            sink = self._sink

        if console:
            try:
                sys.stdout.write(line)
                sys.stdout.flush()
            except (OSError, ValueError) as exc:
                diag.error("write log to stdout failed, err: {}", exc)

        if sink is not None:
            _write_sink(sink, line)

        if self._files is None:
            return
        self._files.write(line.encode("utf-8", "backslashreplace"))

    # ------------------------------------------------------------------
    # 生命周期
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def destroy(self) -> None:
        """停止接收新记录，等待队列与压缩任务全部处理完后返回。

        重复调用抛出 WriterClosedError。
        """
        with self._lock.write():
            if self._closed:
                raise WriterClosedError("writer already destroyed")
            self._closed = True

        self._queue.close()
        self._consumer.join()
        if self._compressor is not None:
            self._compressor.close()

    def __enter__(self) -> "LogWriter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if not self._closed:
            self.destroy()


def _interpolate(message: str, args: tuple, kwargs: dict) -> str:
    # 与 loguru 一致使用 str.format 占位符；没有参数时原样输出
    if not args and not kwargs:
        return str(message)
    try:
        return str(message).format(*args, **kwargs)
    except Exception as exc:
        diag.warning("format message {!r} failed, err: {}", message, exc)
        extra = [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
        return f"{message} {' '.join(extra)}"


def _write_sink(sink: Any, line: str) -> None:
    # 附加输出流失败不影响控制台与文件
    try:
        try:
            sink.write(line)
        except TypeError:
            # 二进制流
            sink.write(line.encode("utf-8", "backslashreplace"))
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
    except Exception as exc:
        diag.warning("write log to sink {!r} failed, err: {}", sink, exc)


__all__ = ["LogWriter"]
