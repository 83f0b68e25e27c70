"""日志文件滚动策略。

按时间滚动与按大小滚动互斥，同时配置时只启用按时间滚动，并且这一决定在构建时完成：

- 按时间：把当前时间按滚动周期向下取整得到“时间块”，例如周期为 5m 时，
  16:56:23 属于 16:55:00 这个时间块。时间块变化时滚动，旧文件重命名为 `<name>-<时间块>`。
- 按大小：文件大小（字节）严格大于阈值（KB * 1024）时滚动，旧文件重命名为 `<name>-<序号>`，
  序号为目录中已有的同名滚动文件/压缩包的最大序号加一。
"""

from __future__ import annotations

import math
import os
import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

from .errors import ConfigError
from .types import TimeLayout

Clock = Callable[[], float]

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: Union[str, timedelta]) -> timedelta:
    """解析 Go 风格的时长字符串，如 "5m"、"1h30m"、"1.5h"、"300ms"。

    无法解析或不为正数时抛出 ConfigError。
    """
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    else:
        text = str(value).strip()
        pos = 0
        seconds = 0.0
        for match in _DURATION_PART.finditer(text):
            if match.start() != pos:
                break
            seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
            pos = match.end()
        if not text or pos != len(text):
            raise ConfigError(f"invalid duration: {value!r}")
    if seconds <= 0:
        raise ConfigError(f"duration must be positive: {value!r}")
    return timedelta(seconds=seconds)


def time_block(timestamp: float, period: timedelta) -> str:
    """返回 timestamp 所属时间块的标识（本地时间）。"""
    seconds = period.total_seconds()
    start = math.floor(timestamp / seconds) * seconds
    # 周期不是整分钟时标识精确到秒，不是整秒时再精确到微秒，否则相邻时间块会重名
    if seconds % 60 == 0:
        layout = TimeLayout.BLOCK
    elif seconds % 1 == 0:
        layout = TimeLayout.BLOCK + "%S"
    else:
        layout = TimeLayout.BLOCK + "%S%f"
    return datetime.fromtimestamp(start).strftime(layout)


@dataclass
class FileState:
    """当前日志文件的状态，只由消费线程读写。"""

    size: int = 0
    block: Optional[str] = None


class RotationPolicy:
    """滚动策略基类：默认从不滚动。"""

    mode = "none"
    check_after_write = False

    @property
    def enabled(self) -> bool:
        return False

    def seed(self, state: FileState, stat: os.stat_result) -> None:
        """打开一个已存在的文件时，用它的 stat 初始化状态。"""
        state.size = stat.st_size

    def reset(self, state: FileState) -> None:
        """新建空文件后重置状态。"""
        state.size = 0

    def due(self, state: FileState) -> bool:
        return False

    def rotated_path(self, path: str, state: FileState) -> str:
        raise NotImplementedError()


class TimeRotation(RotationPolicy):
    mode = "time"

    def __init__(self, period: timedelta, clock: Clock = time.time) -> None:
        self.period = period
        self.clock = clock

    @property
    def enabled(self) -> bool:
        return True

    def current_block(self) -> str:
        return time_block(self.clock(), self.period)

    def seed(self, state: FileState, stat: os.stat_result) -> None:
        super().seed(state, stat)
        state.block = time_block(stat.st_mtime, self.period)

    def reset(self, state: FileState) -> None:
        super().reset(state)
        state.block = self.current_block()

    def due(self, state: FileState) -> bool:
        return state.block is not None and state.block != self.current_block()

    def rotated_path(self, path: str, state: FileState) -> str:
        return _unused(f"{path}-{state.block}")


class SizeRotation(RotationPolicy):
    mode = "size"
    check_after_write = True

    def __init__(self, limit_kb: int) -> None:
        self.limit_kb = limit_kb

    @property
    def enabled(self) -> bool:
        return True

    @property
    def limit_bytes(self) -> int:
        return self.limit_kb * 1024

    def due(self, state: FileState) -> bool:
        return state.size > self.limit_bytes

    def rotated_path(self, path: str, state: FileState) -> str:
        directory, name = os.path.split(path)
        return f"{path}-{next_sequence(directory or '.', name)}"


def next_sequence(directory: str, name: str) -> int:
    """目录中 `<name>-N` 与 `<name>-N.zip` 的最大 N 加一（没有则为 1）。

    读取目录失败时抛出 OSError。
    """
    pattern = re.compile(re.escape(name) + r"-(\d{1,9})(?:\.zip)?$")
    highest = 0
    with os.scandir(directory) as entries:
        for entry in entries:
            match = pattern.match(entry.name)
            if match:
                highest = max(highest, int(match.group(1)))
    return highest + 1


def _unused(target: str) -> str:
    # 同一时间块被滚动过多次（例如进程重启）时，追加 .1、.2 避免覆盖已有归档
    candidate, n = target, 0
    while os.path.exists(candidate) or os.path.exists(candidate + ".zip"):
        n += 1
        candidate = f"{target}.{n}"
    return candidate


def build_rotation_policy(
    mode: str,
    roll_by_time: Optional[timedelta] = None,
    roll_by_size: int = 0,
    clock: Clock = time.time,
) -> RotationPolicy:
    """按已确定的滚动方式（time、size 或 none）构建滚动策略。

    滚动方式由 `WriterConfig.rotation_mode` 给出，缺少对应参数或方式未知时抛出 ConfigError。
    """
    if mode == "time":
        if not roll_by_time:
            raise ConfigError("time rotation requires roll_by_time")
        return TimeRotation(roll_by_time, clock=clock)
    if mode == "size":
        if roll_by_size <= 0:
            raise ConfigError("size rotation requires roll_by_size > 0")
        return SizeRotation(roll_by_size)
    if mode == "none":
        return RotationPolicy()
    raise ConfigError(f"unknown rotation mode: {mode!r}")


__all__ = [
    "Clock",
    "parse_duration",
    "time_block",
    "FileState",
    "RotationPolicy",
    "TimeRotation",
    "SizeRotation",
    "next_sequence",
    "build_rotation_policy",
]
