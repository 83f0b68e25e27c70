"""日志文件句柄管理。

`FileHandleManager` 持有唯一打开的日志文件、已写入字节数以及当前时间块，
并在每次写入前后按滚动策略决定是否需要滚动。它只在消费线程中使用，因此不加锁。

状态：
- 未打开：首次写入或滚动失败后，直接打开/创建 `<dir>/<name>`；已存在的文件用 stat 初始化状态，不截断
- 已打开：缓存句柄，持续追加
- 滚动中：关闭句柄 -> 重命名 -> 投递压缩 -> 新建文件，全部在消费线程内同步完成
"""

from __future__ import annotations

import os
from typing import BinaryIO, Callable, Optional

from ..utils.log import get_logger
from .rotation import FileState, RotationPolicy

diag = get_logger("files")


class FileHandleManager:
    def __init__(
        self,
        directory: str,
        name: str,
        policy: Optional[RotationPolicy] = None,
        on_rotated: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.directory = directory
        self.name = name
        self.path = os.path.join(directory, name)
        self.policy = policy or RotationPolicy()
        self.on_rotated = on_rotated
        self.state = FileState()
        self._handle: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def write(self, data: bytes) -> int:
        """追加 data，返回写入的字节数；失败时报告到诊断输出并返回 0。"""
        handle = self._acquire()
        if handle is None:
            return 0
        try:
            n = handle.write(data)
            handle.flush()
        except (OSError, ValueError) as exc:
            diag.error(
                "write log to {} failed, err: {}\tdata: {}",
                self.path,
                exc,
                data.decode("utf-8", "replace").rstrip("\n"),
            )
            return 0
        self.state.size += n
        if self.policy.check_after_write and self.policy.due(self.state):
            self._rotate()
        return n

    def close(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError as exc:
                diag.error("close logfile {} failed, err: {}", self.path, exc)
            self._handle = None

    def _acquire(self) -> Optional[BinaryIO]:
        if self._handle is None and not self._open():
            return None
        if self.policy.due(self.state) and not self._rotate():
            # 滚动失败时继续写入旧文件，下次写入时重试
            if self._handle is None:
                self._open()
        return self._handle

    def _open(self) -> bool:
        try:
            os.makedirs(self.directory or ".", exist_ok=True)
            stat = os.stat(self.path) if os.path.exists(self.path) else None
            self._handle = open(self.path, "ab")
        except OSError as exc:
            diag.error("open logfile {} failed, err: {}", self.path, exc)
            self._handle = None
            return False
        if stat is not None:
            self.policy.seed(self.state, stat)
        else:
            self.policy.reset(self.state)
        return True

    def _rotate(self) -> bool:
        try:
            target = self.policy.rotated_path(self.path, self.state)
        except OSError as exc:
            diag.error("read dir {} failed, err: {}", self.directory, exc)
            return False

        self.close()
        try:
            os.rename(self.path, target)
        except OSError as exc:
            diag.error("rename {} to {} failed, err: {}", self.path, target, exc)
            return False

        if self.on_rotated is not None:
            self.on_rotated(target)

        try:
            self._handle = open(self.path, "ab")
        except OSError as exc:
            diag.error("create logfile {} failed, err: {}", self.path, exc)
            self._handle = None
            return False
        self.policy.reset(self.state)
        diag.trace("rotated {} -> {}", self.path, target)
        return True


__all__ = ["FileHandleManager"]
