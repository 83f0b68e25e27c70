"""后台压缩线程。

消费者线程滚动出的旧文件路径投递到这里，逐个压缩为 `<path>.zip`，成功后删除原文件。
压缩失败时原文件保留在磁盘上，绝不删除。
"""

from __future__ import annotations

import os
import threading
from typing import Optional

from ..utils.log import get_logger
from .archive import Archiver, ZipArchiver
from .channel import BoundedChannel

diag = get_logger("compression")


class CompressionWorker:
    def __init__(
        self,
        capacity: int = 2,
        archiver: Optional[Archiver] = None,
        name: str = "rotalog-compress",
    ) -> None:
        self.archiver: Archiver = archiver or ZipArchiver()
        self.channel: BoundedChannel[str] = BoundedChannel(capacity)
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> "CompressionWorker":
        self._thread.start()
        return self

    def submit(self, path: str) -> None:
        """投递待压缩的文件，队列满时阻塞。"""
        self.channel.put(path)

    def close(self) -> None:
        """关闭队列并等待剩余文件全部处理完。"""
        self.channel.close()
        if self._thread.is_alive():
            self._thread.join()

    def _run(self) -> None:
        for path in self.channel:
            self.compress_one(path)

    def compress_one(self, path: str) -> bool:
        dest = path + self.archiver.suffix
        if not os.path.isfile(path):
            diag.error("open file {} failed, err: no such file", path)
            return False
        try:
            self.archiver.compress([path], dest)
        except Exception as exc:
            diag.error("compress file {} failed, err: {}", dest, exc)
            return False
        try:
            os.remove(path)
        except OSError as exc:
            diag.error("remove file {} failed, err: {}", path, exc)
            return False
        return True


__all__ = ["CompressionWorker"]
