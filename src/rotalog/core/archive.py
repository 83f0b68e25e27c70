"""归档器：把文件/目录压缩为 zip，以及解压。

写入器只依赖 `Archiver` 接口（compress / decompress），具体容器格式可以替换。
"""

from __future__ import annotations

import os
import zipfile
from typing import Iterable, Protocol


class Archiver(Protocol):
    """归档协作者接口。"""

    suffix: str

    def compress(self, paths: Iterable[str], dest: str) -> None:
        ...

    def decompress(self, archive: str, dest_dir: str) -> None:
        ...


class ZipArchiver:
    """基于 zipfile 的归档器。

    文件以文件名存入归档根目录，目录递归存入并保留 `<目录名>/...` 的相对结构。
    失败时抛出 OSError 或 zipfile.BadZipFile，并删除写了一半的归档。
    """

    suffix = ".zip"

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.compression = compression

    def compress(self, paths: Iterable[str], dest: str) -> None:
        try:
            with zipfile.ZipFile(dest, "w", compression=self.compression) as zf:
                for path in paths:
                    self._add(zf, path, os.path.basename(os.path.normpath(path)))
        except BaseException:
            # 不留下残缺的归档
            if os.path.exists(dest):
                os.remove(dest)
            raise

    def _add(self, zf: zipfile.ZipFile, path: str, arcname: str) -> None:
        if os.path.isdir(path):
            for entry in sorted(os.listdir(path)):
                self._add(zf, os.path.join(path, entry), f"{arcname}/{entry}")
        else:
            zf.write(path, arcname)

    def decompress(self, archive: str, dest_dir: str) -> None:
        os.makedirs(dest_dir, exist_ok=True)
        with zipfile.ZipFile(archive) as zf:
            # extractall 会清理 ../ 与绝对路径，条目不会写出 dest_dir
            zf.extractall(dest_dir)


__all__ = ["Archiver", "ZipArchiver"]
