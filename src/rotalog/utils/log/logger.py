"""基于 loguru 的内部诊断输出。

写入器自身的故障（写文件失败、重命名失败、压缩失败、sink 写入失败等）不会抛给日志调用方，
而是通过这里的 `diag` 报告到标准错误流。

`diag` 是绑定了 `rotalog=True` 的 loguru logger：
- 未调用 `configure_diagnostics` 时，由 loguru 默认的 stderr 处理器输出
- 调用 `configure_diagnostics` 后，安装一个只接收 rotalog 诊断的专用 sink
"""

from __future__ import annotations

import sys
from typing import Any, Optional

from loguru import logger as _logger

DIAG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | rotalog - {message}"

diag = _logger.bind(rotalog=True)

_HANDLER_ID: Optional[int] = None


def _only_diagnostics(record: Any) -> bool:
    return bool(record["extra"].get("rotalog"))


def _stderr_sink(message: Any) -> None:
    # 每次写入时再取 sys.stderr，兼容运行期被替换的情况（例如测试捕获）
    sys.stderr.write(str(message))


def configure_diagnostics(
    *,
    level: str = "WARNING",
    sink: Any = None,
    colorize: bool = False,
) -> int:
    """安装（或替换）rotalog 诊断专用的 sink，返回 loguru 处理器 id。"""
    global _HANDLER_ID
    if _HANDLER_ID is not None:
        try:
            _logger.remove(_HANDLER_ID)
        except ValueError:
            # 已被应用通过 logger.remove() 移除
            pass

    _HANDLER_ID = _logger.add(
        sink if sink is not None else _stderr_sink,
        level=level,
        format=DIAG_FORMAT,
        filter=_only_diagnostics,
        colorize=colorize,
    )
    return _HANDLER_ID


def get_logger(name: Optional[str] = None):
    """返回带有指定名称绑定（name）的诊断 logger。"""
    if name:
        return diag.bind(name=name)
    return diag
