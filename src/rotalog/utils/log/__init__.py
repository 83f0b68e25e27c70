"""rotalog 的诊断日志模块。

基于 loguru，把写入器自身的故障报告到标准错误流。
"""

from .logger import diag, configure_diagnostics, get_logger

__all__ = ["diag", "configure_diagnostics", "get_logger"]
