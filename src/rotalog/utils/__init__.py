"""
rotalog.utils 包

通用工具集合（诊断日志、读写锁），供全局复用。
"""

# 便捷导出
from .log import diag as diag

__all__ = ["diag"]
