"""日志级别过滤。"""

from __future__ import annotations

from .types import LogLevel


def should_emit(configured_min: LogLevel, record_level: LogLevel) -> bool:
    """当 record_level >= configured_min 时返回 True。"""
    return record_level.num >= configured_min.num


__all__ = ["should_emit"]
