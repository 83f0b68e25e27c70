"""写入器配置适配器。

本模块负责把 `Settings` 中的字段映射为 `LogWriter` 可接受的参数，
并提供 `build_writer_from_settings` 按配置创建写入器。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from rotalog.config.settings import Settings, get_settings


def map_settings_to_writer_kwargs(settings: Settings) -> Dict[str, Any]:
    """把 Settings 映射为传给 LogWriter 的关键字参数字典。"""
    return {
        "level": settings.log_level,
        "short_path": settings.short_path,
        "console": settings.console,
        "color": settings.color,
        "log_dir": settings.log_dir,
        "log_name": settings.log_name,
        "roll_by_time": settings.roll_by_time,
        "roll_by_size": settings.roll_by_size,
        "queue_size": settings.queue_size,
        "compress_queue_size": settings.compress_queue_size,
    }


def build_writer_from_settings(settings: Optional[Settings] = None, **overrides: Any) -> Any:
    """从 settings 创建 LogWriter；设置了 `diag_level` 时同时配置诊断输出。

    如果未传入 settings，会使用 `get_settings()` 获取单例。
    """
    if settings is None:
        settings = get_settings()

    kwargs = map_settings_to_writer_kwargs(settings)
    kwargs.update(overrides)

    # 延迟导入以避免循环依赖
    from rotalog.core.writer import LogWriter
    from rotalog.utils.log import configure_diagnostics

    if settings.diag_level:
        configure_diagnostics(level=settings.diag_level)
    return LogWriter(**kwargs)


__all__ = ["map_settings_to_writer_kwargs", "build_writer_from_settings"]
