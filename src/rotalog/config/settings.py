"""应用配置（基于 pydantic-settings）。

包含默认写入器的运行时配置（环境变量优先）。
"""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """默认写入器配置模型（可通过环境变量注入）。

    环境变量前缀：ROTALOG_
    例如 ROTALOG_LOG_LEVEL=DEBUG
    """

    # 输出
    log_level: str = "INFO"
    short_path: bool = True
    console: bool = True
    color: bool = True

    # 落盘与滚动
    log_dir: Optional[str] = None
    log_name: Optional[str] = None
    roll_by_time: Optional[str] = None
    roll_by_size: int = 0

    # 缓冲区
    queue_size: int = 256
    compress_queue_size: int = 2

    # 诊断输出级别；设置后安装专用的 stderr sink（适用于已移除 loguru 默认处理器的应用）
    diag_level: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="ROTALOG_")


# module-level cached settings
_SETTINGS: Optional[Settings] = None


def get_settings(force_reload: bool = False) -> Settings:
    """返回全局 Settings 单例（按需从环境加载）。

    如果 force_reload=True，会从环境/来源重新创建实例。
    """

    global _SETTINGS
    if _SETTINGS is None or force_reload:
        _SETTINGS = Settings()
    return _SETTINGS


__all__ = ["Settings", "get_settings"]
