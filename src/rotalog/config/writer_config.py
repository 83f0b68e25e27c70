"""写入器配置模型。

`WriterConfig` 在构建 `LogWriter` 时提供一次。按时间滚动与按大小滚动同时配置时，
只有按时间滚动生效（见 `rotation_mode`），这一点在构建时确定，不在每次写入时重新判断。
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rotalog.core.formatter import Formatter, as_formatter
from rotalog.core.rotation import parse_duration
from rotalog.core.types import LogLevel


class WriterConfig(BaseModel):
    """日志写入器配置。

    Examples:
        >>> # 只输出到控制台
        >>> config = WriterConfig(level="DEBUG")

        >>> # 每 5 分钟滚动一个文件
        >>> config = WriterConfig(log_dir="./logs", log_name="app.log", roll_by_time="5m")

        >>> # 文件超过 20KB 滚动
        >>> config = WriterConfig(log_dir="./logs", log_name="app.log", roll_by_size=20)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # 日志级别
    level: LogLevel = Field(default=LogLevel.INFO, description="最低日志级别")

    # 是否只记录调用方文件名（否则为绝对路径）
    short_path: bool = Field(default=True, description="是否使用短路径")

    # 控制台与颜色
    console: bool = Field(default=True, description="是否输出到控制台")
    color: bool = Field(default=True, description="是否使用 ANSI 颜色")

    # 附加输出流，任何带 write 方法的对象（文件、socket.makefile() 等）
    sink: Optional[Any] = Field(default=None, description="附加输出流")

    # 自定义格式化器，完全替换默认格式
    formatter: Optional[Formatter] = Field(default=None, description="自定义格式化器")

    # 日志文件：目录与文件名任一为空则不落盘
    log_dir: Optional[str] = Field(default=None, description="日志存放目录")
    log_name: Optional[str] = Field(default=None, description="日志文件名")

    # 滚动策略
    roll_by_time: Optional[timedelta] = Field(
        default=None, description='按时间滚动，如 "5m" 表示五分钟一个文件'
    )
    roll_by_size: int = Field(default=0, ge=0, description="按文件大小滚动，单位 KB")

    # 缓冲区容量
    queue_size: int = Field(default=256, ge=1, description="日志消息队列容量")
    compress_queue_size: int = Field(default=2, ge=1, description="压缩任务队列容量")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> LogLevel:
        """接受 LogLevel 或大小写不敏感的级别名。"""
        return LogLevel.parse(v)

    @field_validator("roll_by_time", mode="before")
    @classmethod
    def validate_roll_by_time(cls, v: Any) -> Optional[timedelta]:
        """解析时长字符串，空值表示不按时间滚动。"""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return parse_duration(v)

    @field_validator("formatter", mode="before")
    @classmethod
    def validate_formatter(cls, v: Any) -> Optional[Formatter]:
        return as_formatter(v)

    @field_validator("log_dir", "log_name")
    @classmethod
    def validate_path_part(cls, v: Optional[str]) -> Optional[str]:
        """去除首尾空格，空字符串视为未设置。"""
        if v is not None:
            v = v.strip()
            return v or None
        return v

    @property
    def file_enabled(self) -> bool:
        return bool(self.log_dir and self.log_name)

    @property
    def rotation_mode(self) -> str:
        """生效的滚动方式：time、size 或 none。"""
        if not self.file_enabled:
            return "none"
        if self.roll_by_time is not None:
            return "time"
        if self.roll_by_size > 0:
            return "size"
        return "none"


__all__ = ["WriterConfig"]
