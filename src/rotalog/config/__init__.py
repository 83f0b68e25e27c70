"""rotalog 配置：环境变量 Settings 与 WriterConfig 模型。"""

from .settings import Settings, get_settings
from .writer_config import WriterConfig

__all__ = ["Settings", "get_settings", "WriterConfig"]
