"""测试 WriterConfig 配置模型。"""

import io
from datetime import timedelta

import pytest
from pydantic import ValidationError

from rotalog.config.writer_config import WriterConfig
from rotalog.core.formatter import CallableFormatter, DefaultFormatter
from rotalog.core.types import LogLevel


class TestWriterConfig:
    """测试 WriterConfig 类。"""

    def test_default_values(self):
        """测试默认配置值。"""
        config = WriterConfig()

        assert config.level is LogLevel.INFO
        assert config.short_path is True
        assert config.console is True
        assert config.color is True
        assert config.sink is None
        assert config.formatter is None
        assert config.log_dir is None
        assert config.log_name is None
        assert config.roll_by_time is None
        assert config.roll_by_size == 0
        assert config.queue_size == 256
        assert config.compress_queue_size == 2
        assert config.file_enabled is False
        assert config.rotation_mode == "none"

    def test_level_from_string(self):
        """测试级别字符串解析。"""
        assert WriterConfig(level="warning").level is LogLevel.WARN
        with pytest.raises(ValidationError):
            WriterConfig(level="loud")

    def test_roll_by_time_parsed(self):
        """测试时长字符串解析为 timedelta。"""
        config = WriterConfig(log_dir="/tmp", log_name="a.log", roll_by_time="5m")
        assert config.roll_by_time == timedelta(minutes=5)
        assert config.rotation_mode == "time"

    def test_invalid_duration_is_fatal(self):
        """测试非法时长在构建时失败。"""
        with pytest.raises(ValidationError) as exc_info:
            WriterConfig(roll_by_time="five minutes")
        assert "invalid duration" in str(exc_info.value)

    def test_empty_duration_means_disabled(self):
        """测试空字符串表示不按时间滚动。"""
        assert WriterConfig(roll_by_time="  ").roll_by_time is None

    def test_time_takes_precedence_over_size(self):
        """测试同时配置时只启用按时间滚动。"""
        config = WriterConfig(log_dir="/tmp", log_name="a.log", roll_by_time="1m", roll_by_size=20)
        assert config.rotation_mode == "time"

    def test_size_mode(self):
        """测试只配置大小时按大小滚动。"""
        config = WriterConfig(log_dir="/tmp", log_name="a.log", roll_by_size=20)
        assert config.rotation_mode == "size"

    def test_negative_size_rejected(self):
        """测试负数大小被拒绝。"""
        with pytest.raises(ValidationError):
            WriterConfig(roll_by_size=-1)

    def test_queue_size_must_be_positive(self):
        """测试队列容量必须为正。"""
        with pytest.raises(ValidationError):
            WriterConfig(queue_size=0)

    def test_file_disabled_when_name_or_dir_blank(self):
        """测试目录或文件名为空时不落盘。"""
        assert WriterConfig(log_dir="/tmp", log_name="   ").file_enabled is False
        assert WriterConfig(log_dir="", log_name="a.log").file_enabled is False
        assert WriterConfig(log_name="a.log", roll_by_size=1).rotation_mode == "none"

    def test_formatter_and_sink(self):
        """测试格式化器与输出流字段。"""
        sink = io.StringIO()
        default = DefaultFormatter()
        assert WriterConfig(formatter=default).formatter is default
        config = WriterConfig(formatter=lambda r: r.message, sink=sink)
        assert isinstance(config.formatter, CallableFormatter)
        assert config.sink is sink
