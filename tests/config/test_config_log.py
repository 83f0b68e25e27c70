"""测试 rotalog.config.log 模块。"""

import os
from unittest.mock import MagicMock, patch

from rotalog.config.log import build_writer_from_settings, map_settings_to_writer_kwargs
from rotalog.config.settings import Settings


class TestMapSettingsToWriterKwargs:
    """测试 map_settings_to_writer_kwargs 函数。"""

    def test_default_settings_mapping(self):
        """测试默认 Settings 到 writer kwargs 的映射。"""
        kwargs = map_settings_to_writer_kwargs(Settings())

        assert kwargs["level"] == "INFO"
        assert kwargs["short_path"] is True
        assert kwargs["console"] is True
        assert kwargs["color"] is True
        assert kwargs["log_dir"] is None
        assert kwargs["log_name"] is None
        assert kwargs["roll_by_time"] is None
        assert kwargs["roll_by_size"] == 0
        assert kwargs["queue_size"] == 256
        assert kwargs["compress_queue_size"] == 2

    def test_custom_settings_mapping(self):
        """测试自定义 Settings 到 writer kwargs 的映射。"""
        settings = Settings(
            log_level="DEBUG",
            short_path=False,
            console=False,
            color=False,
            log_dir="/custom/logs",
            log_name="custom.log",
            roll_by_time="1h",
            roll_by_size=100,
            queue_size=64,
            compress_queue_size=4,
        )
        kwargs = map_settings_to_writer_kwargs(settings)

        assert kwargs == {
            "level": "DEBUG",
            "short_path": False,
            "console": False,
            "color": False,
            "log_dir": "/custom/logs",
            "log_name": "custom.log",
            "roll_by_time": "1h",
            "roll_by_size": 100,
            "queue_size": 64,
            "compress_queue_size": 4,
        }


class TestBuildWriterFromSettings:
    """测试 build_writer_from_settings 函数。"""

    @patch("rotalog.core.writer.LogWriter")
    def test_build_with_custom_settings(self, mock_writer):
        """测试使用自定义 settings 创建写入器。"""
        settings = Settings(log_level="ERROR", log_dir="/test/logs", log_name="t.log")

        build_writer_from_settings(settings)

        assert mock_writer.call_count == 1
        call_kwargs = mock_writer.call_args[1]
        assert call_kwargs["level"] == "ERROR"
        assert call_kwargs["log_dir"] == "/test/logs"
        assert call_kwargs["log_name"] == "t.log"

    @patch("rotalog.core.writer.LogWriter")
    def test_overrides(self, mock_writer):
        """测试关键字参数覆盖 settings。"""
        build_writer_from_settings(Settings(), console=False, formatter="f")

        call_kwargs = mock_writer.call_args[1]
        assert call_kwargs["console"] is False
        assert call_kwargs["formatter"] == "f"

    @patch("rotalog.core.writer.LogWriter")
    @patch("rotalog.config.log.get_settings")
    def test_calls_get_settings_when_none(self, mock_get_settings, mock_writer):
        """测试当 settings=None 时调用 get_settings()。"""
        mock_settings = MagicMock()
        mock_settings.diag_level = None
        mock_get_settings.return_value = mock_settings

        build_writer_from_settings(settings=None)

        mock_get_settings.assert_called_once()
        mock_writer.assert_called_once()

    @patch("rotalog.core.writer.LogWriter")
    @patch("rotalog.utils.log.configure_diagnostics")
    def test_diag_level_configures_diagnostics(self, mock_configure, mock_writer):
        """测试设置 diag_level 时安装诊断输出。"""
        build_writer_from_settings(Settings(diag_level="ERROR"))
        mock_configure.assert_called_once_with(level="ERROR")

        mock_configure.reset_mock()
        build_writer_from_settings(Settings())
        mock_configure.assert_not_called()

    def test_end_to_end_flow(self, tmp_path):
        """测试从环境变量到写入器落盘的完整流程。"""
        with patch.dict(
            os.environ,
            {
                "ROTALOG_LOG_LEVEL": "WARN",
                "ROTALOG_CONSOLE": "false",
                "ROTALOG_COLOR": "false",
                "ROTALOG_LOG_DIR": str(tmp_path),
                "ROTALOG_LOG_NAME": "e2e.log",
            },
        ):
            writer = build_writer_from_settings(Settings())

        writer.info("filtered")
        writer.error("kept")
        writer.destroy()

        content = (tmp_path / "e2e.log").read_text()
        assert "kept" in content
        assert "filtered" not in content
        assert "[ERROR]" in content
