"""测试公共夹具。"""

import pytest
from loguru import logger


@pytest.fixture
def diag_messages():
    """收集 rotalog 诊断输出的消息文本。"""
    messages: list[str] = []
    handler_id = logger.add(
        lambda m: messages.append(m.record["message"]),
        level="DEBUG",
        filter=lambda r: bool(r["extra"].get("rotalog")),
    )
    yield messages
    logger.remove(handler_id)
