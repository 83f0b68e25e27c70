"""测试辅助函数。"""

import time


def wait_for(predicate, timeout: float = 5.0, interval: float = 0.01) -> bool:
    """轮询直到 predicate() 为真或超时。"""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()
