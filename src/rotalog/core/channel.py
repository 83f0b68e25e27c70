"""有界、可关闭的多生产者/单消费者 FIFO 通道。

行为：
- `put` 在通道满时阻塞调用方（背压），通道关闭后抛出 `QueueClosedError`
- `get` 在通道为空时阻塞；通道关闭且已排空后返回 `CLOSED`
- `close` 只能调用一次，之后仍可把剩余元素取完
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Generic, TypeVar, Union

from .errors import QueueClosedError

T = TypeVar("T")


class _Closed:
    """通道已关闭且排空的信号，区别于任何真实的值。"""

    _instance: "_Closed | None" = None

    def __new__(cls) -> "_Closed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CLOSED"

    def __bool__(self) -> bool:
        return False


CLOSED = _Closed()


class BoundedChannel(Generic[T]):
    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("channel capacity must be >= 1")
        self.capacity = capacity
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def put(self, item: T) -> None:
        with self._cond:
            while len(self._items) >= self.capacity and not self._closed:
                self._cond.wait()
            if self._closed:
                raise QueueClosedError("put on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    def get(self) -> Union[T, Any]:
        """取出下一个元素；关闭并排空后返回 `CLOSED`。"""
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            return CLOSED

    def close(self) -> None:
        with self._cond:
            if self._closed:
                raise QueueClosedError("close of closed channel")
            self._closed = True
            # 唤醒所有等待中的生产者与消费者
            self._cond.notify_all()

    def __iter__(self):
        # 逐个取出，直到通道关闭且排空
        while True:
            item = self.get()
            if item is CLOSED:
                return
            yield item


__all__ = ["BoundedChannel", "CLOSED"]
