"""
限频投递器 - 单槽信箱 + 尾沿限频

行为：
1. submit 覆盖信箱中的值并标记待投递
2. 空闲时立即同步投递，并启动排空任务
3. 排空任务每隔 interval 检查一次：有待投递则只投递最新值，否则结束
保证：消费者最终总能看到最新值；调用频率不超过每 interval 一次；无排队
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimitedProjector(Generic[T]):
    """限频投递器（单实例单飞）"""

    def __init__(self, interval_sec: float, consumer: Callable[[T], None]) -> None:
        self.interval_sec = interval_sec
        self._consumer = consumer
        self._value: T | None = None
        self._pending = False
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None

    @property
    def pending(self) -> bool:
        return self._pending

    def submit(self, value: T) -> None:
        """
        提交新值（需在事件循环中调用）

        Raises:
            RuntimeError: 当前线程没有运行中的事件循环（此时不投递）
        """
        loop = asyncio.get_running_loop()
        self._value = value
        self._pending = True
        if self._task is None:
            self._deliver()
            self._task = loop.create_task(self._drain())

    async def wait_idle(self) -> None:
        """等待排空任务结束"""
        while self._task is not None:
            await asyncio.shield(self._task)

    def _deliver(self) -> None:
        self._pending = False
        self._consumer(self._value)

    async def _drain(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.interval_sec)
                if not self._pending:
                    break
                try:
                    self._deliver()
                except Exception:
                    logger.exception("限频投递回调执行失败")
        finally:
            self._task = None
