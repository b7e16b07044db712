"""
Board ticker - recomputes every visible order's elapsed time once per tick
"""

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, Dict, Optional, Union

from src.application.use_cases.order_lifecycle_use_case import OrderLifecycleUseCase
from src.domain.value_objects.elapsed_time import ElapsedTime
from src.infrastructure.utilities.constants import BoardSettings

Snapshot = Dict[int, ElapsedTime]
TickCallback = Callable[[Snapshot], Union[None, Awaitable[None]]]


class BoardTicker:
    """Background task driving the board timers.

    Acquired with start() and released with stop(); as an async context
    manager the task is torn down even if the owner exits mid-tick.
    """

    def __init__(
        self,
        order_lifecycle: OrderLifecycleUseCase,
        on_tick: TickCallback,
        interval: float = BoardSettings.DEFAULT_TICK_SECONDS,
    ):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self._orders = order_lifecycle
        self._on_tick = on_tick
        self._interval = interval
        self._stop_event = asyncio.Event()
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            self._logger.warning("Board ticker already running")
            return

        self._stop_event.clear()
        self._task = asyncio.get_running_loop().create_task(self._tick_loop())
        self._logger.info("⏱️ BOARD TICKER STARTED: every %ss", self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return

        self._stop_event.set()
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        self._logger.info("⏹️ BOARD TICKER STOPPED after %d ticks", self.ticks)

    async def __aenter__(self) -> "BoardTicker":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def tick(self) -> Snapshot:
        """Run one tick; a failing callback is logged and does not stop the ticker"""
        snapshot = self._orders.elapsed_snapshot()
        self.ticks += 1
        try:
            result = self._on_tick(snapshot)
            if inspect.isawaitable(result):
                await result
        except Exception as e:  # pylint: disable=broad-exception-caught
            self._logger.error("💥 BOARD TICK ERROR: %s", e, exc_info=True)
        return snapshot

    async def _tick_loop(self) -> None:
        while not self._stop_event.is_set():
            await self.tick()
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                continue
