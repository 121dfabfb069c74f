"""Lightweight asynchronous fixed-interval scheduler."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .schedule import Schedule

logger = logging.getLogger(__name__)

Callback = Callable[[], Any | Awaitable[Any]]


class AppScheduler:
    """Run registered callbacks on a fixed cadence in a background task."""

    def __init__(self, interval_seconds: float = 5, *, run_on_startup: bool = False) -> None:
        if interval_seconds <= 0:
            msg = "interval_seconds must be positive"
            raise ValueError(msg)

        self.interval_seconds = float(interval_seconds)
        self.run_on_startup = run_on_startup
        self.past_due_ticks = 0
        self._shutdown_event = asyncio.Event()
        self._task: asyncio.Task[None] | None = None
        self._callbacks: list[Callback] = []

    @classmethod
    def from_schedule(cls, schedule: Schedule, *, run_on_startup: bool = False) -> AppScheduler:
        """Instantiate the scheduler from a parsed schedule expression."""

        return cls(interval_seconds=schedule.interval_seconds, run_on_startup=run_on_startup)

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def register(self, callback: Callback) -> None:
        """Register a callback to execute on each tick."""

        self._callbacks.append(callback)
        logger.debug("Registered scheduler callback %s", callback)

    async def start(self) -> None:
        """Start the scheduler loop if it is not already running."""

        if self.is_running:
            logger.debug("Scheduler already running; skipping start")
            return

        self._shutdown_event = asyncio.Event()
        self._task = asyncio.create_task(self._runner())
        logger.info("Scheduler started with interval=%s seconds", self.interval_seconds)

    async def shutdown(self) -> None:
        """Signal the background loop to stop and wait for termination."""

        if not self._task:
            return

        self._shutdown_event.set()
        await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
        logger.info("Scheduler stopped")

    async def _runner(self) -> None:
        """Execute registered callbacks on the configured cadence."""

        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        if self.run_on_startup:
            await self._execute_callbacks()
        next_tick += self.interval_seconds

        while not self._shutdown_event.is_set():
            now = loop.time()
            if now > next_tick:
                self.past_due_ticks += 1
                logger.warning(
                    "Scheduler tick is past due by %.3f seconds", now - next_tick
                )
                next_tick = now

            delay = next_tick - now
            if delay > 0:
                try:
                    await asyncio.wait_for(self._shutdown_event.wait(), timeout=delay)
                    break
                except asyncio.TimeoutError:
                    pass
            else:
                # Overrunning callbacks must still let shutdown() run.
                await asyncio.sleep(0)
                if self._shutdown_event.is_set():
                    break

            await self._execute_callbacks()
            next_tick += self.interval_seconds
        logger.debug("Scheduler runner exiting")

    async def _execute_callbacks(self) -> None:
        """Run registered callbacks, awaiting them when necessary."""

        if not self._callbacks:
            logger.debug("Scheduler tick (no callbacks registered)")
            return

        for callback in list(self._callbacks):
            try:
                result = callback()
                if inspect.isawaitable(result):
                    await result
            except Exception:  # noqa: BLE001 - bubbling up would stop the loop
                logger.exception("Scheduler callback %s raised an exception", callback)
