"""
Periodic tick scheduler.

Drives MarketSimulator.tick() from an asyncio task at a fixed cadence. The
simulator itself stays timer-free; stopping the scheduler only halts price
movement and never touches the ledger.
"""

import asyncio

from loguru import logger

from memesim.core.constants import TICK_INTERVAL_MS
from memesim.core.models.market import MarketSimulator
from memesim.core.utils.validation import validate_positive


class TickScheduler:
    """Runs simulator ticks on the current event loop."""

    def __init__(self, simulator: MarketSimulator, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self.simulator = simulator
        self.interval_ms = validate_positive(interval_ms, "interval_ms")
        self.ticks_run = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        """Check if the tick loop is active."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking; calling start on a running scheduler is a no-op.

        Must be called from within a running event loop.
        """
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="memesim-ticks")
        self.simulator.announce("MARKET OPEN")
        logger.info(f"Tick scheduler started ({self.interval_ms} ms)")

    async def stop(self) -> None:
        """Cancel the tick loop and wait for it to finish."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        self.simulator.announce("MARKET PAUSED")
        logger.info(f"Tick scheduler stopped after {self.ticks_run} ticks")

    async def run_for(self, ticks: int) -> None:
        """Run exactly ``ticks`` ticks in the foreground, then return."""
        for _ in range(ticks):
            await asyncio.sleep(self.interval_ms / 1000)
            self._tick_once()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_ms / 1000)
            self._tick_once()

    def _tick_once(self) -> None:
        self.simulator.tick()
        self.ticks_run += 1
