"""Periodic clock tick for live displays."""
import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class LiveClock:
    """Holds the most recent "now" snapshot published by a Ticker."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        """Initialize with the function used when no tick has happened yet."""
        self._clock = clock
        self._snapshot: Optional[datetime] = None

    def update(self, now: datetime) -> None:
        """Store a new snapshot."""
        self._snapshot = now

    def now(self) -> datetime:
        """Return the latest snapshot, reading the clock if none exists."""
        if self._snapshot is None:
            return self._clock()
        return self._snapshot


class Ticker:
    """
    Calls a callback with the current time at a fixed interval.

    The tick runs as an asyncio task on the running loop and must be
    stopped when its consumer goes away.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[datetime], None],
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize ticker.

        Args:
            interval: Seconds between ticks
            callback: Receives the time of each tick
            clock: Source of the current time
        """
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval
        self.callback = callback
        self.clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        """Whether the tick task is alive."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking. Must be called from within a running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        """Cancel the tick task and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        while True:
            try:
                self.callback(self.clock())
            except Exception:
                logger.exception("Clock tick callback failed")
            await asyncio.sleep(self.interval)


# Global clock snapshot refreshed by the application ticker
live_clock = LiveClock()


def get_now() -> datetime:
    """Dependency returning the current "now" snapshot."""
    return live_clock.now()
