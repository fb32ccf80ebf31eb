"""Demo order progress. Walks an order through its statuses on a timer."""

import asyncio
import logging
from collections.abc import Sequence

from fruit_shop.application.services.order_ledger import OrderLedger
from fruit_shop.domain.entities import OrderStatus

logger = logging.getLogger(__name__)

DEFAULT_PROGRESSION: tuple[OrderStatus, ...] = (
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.OUT_FOR_DELIVERY,
    OrderStatus.DELIVERED,
)


class ProgressSimulation:
    """Cancellable handle for one order's scheduled status advances.

    Nothing is scheduled until ``start()``; ``stop()`` cancels before the
    next timer fires. Must be started from within a running event loop.
    """

    def __init__(
        self,
        ledger: OrderLedger,
        order_id: str,
        steps: Sequence[OrderStatus],
        initial_delay: float,
        interval: float,
    ) -> None:
        self._ledger = ledger
        self.order_id = order_id
        self._steps = tuple(steps)
        self._initial_delay = initial_delay
        self._interval = interval
        self._task: asyncio.Task | None = None
        self._stopped = False
        self.applied: list[OrderStatus] = []

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def finished(self) -> bool:
        return len(self.applied) == len(self._steps)

    def start(self) -> "ProgressSimulation":
        if self._task is not None:
            raise RuntimeError(f"Progress simulation for {self.order_id} already started")
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Progress simulation started for order %s", self.order_id)
        return self

    async def stop(self) -> None:
        """Cancel any pending advance and wait for the task to unwind."""
        if self._task is None or self._task.done():
            return
        self._stopped = True
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        logger.info(
            "Progress simulation stopped for order %s after %d step(s)",
            self.order_id, len(self.applied),
        )

    async def wait(self) -> None:
        """Wait for the simulation to end; re-raises a failed advance.

        Returns quietly once ``stop()`` has cancelled the remaining steps.
        """
        if self._task is None:
            raise RuntimeError(f"Progress simulation for {self.order_id} was never started")
        try:
            await self._task
        except asyncio.CancelledError:
            if self._stopped and self._task.cancelled():
                return
            raise

    async def _run(self) -> None:
        delay = self._initial_delay
        for status in self._steps:
            await asyncio.sleep(delay)
            try:
                self._ledger.advance_status(self.order_id, status)
            except Exception:
                logger.exception("Progress simulation for order %s failed", self.order_id)
                raise
            self.applied.append(status)
            delay = self._interval


class OrderProgressSimulator:
    """Creates progress simulations with the configured timings."""

    def __init__(
        self,
        ledger: OrderLedger,
        initial_delay: float = 5.0,
        interval: float = 30.0,
        steps: Sequence[OrderStatus] = DEFAULT_PROGRESSION,
    ) -> None:
        self._ledger = ledger
        self._initial_delay = initial_delay
        self._interval = interval
        self._steps = tuple(steps)

    def simulate(self, order_id: str) -> ProgressSimulation:
        """Return an unstarted handle for ``order_id``."""
        return ProgressSimulation(
            self._ledger,
            order_id,
            self._steps,
            self._initial_delay,
            self._interval,
        )
