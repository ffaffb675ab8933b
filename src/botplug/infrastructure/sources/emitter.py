"""Interval-driven event emitter.

An ``EventEmitter`` runs one asyncio task that produces an event on every
tick of a repeating timer and hands it to an output queue, until the
cancellation event fires.

Timer semantics mirror a ticker with a single pending slot: ticks fire at
``start + k * interval``. While a hand-off is blocked on a full queue, at
most one missed tick stays pending and fires as soon as the hand-off
completes; any further missed ticks are dropped. Ticks are never queued.

A blocked hand-off is backpressure, not an error. If the host never drains
the queue the emitter waits until cancellation.
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Callable
from datetime import timedelta
from enum import Enum

import structlog

from botplug.core.domain.plugin import SourceEvent
from botplug.core.utils.duration import format_duration

logger = structlog.get_logger(__name__)


class EmitterState(str, Enum):
    """Lifecycle states of an emitter. ``STOPPED`` is terminal."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class EventEmitter:
    """Produces one event per tick until cancelled.

    Args:
        interval: Time between ticks. Fixed once the emitter starts.
        output: Queue the events are handed to.
        cancel_event: Cancellation signal owned by the host.
        event_factory: Builds the event for each tick.
        name: Label used in task names and logs.
    """

    def __init__(
        self,
        *,
        interval: timedelta,
        output: asyncio.Queue[SourceEvent],
        cancel_event: asyncio.Event,
        event_factory: Callable[[], SourceEvent],
        name: str = "emitter",
    ) -> None:
        if interval <= timedelta(0):
            raise ValueError("interval must be positive")
        self._interval = interval.total_seconds()
        self._output = output
        self._cancel_event = cancel_event
        self._event_factory = event_factory
        self._name = name
        self._state = EmitterState.IDLE
        self._task: asyncio.Task[None] | None = None
        self._emitted = 0

    @property
    def state(self) -> EmitterState:
        return self._state

    @property
    def interval(self) -> timedelta:
        return timedelta(seconds=self._interval)

    @property
    def emitted(self) -> int:
        """Number of events handed off so far."""
        return self._emitted

    @property
    def task(self) -> asyncio.Task[None] | None:
        return self._task

    def start(self) -> asyncio.Task[None]:
        """Arm the timer and spawn the emitting task.

        Raises:
            RuntimeError: If the emitter was already started.
        """
        if self._state is not EmitterState.IDLE:
            raise RuntimeError(f"emitter {self._name!r} already started")

        self._state = EmitterState.RUNNING
        self._task = asyncio.create_task(self._run(), name=f"event-emitter-{self._name}")
        logger.info(
            "source.emitter.started",
            emitter=self._name,
            interval=format_duration(self.interval),
        )
        return self._task

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        started_at = loop.time()
        tick = 1
        try:
            while True:
                fire_at = started_at + tick * self._interval
                if await self._cancelled_before(fire_at - loop.time()):
                    return

                if not await self._deliver(self._event_factory()):
                    return
                self._emitted += 1
                logger.debug("source.emitter.tick", emitter=self._name, tick=tick)

                # Latest tick that fired while the hand-off was blocked stays pending.
                fired = math.floor((loop.time() - started_at) / self._interval)
                tick = max(tick + 1, fired)
        finally:
            self._state = EmitterState.STOPPED
            logger.info(
                "source.emitter.stopped",
                emitter=self._name,
                emitted=self._emitted,
            )

    async def _cancelled_before(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds; True if cancellation fired first."""
        if self._cancel_event.is_set():
            return True
        try:
            await asyncio.wait_for(self._cancel_event.wait(), timeout=max(timeout, 0.0))
        except asyncio.TimeoutError:
            # Cancellation wins a tie with the timer.
            return self._cancel_event.is_set()
        return True

    async def _deliver(self, event: SourceEvent) -> bool:
        """Hand ``event`` to the output queue unless cancellation fires first."""
        if self._cancel_event.is_set():
            return False
        try:
            self._output.put_nowait(event)
            return True
        except asyncio.QueueFull:
            pass

        putter = asyncio.ensure_future(self._output.put(event))
        stopper = asyncio.ensure_future(self._cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {putter, stopper}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            putter.cancel()
            stopper.cancel()
        # A hand-off that already completed stays delivered.
        return putter in done and not putter.cancelled()
