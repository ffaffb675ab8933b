"""Live handle returned by a source's ``stream()`` call."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

from botplug.core.domain.plugin import SourceEvent


class StreamOutput:
    """Owns one output queue and the cancellation signal of a single stream.

    The host reads events from ``output`` (or iterates the handle) and stops
    the stream by setting the cancellation event it passed to ``stream()``,
    or by calling :meth:`cancel`. The queue is never closed; readers stop
    once they observe cancellation.
    """

    def __init__(
        self,
        output: asyncio.Queue[SourceEvent],
        cancel_event: asyncio.Event,
        task: asyncio.Task[None] | None = None,
    ) -> None:
        self.output = output
        self._cancel_event = cancel_event
        self._task = task

    @property
    def cancelled(self) -> bool:
        """Whether the cancellation signal has fired."""
        return self._cancel_event.is_set()

    @property
    def done(self) -> bool:
        """Whether the producing task has exited."""
        return self._task is None or self._task.done()

    def attach(self, task: asyncio.Task[None]) -> None:
        """Bind the producing task to this handle."""
        self._task = task

    def cancel(self) -> None:
        """Fire the cancellation signal."""
        self._cancel_event.set()

    async def wait_closed(self) -> None:
        """Wait until the producing task has exited."""
        if self._task is not None:
            await self._task

    async def aclose(self) -> None:
        """Cancel the stream and wait for the producer to quiesce."""
        self.cancel()
        await self.wait_closed()

    async def __aiter__(self) -> AsyncIterator[SourceEvent]:
        while not self._cancel_event.is_set():
            getter = asyncio.ensure_future(self.output.get())
            stopper = asyncio.ensure_future(self._cancel_event.wait())
            try:
                done, _ = await asyncio.wait(
                    {getter, stopper}, return_when=asyncio.FIRST_COMPLETED
                )
            finally:
                # A reader cancelled mid-wait must not leave a getter behind.
                getter.cancel()
                stopper.cancel()
            if getter not in done:
                return
            yield getter.result()
