"""Shared building blocks for source plugins.

Provides the stream lifecycle used by interval-driven sources, and the
mixins a source inherits to declare that it does not support one of the
two event surfaces.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from botplug.core.domain.errors import UnsupportedOperationError
from botplug.core.domain.plugin import (
    ExternalRequestInput,
    ExternalRequestOutput,
    SourceEvent,
    StreamInput,
)
from botplug.core.domain.stream import StreamOutput
from botplug.infrastructure.sources.emitter import EventEmitter


class StreamUnimplemented:
    """Mixin for sources that only handle external requests."""

    async def stream(self, cancel: asyncio.Event, stream_input: StreamInput) -> StreamOutput:
        raise UnsupportedOperationError(
            "streaming is not supported by this source", operation="stream"
        )


class ExternalRequestUnimplemented:
    """Mixin for sources that only stream."""

    async def handle_external_request(
        self, request: ExternalRequestInput
    ) -> ExternalRequestOutput:
        raise UnsupportedOperationError(
            "external requests are not supported by this source",
            operation="handle_external_request",
        )


def supports_streaming(source: Any) -> bool:
    """Whether ``source`` implements ``stream()``."""
    return not isinstance(source, StreamUnimplemented) and callable(
        getattr(source, "stream", None)
    )


def supports_external_requests(source: Any) -> bool:
    """Whether ``source`` implements ``handle_external_request()``."""
    return not isinstance(source, ExternalRequestUnimplemented) and callable(
        getattr(source, "handle_external_request", None)
    )


def start_interval_stream(
    *,
    cancel: asyncio.Event,
    interval: timedelta,
    event_factory: Callable[[], SourceEvent],
    buffer_size: int = 1,
    name: str = "source",
) -> StreamOutput:
    """Start an emitter and return the handle owning its output queue.

    Returns immediately; the first event arrives one interval later at the
    earliest. Every call creates an independent queue, timer and task.

    Args:
        cancel: Cancellation signal owned by the host.
        interval: Time between events.
        event_factory: Builds the event for each tick.
        buffer_size: Output queue capacity (at least 1).
        name: Label for logs and the task name.
    """
    if buffer_size < 1:
        raise ValueError("buffer_size must be at least 1")

    output: asyncio.Queue[SourceEvent] = asyncio.Queue(maxsize=buffer_size)
    emitter = EventEmitter(
        interval=interval,
        output=output,
        cancel_event=cancel,
        event_factory=event_factory,
        name=name,
    )
    handle = StreamOutput(output=output, cancel_event=cancel)
    handle.attach(emitter.start())
    return handle
