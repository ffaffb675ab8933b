"""Source plugins and the stream lifecycle they share."""

from botplug.infrastructure.sources.base import (
    ExternalRequestUnimplemented,
    StreamUnimplemented,
    start_interval_stream,
    supports_external_requests,
    supports_streaming,
)
from botplug.infrastructure.sources.emitter import EmitterState, EventEmitter
from botplug.infrastructure.sources.forwarder import ForwarderSource
from botplug.infrastructure.sources.ticker import TickerSource

__all__ = [
    "EmitterState",
    "EventEmitter",
    "ExternalRequestUnimplemented",
    "ForwarderSource",
    "StreamUnimplemented",
    "TickerSource",
    "start_interval_stream",
    "supports_external_requests",
    "supports_streaming",
]
