"""Source Protocol for event-producing plugins.

Defines the contract a host uses to drive a source plugin: a static
metadata call, a long-running stream, and an optional out-of-band
external-request handler.
"""

import asyncio
from typing import Protocol, runtime_checkable

from botplug.core.domain.plugin import (
    ExternalRequestInput,
    ExternalRequestOutput,
    MetadataOutput,
    StreamInput,
)
from botplug.core.domain.stream import StreamOutput


@runtime_checkable
class SourceProtocol(Protocol):
    """Protocol for source plugins.

    Lifecycle:
        1. Host calls metadata() at any time to describe the plugin
        2. stream() merges the config layers and starts producing events
        3. Host reads events from the returned StreamOutput
        4. Host sets the cancellation event to stop the stream

    A source may support only one of the two event surfaces. Unsupported
    calls raise UnsupportedOperationError.
    """

    async def metadata(self) -> MetadataOutput:
        """Describe the plugin. Pure, callable at any time.

        Returns:
            Version, description and optional config JSON schema.
        """
        ...

    async def stream(self, cancel: asyncio.Event, stream_input: StreamInput) -> StreamOutput:
        """Start producing events until ``cancel`` is set.

        Args:
            cancel: Cancellation signal owned by the host.
            stream_input: Raw configuration layers, lowest priority first.

        Returns:
            Handle owning the output queue. Returns before any event is produced.

        Raises:
            ConfigParseError: If a configuration layer is malformed.
            UnsupportedOperationError: If the source does not stream.
        """
        ...

    async def handle_external_request(
        self, request: ExternalRequestInput
    ) -> ExternalRequestOutput:
        """Convert one inbound payload into exactly one event.

        Raises:
            InvalidPayloadError: If the payload is malformed or incomplete.
            UnsupportedOperationError: If the source does not accept requests.
        """
        ...
