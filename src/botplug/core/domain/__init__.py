"""
Domain Models

This package contains the core domain models shared by every plugin:
- Chat message models
- Plugin contract inputs and outputs
- The stream handle
- Error taxonomy
"""

from botplug.core.domain.errors import (
    BotplugError,
    ConfigParseError,
    InvalidCommandError,
    InvalidPayloadError,
    PluginNotFoundError,
    UnsupportedOperationError,
    UpstreamCallError,
)
from botplug.core.domain.message import Message, new_code_block_message, new_plaintext_message
from botplug.core.domain.plugin import (
    ExecuteContext,
    ExecuteInput,
    ExecuteOutput,
    ExternalRequestInput,
    ExternalRequestOutput,
    MetadataOutput,
    SourceEvent,
    StreamInput,
)
from botplug.core.domain.stream import StreamOutput

__all__ = [
    "BotplugError",
    "ConfigParseError",
    "ExecuteContext",
    "ExecuteInput",
    "ExecuteOutput",
    "ExternalRequestInput",
    "ExternalRequestOutput",
    "InvalidCommandError",
    "InvalidPayloadError",
    "Message",
    "MetadataOutput",
    "PluginNotFoundError",
    "SourceEvent",
    "StreamInput",
    "StreamOutput",
    "UnsupportedOperationError",
    "UpstreamCallError",
    "new_code_block_message",
    "new_plaintext_message",
]
