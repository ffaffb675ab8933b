"""Input and output models of the plugin contracts.

Sources and executors exchange these values with the host. They are plain
immutable dataclasses so any transport adapter can serialize them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from botplug.core.domain.message import Message


@dataclass(frozen=True)
class MetadataOutput:
    """Static plugin description returned by ``metadata()``.

    Attributes:
        version: Plugin version string.
        description: Human-readable description.
        json_schema: JSON schema of the plugin configuration, if any.
    """

    version: str
    description: str
    json_schema: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"version": self.version, "description": self.description}
        if self.json_schema is not None:
            data["json_schema"] = self.json_schema
        return data


@dataclass(frozen=True)
class SourceEvent:
    """A single event produced by a source.

    Events carry no timestamp; the moment of delivery is the emission time.
    """

    message: Message
    raw_object: Any = None


@dataclass(frozen=True)
class StreamInput:
    """Input of ``stream()``.

    Attributes:
        configs: Raw configuration layers, lowest priority first.
        buffer_size: Capacity of the output queue. 1 is the smallest
            hand-off asyncio queues support.
    """

    configs: tuple[bytes, ...] = ()
    buffer_size: int = 1


@dataclass(frozen=True)
class ExternalRequestInput:
    payload: bytes


@dataclass(frozen=True)
class ExternalRequestOutput:
    event: SourceEvent


@dataclass(frozen=True)
class ExecuteContext:
    is_interactivity_supported: bool = False


@dataclass(frozen=True)
class ExecuteInput:
    """Input of ``execute()``: the raw command and the config layers."""

    command: str
    configs: tuple[bytes, ...] = ()
    context: ExecuteContext = field(default_factory=ExecuteContext)


@dataclass(frozen=True)
class ExecuteOutput:
    """Executor response: either plain ``data`` or a rich ``message``."""

    data: str = ""
    message: Message | None = None
