"""Ticker source: emits an event at a configured interval.

Configuration::

    interval: 30s   # defaults to 1m when no layer sets it
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from datetime import timedelta

import structlog
from pydantic import BaseModel, ConfigDict, Field

from botplug import __version__
from botplug.core.domain.errors import ConfigParseError
from botplug.core.domain.message import new_plaintext_message
from botplug.core.domain.plugin import MetadataOutput, SourceEvent, StreamInput
from botplug.core.domain.stream import StreamOutput
from botplug.infrastructure.config import PositiveDuration, merge_source_configs_with_defaults
from botplug.infrastructure.sources.base import (
    ExternalRequestUnimplemented,
    start_interval_stream,
)

logger = structlog.get_logger(__name__)

PLUGIN_NAME = "ticker"
DESCRIPTION = "Emits an event at a specified interval"
TICKER_EVENT_TEXT = "Ticker Event"
DEFAULT_INTERVAL = timedelta(minutes=1)


class TickerConfig(BaseModel):
    """Ticker source configuration."""

    model_config = ConfigDict(populate_by_name=True)

    interval: PositiveDuration | None = Field(
        None,
        description="Time between two events, e.g. '30s' or '1m'.",
    )


def merge_ticker_configs(configs: Sequence[bytes]) -> TickerConfig:
    """Merge configuration layers on top of the ticker defaults.

    Raises:
        ConfigParseError: If a layer is malformed.
    """
    defaults = TickerConfig(interval=DEFAULT_INTERVAL)
    try:
        return merge_source_configs_with_defaults(defaults, configs)
    except ConfigParseError as exc:
        raise ConfigParseError(
            f"while parsing input configuration: {exc.message}",
            layer_index=exc.layer_index,
            details=exc.details,
        ) from exc


def _ticker_event() -> SourceEvent:
    return SourceEvent(message=new_plaintext_message(TICKER_EVENT_TEXT, use_block=False))


class TickerSource(ExternalRequestUnimplemented):
    """Streams a ``"Ticker Event"`` message once per interval."""

    async def metadata(self) -> MetadataOutput:
        return MetadataOutput(
            version=__version__,
            description=DESCRIPTION,
            json_schema=TickerConfig.model_json_schema(by_alias=True),
        )

    async def stream(self, cancel: asyncio.Event, stream_input: StreamInput) -> StreamOutput:
        """Start emitting after the configured interval, until ``cancel`` is set."""
        cfg = merge_ticker_configs(stream_input.configs)
        interval = cfg.interval or DEFAULT_INTERVAL

        logger.info(
            "ticker.stream.requested",
            layers=len(stream_input.configs),
            interval_s=interval.total_seconds(),
        )
        return start_interval_stream(
            cancel=cancel,
            interval=interval,
            event_factory=_ticker_event,
            buffer_size=stream_input.buffer_size,
            name=PLUGIN_NAME,
        )
