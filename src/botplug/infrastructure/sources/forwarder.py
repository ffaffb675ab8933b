"""Forwarder source: turns incoming webhook requests into events.

The forwarder does not stream. Each external request carries a JSON payload
such as ``{"message": "deploy finished"}`` and yields exactly one event.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ValidationError

from botplug import __version__
from botplug.core.domain.errors import InvalidPayloadError
from botplug.core.domain.message import new_plaintext_message
from botplug.core.domain.plugin import (
    ExternalRequestInput,
    ExternalRequestOutput,
    MetadataOutput,
    SourceEvent,
)
from botplug.infrastructure.sources.base import StreamUnimplemented

logger = structlog.get_logger(__name__)

PLUGIN_NAME = "forwarder"
DESCRIPTION = "Emits an event every time a message is sent as an incoming webhook request"
EVENT_TEMPLATE = "*Incoming webhook event:* {message}"


class WebhookPayload(BaseModel):
    """Incoming webhook payload."""

    message: str = ""


def parse_payload(raw: bytes) -> WebhookPayload:
    """Deserialize and validate a webhook payload.

    Raises:
        InvalidPayloadError: If the payload is not valid JSON of the expected
            shape, or the message is empty.
    """
    try:
        payload = WebhookPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidPayloadError(
            f"while unmarshaling payload: {exc}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc

    if payload.message == "":
        raise InvalidPayloadError("message cannot be empty")
    return payload


class ForwarderSource(StreamUnimplemented):
    """Converts each webhook payload into a single chat event."""

    async def metadata(self) -> MetadataOutput:
        return MetadataOutput(version=__version__, description=DESCRIPTION)

    async def handle_external_request(
        self, request: ExternalRequestInput
    ) -> ExternalRequestOutput:
        """Build one event from the request payload."""
        payload = parse_payload(request.payload)
        message = new_plaintext_message(
            EVENT_TEMPLATE.format(message=payload.message), use_block=True
        )

        logger.info("forwarder.request.handled", message_length=len(payload.message))
        return ExternalRequestOutput(event=SourceEvent(message=message))
