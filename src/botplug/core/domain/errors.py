"""Domain-specific exception types for botplug."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class BotplugError(Exception):
    """Base exception for botplug domain errors."""

    message: str
    code: str = "botplug_error"
    details: Dict[str, Any] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.details is None:
            self.details = {}


class ConfigParseError(BotplugError):
    """Error raised when a configuration layer cannot be deserialized."""

    def __init__(
        self,
        message: str,
        *,
        layer_index: int | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if layer_index is not None:
            details.setdefault("layer_index", layer_index)
        self.layer_index = layer_index
        super().__init__(message=message, code="config_parse_error", details=details)


class InvalidPayloadError(BotplugError):
    """Error raised for malformed or incomplete external-request payloads."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="invalid_payload", details=details)


class UnsupportedOperationError(BotplugError):
    """Error raised when a plugin does not implement the requested capability."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        details: Dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if operation:
            details.setdefault("operation", operation)
        self.operation = operation
        super().__init__(message=message, code="unsupported_operation", details=details)


class UpstreamCallError(BotplugError):
    """Error raised when an external side-effecting call fails."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="upstream_call_error", details=details)


class PluginNotFoundError(BotplugError):
    """Error raised when no plugin is registered under the requested name."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="plugin_not_found", details=details)


class InvalidCommandError(BotplugError):
    """Error raised when an executor command cannot be parsed."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code="invalid_command", details=details)
