"""
Layered configuration merging.

The host hands every plugin call an ordered list of raw configuration
documents (global defaults, per-channel overrides, ...). This module folds
them into one typed configuration:

- Layers are applied lowest priority first, in the order supplied.
- Only fields that a layer explicitly sets to a non-null value override the
  accumulated value. Missing or ``null`` fields never reset anything.
- Nested models merge field by field.
- The first layer that fails to parse or validate aborts the merge.

Last-wins per field is the only strategy. There is no list concatenation
or key deletion.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import structlog
import yaml
from pydantic import BaseModel, ValidationError

from botplug.core.domain.errors import ConfigParseError

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def merge_configs(
    layers: Sequence[bytes],
    model: type[ModelT],
    defaults: ModelT | None = None,
) -> ModelT:
    """Merge raw configuration layers into one instance of ``model``.

    Args:
        layers: Raw YAML or JSON documents, lowest priority first.
        model: Pydantic model describing the configuration.
        defaults: Starting values. Fields untouched by every layer keep them.

    Returns:
        The effective configuration.

    Raises:
        ConfigParseError: If any layer cannot be deserialized or validated.
    """
    merged: dict[str, Any] = (
        defaults.model_dump(by_alias=True, exclude_none=True) if defaults is not None else {}
    )

    for index, raw in enumerate(layers):
        layer = _parse_layer(raw, model, index)
        _deep_update(
            merged, layer.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        )

    try:
        effective = model.model_validate(merged)
    except ValidationError as exc:
        raise ConfigParseError(
            f"merged configuration is invalid: {exc}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc

    logger.debug(
        "config.merge.completed",
        model=model.__name__,
        layers=len(layers),
    )
    return effective


def merge_source_configs_with_defaults(
    defaults: ModelT, layers: Sequence[bytes]
) -> ModelT:
    """Merge source configuration layers on top of compiled-in defaults."""
    return merge_configs(layers, type(defaults), defaults)


def merge_executor_configs(layers: Sequence[bytes], model: type[ModelT]) -> ModelT:
    """Merge executor configuration layers starting from the model's own defaults."""
    return merge_configs(layers, model)


def _parse_layer(raw: bytes, model: type[ModelT], index: int) -> ModelT:
    """Deserialize and validate a single layer."""
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigParseError(
            f"while parsing configuration layer {index}: {exc}",
            layer_index=index,
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"while parsing configuration layer {index}: expected a mapping, "
            f"got {type(data).__name__}",
            layer_index=index,
        )

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(
            f"while parsing configuration layer {index}: {exc}",
            layer_index=index,
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def _deep_update(target: dict[str, Any], overrides: dict[str, Any]) -> None:
    for key, value in overrides.items():
        current = target.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            _deep_update(current, value)
        else:
            target[key] = value
