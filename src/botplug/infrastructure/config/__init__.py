"""Configuration layering for plugins."""

from botplug.infrastructure.config.merger import (
    merge_configs,
    merge_executor_configs,
    merge_source_configs_with_defaults,
)
from botplug.infrastructure.config.types import Duration, PositiveDuration

__all__ = [
    "Duration",
    "PositiveDuration",
    "merge_configs",
    "merge_executor_configs",
    "merge_source_configs_with_defaults",
]
