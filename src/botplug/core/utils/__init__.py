"""
Core utilities module.

Provides shared utility functions used across all layers.
"""

from botplug.core.utils.duration import format_duration, parse_duration

__all__ = ["format_duration", "parse_duration"]
