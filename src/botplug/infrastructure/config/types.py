"""Reusable pydantic field types for plugin configuration models."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator

from botplug.core.utils.duration import parse_duration


def _require_positive(value: timedelta) -> timedelta:
    if value <= timedelta(0):
        raise ValueError("duration must be positive")
    return value


Duration = Annotated[timedelta, BeforeValidator(parse_duration)]
"""A timedelta that also accepts ``"1m"``-style strings and plain seconds."""

PositiveDuration = Annotated[Duration, AfterValidator(_require_positive)]
