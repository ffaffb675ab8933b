"""Duration parsing for configuration values.

Config files express intervals the way the chat platform documents them,
e.g. ``"30s"``, ``"1m"`` or ``"1h30m"``. Plain numbers are seconds.
"""

from __future__ import annotations

import math
import re
from datetime import timedelta

_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: str | int | float | timedelta) -> timedelta:
    """Parse a duration string such as ``"1h30m"`` into a timedelta.

    Args:
        value: Duration string, number of seconds, or timedelta.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return _to_timedelta(value, value)
    if not isinstance(value, str):
        raise ValueError(f"invalid duration: {value!r}")

    text = value.strip()
    if text in ("0", "+0", "-0"):
        return timedelta(0)

    sign = 1.0
    if text[:1] in ("+", "-"):
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]

    if not text:
        raise ValueError(f"invalid duration: {value!r}")

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration: {value!r}")
        number, unit = match.groups()
        total += float(number) * _UNITS[unit]
        pos = match.end()

    return _to_timedelta(sign * total, value)


def _to_timedelta(seconds: float, value: object) -> timedelta:
    try:
        if not math.isfinite(seconds):
            raise ValueError(f"invalid duration: {value!r}")
        return timedelta(seconds=seconds)
    except OverflowError as exc:
        raise ValueError(f"duration out of range: {value!r}") from exc


def format_duration(value: timedelta) -> str:
    """Render a timedelta in the same compact notation, e.g. ``"1h30m0s"``."""
    total = value.total_seconds()
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)
    if total < 1:
        return f"{sign}{total * 1000:g}ms"
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if hours:
        parts.append(f"{int(hours)}h")
    if hours or minutes:
        parts.append(f"{int(minutes)}m")
    parts.append(f"{seconds:g}s")
    return sign + "".join(parts)
