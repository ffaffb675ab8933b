"""Test configuration and shared fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _quiet_structlog() -> Iterator[None]:
    """Keep structlog output out of captured test output."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(50),
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def cancel_event() -> asyncio.Event:
    """Host-owned cancellation signal for a single stream."""
    return asyncio.Event()
