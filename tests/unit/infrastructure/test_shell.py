"""Tests for shell command execution."""

import sys

import pytest

from botplug.core.domain.errors import UpstreamCallError
from botplug.infrastructure.shell import execute_command

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell required")


async def test_returns_stdout() -> None:
    assert await execute_command("echo hello") == "hello\n"


async def test_non_zero_exit_raises() -> None:
    with pytest.raises(UpstreamCallError) as exc_info:
        await execute_command("echo broken >&2; exit 3")
    assert exc_info.value.message == "broken"
    assert exc_info.value.details["returncode"] == 3


async def test_timeout_raises() -> None:
    with pytest.raises(UpstreamCallError, match="timed out"):
        await execute_command("sleep 5", timeout=0.1)
