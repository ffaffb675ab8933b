"""Shell command execution for executors that gather cluster details."""

from __future__ import annotations

import asyncio

import structlog

from botplug.core.domain.errors import UpstreamCallError

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


async def execute_command(command: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Run ``command`` in a shell and return its standard output.

    Args:
        command: Shell command line.
        timeout: Seconds to wait before the process is killed.

    Returns:
        Decoded standard output.

    Raises:
        UpstreamCallError: If the process cannot be spawned, times out, or
            exits with a non-zero code.
    """
    try:
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise UpstreamCallError(
            f"while starting command: {exc}", details={"command": command}
        ) from exc

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError as exc:
        process.kill()
        await process.wait()
        raise UpstreamCallError(
            f"command timed out after {timeout:g}s",
            details={"command": command},
        ) from exc

    stdout_text = stdout.decode() if stdout else ""
    stderr_text = stderr.decode() if stderr else ""

    if process.returncode != 0:
        logger.warning(
            "shell.command.failed",
            command=command,
            returncode=process.returncode,
        )
        raise UpstreamCallError(
            stderr_text.strip() or f"command failed with code {process.returncode}",
            details={"command": command, "returncode": process.returncode},
        )

    logger.debug("shell.command.completed", command=command)
    return stdout_text
