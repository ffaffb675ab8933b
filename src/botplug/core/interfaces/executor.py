"""Executor Protocol for request/response command plugins."""

from typing import Protocol, runtime_checkable

from botplug.core.domain.message import Message
from botplug.core.domain.plugin import ExecuteInput, ExecuteOutput, MetadataOutput


@runtime_checkable
class ExecutorProtocol(Protocol):
    """Protocol for executor plugins.

    Executors handle a single command per call. They hold no state between
    calls; configuration layers arrive with every invocation.
    """

    async def metadata(self) -> MetadataOutput:
        """Describe the plugin."""
        ...

    async def execute(self, execute_input: ExecuteInput) -> ExecuteOutput:
        """Run one command and return its response.

        Raises:
            ConfigParseError: If a configuration layer is malformed.
            UpstreamCallError: If an external call made by the executor fails.
        """
        ...

    async def help(self) -> Message:
        """Return a help message for the plugin.

        Raises:
            UnsupportedOperationError: If the executor ships no help.
        """
        ...
