"""Echo executor: sends back the command that was specified.

Configuration::

    transformResponseToUpperCase: true
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from botplug import __version__
from botplug.core.domain.message import Message, new_plaintext_message
from botplug.core.domain.plugin import ExecuteInput, ExecuteOutput, MetadataOutput
from botplug.infrastructure.config import merge_executor_configs

PLUGIN_NAME = "echo"
DESCRIPTION = "Echo sends back the command that was specified."


class EchoConfig(BaseModel):
    """Echo executor configuration."""

    model_config = ConfigDict(populate_by_name=True)

    transform_response_to_upper_case: bool | None = Field(
        None,
        alias="transformResponseToUpperCase",
        description="Upper-case the echoed command.",
    )


class EchoExecutor:
    async def metadata(self) -> MetadataOutput:
        return MetadataOutput(
            version=__version__,
            description=DESCRIPTION,
            json_schema=EchoConfig.model_json_schema(by_alias=True),
        )

    async def execute(self, execute_input: ExecuteInput) -> ExecuteOutput:
        """Return the command, upper-cased when configured."""
        cfg = merge_executor_configs(execute_input.configs, EchoConfig)

        response = execute_input.command
        if cfg.transform_response_to_upper_case:
            response = response.upper()

        return ExecuteOutput(data=f"Echo: {response}")

    async def help(self) -> Message:
        return new_plaintext_message(DESCRIPTION, use_block=False)
