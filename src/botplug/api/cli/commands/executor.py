"""Executor commands - run a single command through an executor."""

import asyncio
from pathlib import Path

import typer

from botplug.api.cli.commands._common import console, fail, print_message, read_config_layers
from botplug.application.plugin_registry import get_executor
from botplug.core.domain.errors import BotplugError
from botplug.core.domain.plugin import ExecuteContext, ExecuteInput

app = typer.Typer(help="Executor plugins")


@app.command("run")
def run(
    name: str = typer.Argument(..., help="Executor name"),
    command: str = typer.Argument(..., help="Command text as typed in chat"),
    config: list[Path] = typer.Option(
        None, "--config", "-c", help="Config layer file, repeat for more (lowest priority first)"
    ),
    interactive: bool = typer.Option(
        True, "--interactive/--no-interactive", help="Whether the platform supports interactivity"
    ),
) -> None:
    """Execute a command and print the response."""
    layers = read_config_layers(config)

    async def _execute():
        executor = get_executor(name)
        return await executor.execute(
            ExecuteInput(
                command=command,
                configs=layers,
                context=ExecuteContext(is_interactivity_supported=interactive),
            )
        )

    try:
        output = asyncio.run(_execute())
    except BotplugError as e:
        fail(e)

    if output.data:
        console.print(output.data, markup=False)
    if output.message is not None:
        print_message(output.message)


@app.command("help")
def show_help(name: str = typer.Argument(..., help="Executor name")) -> None:
    """Print an executor's help message."""

    async def _help():
        return await get_executor(name).help()

    try:
        message = asyncio.run(_help())
    except BotplugError as e:
        fail(e)

    print_message(message)
