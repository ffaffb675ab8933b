"""Helpers shared by the CLI commands."""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from botplug.core.domain.errors import BotplugError
from botplug.core.domain.message import Message

console = Console()
err_console = Console(stderr=True)


def read_config_layers(paths: list[Path] | None) -> tuple[bytes, ...]:
    """Read config files in the given order, lowest priority first."""
    layers = []
    for path in paths or []:
        if not path.exists():
            err_console.print(f"[red]Config file not found: {path}[/red]")
            raise typer.Exit(1)
        layers.append(path.read_bytes())
    return tuple(layers)


def fail(error: BotplugError) -> NoReturn:
    """Print a domain error and exit with code 1."""
    err_console.print(f"[red]{error.code}:[/red] {error.message}")
    raise typer.Exit(1)


def print_message(message: Message) -> None:
    if message.base_body.plaintext:
        console.print(message.base_body.plaintext, markup=False)
    if message.base_body.code_block:
        console.print(f"```\n{message.base_body.code_block}\n```", markup=False)
    if message.sections or message.plaintext_inputs:
        console.print_json(data=message.to_dict())
