"""Plugins command - list registered plugins and show their metadata."""

import asyncio

import typer
from rich.table import Table

from botplug.api.cli.commands._common import console, fail
from botplug.application.plugin_registry import (
    EXECUTORS_GROUP,
    SOURCES_GROUP,
    discover_all_plugins,
    get_executor,
    get_source,
)
from botplug.core.domain.errors import BotplugError, PluginNotFoundError

app = typer.Typer(help="Plugin discovery")


@app.command("list")
def list_plugins() -> None:
    """List registered sources and executors."""
    table = Table(title="Registered Plugins")
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Entry point", style="white")
    table.add_column("Status", style="green")

    for info in discover_all_plugins():
        status = "ok" if info.error is None else f"[red]{info.error}[/red]"
        table.add_row(info.name, info.kind, info.entry_point, status)

    console.print(table)


@app.command("metadata")
def show_metadata(
    name: str = typer.Argument(..., help="Plugin name"),
    kind: str = typer.Option("source", "--kind", "-k", help="Plugin kind: source or executor"),
) -> None:
    """Print plugin metadata as JSON."""
    if kind not in ("source", "executor"):
        console.print(f"[red]Unknown plugin kind: {kind}[/red]")
        raise typer.Exit(1)

    async def _metadata():
        plugin = get_source(name) if kind == "source" else get_executor(name)
        return await plugin.metadata()

    try:
        metadata = asyncio.run(_metadata())
    except PluginNotFoundError as e:
        group = SOURCES_GROUP if kind == "source" else EXECUTORS_GROUP
        console.print(f"[yellow]Check the '{group}' entry points.[/yellow]")
        fail(e)
    except BotplugError as e:
        fail(e)

    console.print_json(data=metadata.to_dict())
