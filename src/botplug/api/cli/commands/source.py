"""Source commands - run a stream or send one external request."""

import asyncio
from pathlib import Path

import typer

from botplug.api.cli.commands._common import console, fail, print_message, read_config_layers
from botplug.application.plugin_registry import get_source
from botplug.core.domain.errors import BotplugError
from botplug.core.domain.plugin import ExternalRequestInput, StreamInput

app = typer.Typer(help="Source plugins")


@app.command("stream")
def stream(
    name: str = typer.Argument(..., help="Source name"),
    config: list[Path] = typer.Option(
        None, "--config", "-c", help="Config layer file, repeat for more (lowest priority first)"
    ),
    count: int = typer.Option(0, "--count", "-n", help="Stop after N events (0 = until Ctrl+C)"),
    buffer_size: int = typer.Option(1, "--buffer-size", help="Output queue capacity"),
) -> None:
    """Stream events from a source until cancelled."""
    layers = read_config_layers(config)

    async def _stream() -> int:
        source = get_source(name)
        cancel = asyncio.Event()
        handle = await source.stream(cancel, StreamInput(configs=layers, buffer_size=buffer_size))
        received = 0
        try:
            async for event in handle:
                received += 1
                console.print(f"[bold blue]#{received}[/bold blue]")
                print_message(event.message)
                if count and received >= count:
                    handle.cancel()
        finally:
            await handle.aclose()
        return received

    try:
        received = asyncio.run(_stream())
    except KeyboardInterrupt:
        console.print("\n[yellow]Stream cancelled.[/yellow]")
        return
    except BotplugError as e:
        fail(e)

    console.print(f"[green]Stream finished after {received} event(s).[/green]")


@app.command("webhook")
def webhook(
    name: str = typer.Argument(..., help="Source name"),
    payload: str = typer.Argument(..., help='Raw payload, e.g. \'{"message": "hi"}\''),
) -> None:
    """Send one external request to a source and print the resulting event."""

    async def _handle():
        source = get_source(name)
        return await source.handle_external_request(
            ExternalRequestInput(payload=payload.encode())
        )

    try:
        output = asyncio.run(_handle())
    except BotplugError as e:
        fail(e)

    print_message(output.event.message)
