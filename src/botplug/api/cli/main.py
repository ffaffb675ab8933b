"""botplug CLI entry point.

A minimal in-process host for running plugins from a terminal.
"""

import logging
import sys

import structlog
import typer
from rich.console import Console

from botplug.api.cli.commands import executor, plugins, source

app = typer.Typer(
    name="botplug",
    help="botplug - pluggable executors and event sources for chat operations",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register command groups
app.add_typer(plugins.app, name="plugins", help="Plugin discovery")
app.add_typer(source.app, name="source", help="Source plugins")
app.add_typer(executor.app, name="executor", help="Executor plugins")


def configure_logging(debug: bool) -> None:
    """Route structlog through stdlib logging on stderr at INFO, or DEBUG with ``--debug``."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """botplug CLI."""
    configure_logging(debug)
    ctx.obj = {"debug": debug}


@app.command()
def version():
    """Show botplug version."""
    from botplug import __version__

    console.print(f"[bold blue]Version:[/bold blue] [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
