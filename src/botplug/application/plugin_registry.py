"""
Plugin discovery via entry points.

Sources and executors are registered as setuptools entry points, so
third-party packages can ship their own plugins without touching botplug:

    [project.entry-points."botplug.sources"]
    ticker = "botplug.infrastructure.sources.ticker:TickerSource"

    [project.entry-points."botplug.executors"]
    echo = "botplug.infrastructure.executors.echo:EchoExecutor"

Built-in plugins are registered the same way in botplug's own pyproject.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any

import structlog

from botplug.core.domain.errors import PluginNotFoundError
from botplug.core.interfaces.executor import ExecutorProtocol
from botplug.core.interfaces.source import SourceProtocol

logger = structlog.get_logger(__name__)

SOURCES_GROUP = "botplug.sources"
EXECUTORS_GROUP = "botplug.executors"


@dataclass
class PluginInfo:
    """Information about a discovered plugin."""

    name: str
    group: str
    entry_point: str
    plugin_class: type | None = None
    error: str | None = None

    @property
    def kind(self) -> str:
        return "source" if self.group == SOURCES_GROUP else "executor"


def discover_plugins(group: str) -> list[PluginInfo]:
    """Discover plugins registered under an entry-point group.

    Plugins that fail to import are returned with ``error`` set rather than
    raising, so one broken plugin does not hide the others.
    """
    discovered: list[PluginInfo] = []

    for ep in entry_points(group=group):
        info = PluginInfo(name=ep.name, group=group, entry_point=ep.value)
        try:
            info.plugin_class = ep.load()
            logger.debug("plugin.discovered", plugin_name=ep.name, entry_point=ep.value)
        except (ImportError, AttributeError) as e:
            info.error = str(e)
            logger.warning(
                "plugin.discovery_failed",
                plugin_name=ep.name,
                entry_point=ep.value,
                error=str(e),
                error_type=type(e).__name__,
            )
        discovered.append(info)

    return sorted(discovered, key=lambda item: item.name)


def discover_all_plugins() -> list[PluginInfo]:
    """Discover every registered source and executor."""
    return discover_plugins(SOURCES_GROUP) + discover_plugins(EXECUTORS_GROUP)


def _instantiate(name: str, group: str) -> Any:
    for info in discover_plugins(group):
        if info.name != name:
            continue
        if info.plugin_class is None:
            raise PluginNotFoundError(
                f"plugin {name!r} failed to load: {info.error}",
                details={"plugin": name, "group": group},
            )
        return info.plugin_class()

    raise PluginNotFoundError(
        f"no plugin named {name!r} in {group}",
        details={"plugin": name, "group": group},
    )


def get_source(name: str) -> SourceProtocol:
    """Instantiate the source registered as ``name``.

    Raises:
        PluginNotFoundError: If no such source is registered or it fails to load.
    """
    return _instantiate(name, SOURCES_GROUP)


def get_executor(name: str) -> ExecutorProtocol:
    """Instantiate the executor registered as ``name``.

    Raises:
        PluginNotFoundError: If no such executor is registered or it fails to load.
    """
    return _instantiate(name, EXECUTORS_GROUP)
