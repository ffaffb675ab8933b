"""
Core Protocol Interfaces

Protocols describing what a host may call on a plugin. Hosts depend on
these contracts, never on concrete plugin classes.

Available Protocols:
    - SourceProtocol: Event-producing plugins
    - ExecutorProtocol: Request/response command plugins
"""

from botplug.core.interfaces.executor import ExecutorProtocol
from botplug.core.interfaces.source import SourceProtocol

__all__ = ["ExecutorProtocol", "SourceProtocol"]
