"""Executor plugins."""

from botplug.infrastructure.executors.base import HelpUnimplemented
from botplug.infrastructure.executors.echo import EchoExecutor
from botplug.infrastructure.executors.gh import GhExecutor
from botplug.infrastructure.executors.msg import MsgExecutor

__all__ = ["EchoExecutor", "GhExecutor", "HelpUnimplemented", "MsgExecutor"]
