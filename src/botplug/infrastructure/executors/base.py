"""Shared helpers for executor plugins."""

from __future__ import annotations

import argparse
import shlex
from typing import NoReturn

from botplug.core.domain.errors import InvalidCommandError, UnsupportedOperationError
from botplug.core.domain.message import Message


class HelpUnimplemented:
    """Mixin for executors that ship no help message."""

    async def help(self) -> Message:
        raise UnsupportedOperationError(
            "help is not supported by this executor", operation="help"
        )


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("add_help", False)
        super().__init__(*args, **kwargs)

    def error(self, message: str) -> NoReturn:
        raise InvalidCommandError(message, details={"usage": self.format_usage().strip()})


def split_command(plugin_name: str, command: str) -> list[str]:
    """Tokenize ``command`` and drop the leading plugin name, if present.

    Raises:
        InvalidCommandError: If the command has unbalanced quotes.
    """
    try:
        tokens = shlex.split(command)
    except ValueError as exc:
        raise InvalidCommandError(f"while tokenizing command: {exc}") from exc
    if tokens and tokens[0] == plugin_name:
        tokens = tokens[1:]
    return tokens
