"""Chat message models rendered by the host platform.

Plugins build ``Message`` values and hand them to the host, which renders
them as plaintext, code blocks, buttons, selects or inputs depending on what
the chat platform supports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

MESSAGE_BOT_NAME_PLACEHOLDER = "{{BotName}}"
"""Replaced by the host with the bot mention for the target platform."""


class ButtonStyle(str, Enum):
    """Visual style of an interactive button."""

    DEFAULT = ""
    PRIMARY = "primary"
    DANGER = "danger"


class ButtonDescriptionStyle(str, Enum):
    """How the button description is rendered next to the button."""

    UNKNOWN = ""
    CODE = "code"
    TEXT = "text"


class DispatchInputAction(str, Enum):
    """When a plaintext input dispatches its command."""

    EMPTY = ""
    ON_CHARACTER_ENTERED = "on_character_entered"
    ON_ENTER_PRESSED = "on_enter_pressed"


@dataclass(frozen=True)
class Body:
    """Message body holding either plaintext or a code block."""

    plaintext: str = ""
    code_block: str = ""


@dataclass(frozen=True)
class Button:
    """A button that runs a bot command when pressed."""

    name: str
    command: str
    description: str = ""
    description_style: ButtonDescriptionStyle = ButtonDescriptionStyle.UNKNOWN
    style: ButtonStyle = ButtonStyle.DEFAULT


@dataclass(frozen=True)
class OptionItem:
    name: str
    value: str


@dataclass(frozen=True)
class OptionGroup:
    name: str
    options: tuple[OptionItem, ...] = ()


@dataclass(frozen=True)
class Select:
    """A dropdown that runs ``command`` with the selected value appended.

    ``initial_option`` must also be listed in one of ``option_groups``.
    """

    name: str
    command: str
    option_groups: tuple[OptionGroup, ...] = ()
    initial_option: OptionItem | None = None


@dataclass(frozen=True)
class Selects:
    id: str = ""
    items: tuple[Select, ...] = ()


@dataclass(frozen=True)
class Section:
    """A group of interactive elements rendered together."""

    base: Body = field(default_factory=Body)
    buttons: tuple[Button, ...] = ()
    selects: Selects = field(default_factory=Selects)


@dataclass(frozen=True)
class LabelInput:
    """A plaintext input that dispatches ``command`` with the typed text."""

    command: str
    text: str = ""
    placeholder: str = ""
    dispatched_action: DispatchInputAction = DispatchInputAction.EMPTY


@dataclass(frozen=True)
class Message:
    """A chat message produced by a plugin.

    Attributes:
        base_body: Top-level body rendered before any section.
        sections: Interactive sections (buttons, selects).
        plaintext_inputs: Free-text inputs.
        only_visible_for_you: Render as ephemeral message when supported.
        replace_original: Replace the message that triggered the command.
        allow_filter: Host may attach a filter input to the code block.
    """

    base_body: Body = field(default_factory=Body)
    sections: tuple[Section, ...] = ()
    plaintext_inputs: tuple[LabelInput, ...] = ()
    only_visible_for_you: bool = False
    replace_original: bool = False
    allow_filter: bool = False

    @property
    def text(self) -> str:
        """Return the textual content of the base body."""
        return self.base_body.plaintext or self.base_body.code_block

    def is_empty(self) -> bool:
        return (
            not self.base_body.plaintext
            and not self.base_body.code_block
            and not self.sections
            and not self.plaintext_inputs
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the message for transport to the host."""
        return _to_plain(self)


def new_plaintext_message(text: str, use_block: bool) -> Message:
    """Build a message with ``text`` as plaintext, or as a code block when ``use_block``."""
    if use_block:
        return Message(base_body=Body(code_block=text))
    return Message(base_body=Body(plaintext=text))


def new_code_block_message(text: str, allow_filter: bool) -> Message:
    """Build a code-block message, optionally letting the host offer an output filter."""
    return Message(base_body=Body(code_block=text), allow_filter=allow_filter)


class ButtonBuilder:
    """Builds buttons whose commands address the bot by its placeholder name."""

    def __init__(self, bot_name: str = MESSAGE_BOT_NAME_PLACEHOLDER) -> None:
        self._bot_name = bot_name

    def for_command_with_desc_cmd(
        self, name: str, cmd: str, style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        """Button that also shows the full command as a code description."""
        command = self._command_with_bot(cmd)
        return Button(
            name=name,
            command=command,
            description=command,
            description_style=ButtonDescriptionStyle.CODE,
            style=style,
        )

    def for_command_without_desc(
        self, name: str, cmd: str, style: ButtonStyle = ButtonStyle.DEFAULT
    ) -> Button:
        return Button(name=name, command=self._command_with_bot(cmd), style=style)

    def _command_with_bot(self, cmd: str) -> str:
        return f"{self._bot_name} {cmd}"


def _to_plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_to_plain(item) for item in value]
    if hasattr(value, "__dataclass_fields__"):
        return {name: _to_plain(getattr(value, name)) for name in value.__dataclass_fields__}
    return value
