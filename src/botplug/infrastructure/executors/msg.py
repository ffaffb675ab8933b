"""Msg executor: showcases interactive message capabilities."""

from __future__ import annotations

from botplug import __version__
from botplug.core.domain.message import (
    MESSAGE_BOT_NAME_PLACEHOLDER,
    Body,
    ButtonBuilder,
    ButtonStyle,
    DispatchInputAction,
    LabelInput,
    Message,
    OptionGroup,
    OptionItem,
    Section,
    Select,
    Selects,
    new_code_block_message,
    new_plaintext_message,
)
from botplug.core.domain.plugin import ExecuteInput, ExecuteOutput, MetadataOutput

PLUGIN_NAME = "msg"
DESCRIPTION = "Msg sends an example interactive messages."
INTERACTIVITY_NOT_SUPPORTED = "Interactivity for this platform is not supported"

_SAMPLE_OPTIONS = (
    OptionItem(name="BAR", value="BAR"),
    OptionItem(name="BAZ", value="BAZ"),
    OptionItem(name="XYZ", value="XYZ"),
)
_NUMBER_OPTIONS = (
    OptionItem(name="123", value="123"),
    OptionItem(name="456", value="456"),
    OptionItem(name="789", value="789"),
)


def _cmd_prefix(cmd: str) -> str:
    return f"{MESSAGE_BOT_NAME_PLACEHOLDER} {PLUGIN_NAME} {cmd}"


def initial_message() -> Message:
    """Build the interactive showcase: buttons, selects and a text input."""
    buttons = ButtonBuilder()
    with_desc = (
        buttons.for_command_with_desc_cmd("Run act1", f"{PLUGIN_NAME} buttons act1"),
        buttons.for_command_with_desc_cmd(
            "Run act2", f"{PLUGIN_NAME} buttons act2", ButtonStyle.PRIMARY
        ),
        buttons.for_command_with_desc_cmd(
            "Run act3", f"{PLUGIN_NAME} buttons act3", ButtonStyle.DANGER
        ),
    )
    without_desc = (
        buttons.for_command_without_desc("Run act4", f"{PLUGIN_NAME} buttons act4"),
        buttons.for_command_without_desc(
            "Run act5", f"{PLUGIN_NAME} buttons act5", ButtonStyle.PRIMARY
        ),
        buttons.for_command_without_desc(
            "Run act6", f"{PLUGIN_NAME} buttons act6", ButtonStyle.DANGER
        ),
    )

    selects = Selects(
        id="select-id",
        items=(
            Select(
                name="first",
                command=_cmd_prefix("selects first"),
                option_groups=(
                    OptionGroup(name=_cmd_prefix("selects first"), options=_SAMPLE_OPTIONS),
                ),
            ),
            Select(
                name="second",
                command=_cmd_prefix("selects second"),
                option_groups=(
                    OptionGroup(name=_cmd_prefix("selects second"), options=_SAMPLE_OPTIONS),
                    OptionGroup(
                        name=_cmd_prefix("selects second/section2"), options=_NUMBER_OPTIONS
                    ),
                ),
                # Must also appear in one of the option groups.
                initial_option=OptionItem(name="789", value="789"),
            ),
        ),
    )

    return Message(
        base_body=Body(plaintext="Showcases interactive message capabilities"),
        sections=(
            Section(buttons=with_desc),
            Section(buttons=without_desc),
            Section(selects=selects),
        ),
        plaintext_inputs=(
            LabelInput(
                command=_cmd_prefix("input-text"),
                dispatched_action=DispatchInputAction.ON_ENTER_PRESSED,
                placeholder="String pattern to filter by",
                text="Filter output",
            ),
        ),
        only_visible_for_you=False,
        replace_original=False,
    )


class MsgExecutor:
    async def metadata(self) -> MetadataOutput:
        return MetadataOutput(version=__version__, description=DESCRIPTION)

    async def execute(self, execute_input: ExecuteInput) -> ExecuteOutput:
        """Answer with the showcase for a bare ``msg``, else echo the command."""
        if not execute_input.context.is_interactivity_supported:
            return ExecuteOutput(
                message=new_code_block_message(INTERACTIVITY_NOT_SUPPORTED, allow_filter=True)
            )

        if execute_input.command.strip() == PLUGIN_NAME:
            return ExecuteOutput(message=initial_message())

        return ExecuteOutput(
            message=new_code_block_message(
                f"Plain command: {execute_input.command}", allow_filter=True
            )
        )

    async def help(self) -> Message:
        text = f"{DESCRIPTION}\nJust type `{MESSAGE_BOT_NAME_PLACEHOLDER} {PLUGIN_NAME}`"
        return new_plaintext_message(text, use_block=False)
