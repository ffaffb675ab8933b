"""Tests for the interactive message executor."""

import pytest

from botplug.core.domain.message import MESSAGE_BOT_NAME_PLACEHOLDER, ButtonStyle
from botplug.core.domain.plugin import ExecuteContext, ExecuteInput
from botplug.infrastructure.executors.msg import MsgExecutor, initial_message

INTERACTIVE = ExecuteContext(is_interactivity_supported=True)


@pytest.fixture
def executor() -> MsgExecutor:
    return MsgExecutor()


async def test_interactivity_not_supported(executor: MsgExecutor) -> None:
    output = await executor.execute(ExecuteInput(command="msg"))
    assert output.message.base_body.code_block == (
        "Interactivity for this platform is not supported"
    )


async def test_bare_command_returns_showcase(executor: MsgExecutor) -> None:
    output = await executor.execute(ExecuteInput(command="  msg ", context=INTERACTIVE))
    assert output.message == initial_message()


async def test_other_command_is_echoed_in_code_block(executor: MsgExecutor) -> None:
    output = await executor.execute(
        ExecuteInput(command="msg buttons act1", context=INTERACTIVE)
    )
    assert output.message.base_body.code_block == "Plain command: msg buttons act1"


class TestInitialMessage:
    def test_structure(self) -> None:
        message = initial_message()
        assert message.base_body.plaintext == "Showcases interactive message capabilities"
        assert len(message.sections) == 3
        assert [len(section.buttons) for section in message.sections[:2]] == [3, 3]
        assert len(message.plaintext_inputs) == 1

    def test_button_styles_and_commands(self) -> None:
        first_row = initial_message().sections[0].buttons
        assert [button.style for button in first_row] == [
            ButtonStyle.DEFAULT,
            ButtonStyle.PRIMARY,
            ButtonStyle.DANGER,
        ]
        assert first_row[0].command == f"{MESSAGE_BOT_NAME_PLACEHOLDER} msg buttons act1"
        assert first_row[0].description == first_row[0].command

        second_row = initial_message().sections[1].buttons
        assert all(button.description == "" for button in second_row)

    def test_initial_option_is_listed_in_groups(self) -> None:
        second = initial_message().sections[2].selects.items[1]
        options = [option for group in second.option_groups for option in group.options]
        assert second.initial_option in options


async def test_help_mentions_invocation(executor: MsgExecutor) -> None:
    message = await executor.help()
    assert f"`{MESSAGE_BOT_NAME_PLACEHOLDER} msg`" in message.text
