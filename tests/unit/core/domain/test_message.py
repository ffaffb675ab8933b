"""Tests for chat message models."""

import pytest

from botplug.core.domain.message import (
    MESSAGE_BOT_NAME_PLACEHOLDER,
    Body,
    ButtonBuilder,
    ButtonDescriptionStyle,
    ButtonStyle,
    Message,
    Section,
    new_code_block_message,
    new_plaintext_message,
)


class TestMessageConstructors:
    def test_plaintext_message(self) -> None:
        msg = new_plaintext_message("hello", use_block=False)
        assert msg.base_body == Body(plaintext="hello")
        assert msg.text == "hello"

    def test_plaintext_message_as_block(self) -> None:
        msg = new_plaintext_message("hello", use_block=True)
        assert msg.base_body == Body(code_block="hello")
        assert msg.text == "hello"

    def test_code_block_message(self) -> None:
        msg = new_code_block_message("kubectl get pods", allow_filter=True)
        assert msg.base_body.code_block == "kubectl get pods"
        assert msg.allow_filter is True

    def test_message_is_immutable(self) -> None:
        msg = new_plaintext_message("hello", use_block=False)
        with pytest.raises(AttributeError):
            msg.replace_original = True  # type: ignore[misc]

    def test_is_empty(self) -> None:
        assert Message().is_empty()
        assert not new_plaintext_message("x", use_block=False).is_empty()


class TestButtonBuilder:
    def test_with_description(self) -> None:
        btn = ButtonBuilder().for_command_with_desc_cmd("Run", "msg buttons act1", ButtonStyle.PRIMARY)
        assert btn.command == f"{MESSAGE_BOT_NAME_PLACEHOLDER} msg buttons act1"
        assert btn.description == btn.command
        assert btn.description_style == ButtonDescriptionStyle.CODE
        assert btn.style == ButtonStyle.PRIMARY

    def test_without_description(self) -> None:
        btn = ButtonBuilder(bot_name="@Bot").for_command_without_desc("Run", "msg act4")
        assert btn.command == "@Bot msg act4"
        assert btn.description == ""
        assert btn.style == ButtonStyle.DEFAULT


def test_to_dict_serializes_nested_values() -> None:
    btn = ButtonBuilder().for_command_without_desc("Run", "x", ButtonStyle.DANGER)
    msg = Message(base_body=Body(plaintext="hi"), sections=(Section(buttons=(btn,)),))

    data = msg.to_dict()

    assert data["base_body"] == {"plaintext": "hi", "code_block": ""}
    assert data["sections"][0]["buttons"][0]["style"] == "danger"
    assert data["plaintext_inputs"] == []
