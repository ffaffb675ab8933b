"""Tests for domain error types."""

import pytest

from botplug.core.domain.errors import (
    BotplugError,
    ConfigParseError,
    InvalidCommandError,
    InvalidPayloadError,
    PluginNotFoundError,
    UnsupportedOperationError,
    UpstreamCallError,
)


class TestBotplugError:
    """Tests for BotplugError base exception."""

    def test_create_basic(self) -> None:
        err = BotplugError(message="Something failed")
        assert err.message == "Something failed"
        assert err.code == "botplug_error"
        assert err.details == {}

    def test_str_representation(self) -> None:
        err = BotplugError(message="Something broke")
        assert str(err) == "Something broke"

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(BotplugError) as exc_info:
            raise BotplugError(message="Raised error")
        assert str(exc_info.value) == "Raised error"


class TestConfigParseError:
    def test_layer_index_in_details(self) -> None:
        err = ConfigParseError("bad yaml", layer_index=2)
        assert err.code == "config_parse_error"
        assert err.layer_index == 2
        assert err.details == {"layer_index": 2}

    def test_without_layer_index(self) -> None:
        err = ConfigParseError("bad merge")
        assert err.layer_index is None
        assert err.details == {}

    def test_is_botplug_error(self) -> None:
        assert isinstance(ConfigParseError("x"), BotplugError)


class TestUnsupportedOperationError:
    def test_operation_in_details(self) -> None:
        err = UnsupportedOperationError("nope", operation="stream")
        assert err.code == "unsupported_operation"
        assert err.operation == "stream"
        assert err.details["operation"] == "stream"


@pytest.mark.parametrize(
    ("error_cls", "code"),
    [
        (InvalidPayloadError, "invalid_payload"),
        (UpstreamCallError, "upstream_call_error"),
        (PluginNotFoundError, "plugin_not_found"),
        (InvalidCommandError, "invalid_command"),
    ],
)
def test_error_codes(error_cls: type[BotplugError], code: str) -> None:
    err = error_cls("failed", details={"key": "value"})
    assert err.code == code
    assert err.details == {"key": "value"}
    assert str(err) == "failed"
