"""Tests for the botplug CLI commands."""

from __future__ import annotations

import json
import logging

import structlog
from typer.testing import CliRunner

from botplug.api.cli.main import app
from botplug.infrastructure.executors.echo import EchoExecutor
from botplug.infrastructure.executors.gh import GhExecutor
from botplug.infrastructure.sources.forwarder import ForwarderSource
from botplug.infrastructure.sources.ticker import TickerSource

runner = CliRunner()

_GET_SOURCE = "botplug.api.cli.commands.source.get_source"
_GET_EXECUTOR = "botplug.api.cli.commands.executor.get_executor"


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_metadata_prints_json(monkeypatch) -> None:
    monkeypatch.setattr(
        "botplug.api.cli.commands.plugins.get_source", lambda name: TickerSource()
    )
    result = runner.invoke(app, ["plugins", "metadata", "ticker"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["description"] == "Emits an event at a specified interval"
    assert "interval" in data["json_schema"]["properties"]


def test_metadata_rejects_unknown_kind() -> None:
    result = runner.invoke(app, ["plugins", "metadata", "ticker", "--kind", "widget"])
    assert result.exit_code == 1


def test_stream_stops_after_count(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(_GET_SOURCE, lambda name: TickerSource())
    config = tmp_path / "ticker.yaml"
    config.write_text("interval: 20ms\n")

    result = runner.invoke(app, ["source", "stream", "ticker", "-c", str(config), "--count", "2"])

    assert result.exit_code == 0
    assert result.stdout.count("Ticker Event") == 2
    assert "Stream finished after 2 event(s)." in result.stdout


def test_stream_config_error_exits_1(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(_GET_SOURCE, lambda name: TickerSource())
    config = tmp_path / "ticker.yaml"
    config.write_text("interval: [\n")

    result = runner.invoke(app, ["source", "stream", "ticker", "-c", str(config)])
    assert result.exit_code == 1


def test_stream_missing_config_file(tmp_path) -> None:
    result = runner.invoke(
        app, ["source", "stream", "ticker", "-c", str(tmp_path / "missing.yaml")]
    )
    assert result.exit_code == 1


def test_webhook_prints_event(monkeypatch) -> None:
    monkeypatch.setattr(_GET_SOURCE, lambda name: ForwarderSource())
    result = runner.invoke(app, ["source", "webhook", "forwarder", '{"message": "hi"}'])
    assert result.exit_code == 0
    assert "*Incoming webhook event:* hi" in result.stdout


def test_webhook_invalid_payload(monkeypatch) -> None:
    monkeypatch.setattr(_GET_SOURCE, lambda name: ForwarderSource())
    result = runner.invoke(app, ["source", "webhook", "forwarder", '{"message": ""}'])
    assert result.exit_code == 1


def test_executor_run(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(_GET_EXECUTOR, lambda name: EchoExecutor())
    config = tmp_path / "echo.yaml"
    config.write_text("transformResponseToUpperCase: true\n")

    result = runner.invoke(app, ["executor", "run", "echo", "echo hi", "-c", str(config)])

    assert result.exit_code == 0
    assert "Echo: ECHO HI" in result.stdout


def test_executor_help_unsupported(monkeypatch) -> None:
    monkeypatch.setattr(_GET_EXECUTOR, lambda name: GhExecutor())
    result = runner.invoke(app, ["executor", "help", "gh"])
    assert result.exit_code == 1


def test_debug_flag_routes_structlog_through_stdlib_logging(monkeypatch) -> None:
    monkeypatch.setattr(
        "botplug.api.cli.commands.plugins.get_source", lambda name: TickerSource()
    )
    result = runner.invoke(app, ["--debug", "plugins", "metadata", "ticker"])

    assert result.exit_code == 0
    config = structlog.get_config()
    assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
    assert config["wrapper_class"] is structlog.make_filtering_bound_logger(logging.DEBUG)
