"""Unit tests for config commands."""

from typer.testing import CliRunner

from todomatic.commands.config import app, parse_value
from todomatic.services.config_service import get_config_service

runner = CliRunner()


def test_parse_value():
    assert parse_value("true") is True
    assert parse_value("12.5") == 12.5
    assert parse_value("null") is None
    assert parse_value('["a", "{body}"]') == ["a", "{body}"]
    assert parse_value("ask") == "ask"


def test_view_yaml():
    result = runner.invoke(app, ["view"])
    assert result.exit_code == 0, result.output
    assert "permission: ask" in result.output


def test_set_and_get():
    result = runner.invoke(app, ["set", "location.permission", "always"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(app, ["get", "location.permission"])
    assert result.output.strip() == "always"


def test_set_messaging_command():
    result = runner.invoke(
        app, ["set", "messaging.command", '["sms-send", "{recipient}", "{body}"]']
    )
    assert result.exit_code == 0, result.output
    assert get_config_service().config.messaging.command == [
        "sms-send",
        "{recipient}",
        "{body}",
    ]


def test_set_unknown_key():
    result = runner.invoke(app, ["set", "nope.key", "1"])
    assert result.exit_code == 2
    assert "not found" in result.output


def test_set_invalid_value():
    result = runner.invoke(app, ["set", "camera.permission", "sometimes"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_get_unknown_key():
    result = runner.invoke(app, ["get", "storage.nope"])
    assert result.exit_code == 1


def test_reset_key():
    runner.invoke(app, ["set", "contacts.permission", "never"])
    result = runner.invoke(app, ["reset", "contacts.permission", "--yes"])

    assert result.exit_code == 0, result.output
    assert get_config_service().get("contacts.permission") == "ask"


def test_reset_declined():
    runner.invoke(app, ["set", "contacts.permission", "never"])
    result = runner.invoke(app, ["reset"], input="n\n")

    assert result.exit_code == 0
    assert get_config_service().get("contacts.permission") == "never"
