"""Configuration management commands."""

import json
from typing import Any, Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from todomatic.services.config_service import get_config_service
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> Any:
    """Interpret a command-line value as JSON where it parses, else a string."""
    try:
        return json.loads(value)
    except ValueError:
        return value


@app.command("view")
def view_config(
    output: str = typer.Option("yaml", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_service = get_config_service()
    format_output(config_service.config.model_dump(), output)


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., location.permission)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., location.permission)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value.

    Values are read as JSON when they parse, so lists and null can be given:

      todomatic config set messaging.command '["sms-send", "{recipient}", "{body}"]'
      todomatic config set storage.path null
    """
    parsed_value = parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(2)
    except PydanticValidationError as e:
        format_error(f"Invalid value for '{key}': {e.errors()[0]['msg']}")
        raise typer.Exit(2)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset_config(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
