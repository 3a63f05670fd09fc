"""Main entry point for TodoMatic."""

import typer

from todomatic import __version__
from todomatic.commands import (
    add_command,
    config,
    contact_command,
    delete_command,
    edit_command,
    list_command,
    map_command,
    share_command,
    show_command,
    toggle_command,
)
from todomatic.services.config_service import get_config_service
from todomatic.utils.logger import log_path
from todomatic.utils.typer_helpers import SuggestingGroup
from todomatic.utils.ui.console import apply_output_config, get_console

# Create main app with custom group class
app = typer.Typer(
    name="todomatic",
    cls=SuggestingGroup,
    help="A local-first task tracker with location, photo and SMS attachments",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main_callback() -> None:
    """Apply output settings before any command runs."""
    apply_output_config(get_config_service().config.output)


app.add_typer(config.app, name="config", help="Configuration management")

# Task commands
app.command("add", help="Create a task")(add_command.add)
app.command("edit", help="Edit a task")(edit_command.edit)
app.command("list", help="List tasks")(list_command.list_tasks)
app.command("show", help="Show task details")(show_command.show)
app.command("toggle", help="Toggle a task's completion")(toggle_command.toggle)
app.command("delete", help="Delete a task")(delete_command.delete)
app.command("map", help="Open a task's location in a map")(map_command.open_map)
app.command("share", help="Share a task by SMS")(share_command.share)
app.command("contact", help="Pick a contact from the directory")(contact_command.contact)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TodoMatic[/bold] version [cyan]{__version__}[/cyan]")
    console.print(f"[dim]Log file: {log_path()}[/dim]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
