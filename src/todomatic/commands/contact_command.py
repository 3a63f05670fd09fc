"""Command 'contact' of todomatic"""

import typer

from todomatic.services import context_manager
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_output, format_warning

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("contact")
@command_wrapper
async def contact(
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Pick a contact from the directory."""
    app_ctx = context_manager.get_app_context()
    pick = await app_ctx.capture.pick_contact()
    if pick is None:
        console.print("[yellow]No contacts found[/yellow]")
        return

    if json_opt:
        format_output(pick.contact.model_dump(), "json")
        return

    if pick.partial:
        format_warning("Contact picking is limited to the first directory entry")
    console.print(f"[bold]{pick.contact.name}[/bold]")
    for number in pick.contact.phone_numbers:
        console.print(f"  {number}")
