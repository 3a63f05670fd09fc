"""Command 'map' of todomatic"""

import typer

from todomatic.errors import ValidationError
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_info

from .decorators import command_wrapper
from .utils import find_task, open_session

app = typer.Typer()
console = get_console()


@app.command("map")
@command_wrapper
async def open_map(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
) -> None:
    """Open a task's location in a map application."""
    app_ctx = await open_session()
    task = find_task(app_ctx.store, task_id)
    if task.location is None:
        raise ValidationError(f"Task '{task.title}' has no location")

    closed = []
    uri = await app_ctx.maps.open(task.location, on_close=lambda: closed.append(True))
    if closed:
        console.print(f"[dim]Opened {uri}[/dim]")
    else:
        format_info(f"No map application available, opened {uri} in the browser")
