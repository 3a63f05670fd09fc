"""Command 'show' of todomatic"""

import typer

from todomatic.utils.ui.formatters import format_output, format_task_detail

from .decorators import command_wrapper
from .utils import find_task, open_session

app = typer.Typer()


@app.command("show")
@command_wrapper
async def show(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show a task in detail."""
    app_ctx = await open_session()
    task = find_task(app_ctx.store, task_id)

    if json_opt:
        format_output(task.to_record(), "json")
    else:
        format_task_detail(task)
