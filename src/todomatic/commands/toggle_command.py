"""Command 'toggle' of todomatic"""

import typer

from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import find_task, finish_writes, open_session

app = typer.Typer()
console = get_console()


@app.command("toggle")
@command_wrapper
async def toggle(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
) -> None:
    """Mark a task completed, or active again if it already is."""
    app_ctx = await open_session()
    task = find_task(app_ctx.store, task_id)

    app_ctx.store.toggle_completed(task.id)
    await finish_writes(app_ctx.store)

    toggled = app_ctx.store.require(task.id)
    if toggled.completed:
        format_success(f"✓ Completed: {toggled.title}")
    else:
        format_success(f"Reopened: {toggled.title}")
    console.print(f"[dim]To undo: todomatic toggle {task_id}[/dim]")
