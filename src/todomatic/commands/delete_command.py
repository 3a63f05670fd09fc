"""Command 'delete' of todomatic"""

import typer

from todomatic.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import find_task, finish_writes, open_session

app = typer.Typer()


@app.command("delete")
@command_wrapper
async def delete(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    app_ctx = await open_session()
    task = find_task(app_ctx.store, task_id)

    if not force:
        confirm = typer.confirm("Are you sure you want to delete this task?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    app_ctx.store.remove(task.id)
    await finish_writes(app_ctx.store)
    format_success(f"Deleted: {task.title}")
