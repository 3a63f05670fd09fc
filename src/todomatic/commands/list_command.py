"""Command 'list' of todomatic"""

import typer

from todomatic.models import StatusFilter
from todomatic.services.filtering import TaskListView
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_output, format_tasks_pretty

from .decorators import command_wrapper
from .utils import open_session

app = typer.Typer()
console = get_console()


@app.command("list")
@command_wrapper
async def list_tasks(
    status_filter: StatusFilter = typer.Option(
        StatusFilter.ALL,
        "--filter",
        "-f",
        case_sensitive=False,
        help="Which tasks to show",
    ),
    search: str = typer.Option("", "--search", "-s", help="Search tasks by title"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
) -> None:
    """List tasks, newest first."""
    if json_opt:
        output = "json"

    app_ctx = await open_session()
    view = TaskListView(app_ctx.store, status_filter=status_filter, query=search)
    try:
        tasks = view.visible
    finally:
        view.close()

    if output == "pretty":
        format_tasks_pretty(
            tasks,
            status_filter=status_filter,
            query=search,
            all_task_ids=[t.id for t in app_ctx.store.tasks],
        )
    else:
        format_output({"tasks": [t.to_record() for t in tasks]}, output)
