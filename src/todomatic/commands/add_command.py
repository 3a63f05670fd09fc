"""Command 'add' of todomatic"""

import typer

from todomatic.errors import ValidationError
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_output, format_success

from .decorators import command_wrapper
from .utils import attach_location, attach_photo, finish_writes, open_session

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
async def add(
    title: str = typer.Argument(..., help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Task description"),
    here: bool = typer.Option(
        False, "--here", help="Attach the current location (with address if available)"
    ),
    photo: bool = typer.Option(False, "--photo", help="Attach a photo"),
    json_opt: bool = typer.Option(False, "--json", help="Output the new task as JSON"),
) -> None:
    """
    Create a task.

    Examples:
      todomatic add "Buy milk"
      todomatic add "Fix fence" -d "Bring the long screws" --here --photo
    """
    if not title.strip():
        raise ValidationError("Title is required")

    app_ctx = await open_session()
    editor = app_ctx.editor
    draft = editor.begin_create()
    editor.update(title=title, description=description)

    if here:
        await attach_location(app_ctx, draft.generation)
    if photo:
        await attach_photo(app_ctx, draft.generation)

    task, _ = editor.save()
    await finish_writes(app_ctx.store)

    if json_opt:
        format_output(task.to_record(), "json")
    else:
        format_success(f"Added: {task.title}")
        console.print(f"[dim]ID: {task.id}[/dim]")
