"""Command 'edit' of todomatic"""

import typer

from todomatic.errors import ValidationError
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import attach_location, attach_photo, find_task, finish_writes, open_session

app = typer.Typer()
console = get_console()


@app.command("edit")
@command_wrapper
async def edit(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="New description (empty string clears it)"
    ),
    here: bool = typer.Option(False, "--here", help="Replace the location with the current one"),
    clear_location: bool = typer.Option(False, "--clear-location", help="Remove the location"),
    photo: bool = typer.Option(False, "--photo", help="Replace the photo"),
    clear_photo: bool = typer.Option(False, "--clear-photo", help="Remove the photo"),
) -> None:
    """Edit a task's text or attachments."""
    if title is not None and not title.strip():
        raise ValidationError("Title is required")
    app_ctx = await open_session()
    task = find_task(app_ctx.store, task_id)

    editor = app_ctx.editor
    draft = editor.begin_edit(task)
    editor.update(title=title, description=description)

    if clear_location:
        editor.clear_location()
    if clear_photo:
        editor.clear_image()
    if here:
        await attach_location(app_ctx, draft.generation)
    if photo:
        await attach_photo(app_ctx, draft.generation)

    saved, _ = editor.save()
    await finish_writes(app_ctx.store)
    format_success(f"Updated: {saved.title}")
