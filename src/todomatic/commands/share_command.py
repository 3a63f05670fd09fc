"""Command 'share' of todomatic"""

import typer

from todomatic.errors import ValidationError
from todomatic.models import SendStatus
from todomatic.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper
from .utils import find_task, open_session

app = typer.Typer()


@app.command("share")
@command_wrapper
async def share(
    task_id: str = typer.Argument(..., help="Task ID or suffix"),
    to: list[str] = typer.Option(
        [], "--to", help="Recipient phone number (repeatable)"
    ),
    contact: bool = typer.Option(
        False, "--contact", help="Send to the first contact in the directory"
    ),
) -> None:
    """Share a task by SMS."""
    app_ctx = await open_session()
    task = find_task(app_ctx.store, task_id)

    recipients = list(to)
    if contact:
        pick = await app_ctx.capture.pick_contact()
        if pick is None:
            raise ValidationError("No contacts found")
        if not pick.contact.phone_numbers:
            raise ValidationError(f"{pick.contact.name} has no phone number")
        if pick.partial:
            format_warning(f"Using the first contact: {pick.contact.name}")
        recipients.append(pick.contact.phone_numbers[0])

    status = await app_ctx.capture.share_via_sms(task, recipients)
    if status is SendStatus.SENT:
        format_success(f"Shared: {task.title}")
