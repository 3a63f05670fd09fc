"""SMS dispatch through an external command (e.g. kdeconnect-cli)."""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Callable, Sequence

from rich.prompt import Confirm, Prompt

from todomatic.models import SendStatus
from todomatic.repositories import MessagingProvider


def _confirm(body: str) -> bool:
    return Confirm.ask(f"Send this message?\n\n{body}\n", default=True)


def _ask_recipient() -> str:
    return Prompt.ask("Recipient phone number (leave empty to cancel)", default="")


class CommandMessagingProvider(MessagingProvider):
    """Runs a configured argv template once per recipient.

    ``{recipient}`` and ``{body}`` in the template are substituted. The user
    reviews the message first; declining, or giving no recipient, cancels.
    """

    def __init__(
        self,
        command: Sequence[str],
        confirm: Callable[[str], bool] | None = None,
        ask_recipient: Callable[[], str] | None = None,
    ):
        self.command = list(command)
        self._confirm = confirm or _confirm
        self._ask_recipient = ask_recipient or _ask_recipient

    async def is_available(self) -> bool:
        return bool(self.command) and shutil.which(self.command[0]) is not None

    async def send(self, recipients: Sequence[str], body: str) -> SendStatus:
        recipients = list(recipients)
        if not recipients:
            recipient = (await asyncio.to_thread(self._ask_recipient)).strip()
            if not recipient:
                return SendStatus.CANCELLED
            recipients = [recipient]

        if not await asyncio.to_thread(self._confirm, body):
            return SendStatus.CANCELLED

        for recipient in recipients:
            argv = [
                part.replace("{recipient}", recipient).replace("{body}", body)
                for part in self.command
            ]
            process = await asyncio.create_subprocess_exec(*argv)
            returncode = await process.wait()
            if returncode != 0:
                raise OSError(f"{self.command[0]} exited with status {returncode}")
        return SendStatus.SENT
