"""Media provider that imports an existing image file as the captured photo."""

from __future__ import annotations

import asyncio
import shutil
import uuid
from collections.abc import Callable
from pathlib import Path

from rich.prompt import Prompt

from todomatic.adapters.permissions import PermissionGate
from todomatic.models import PermissionStatus
from todomatic.repositories import MediaProvider

IMAGE_SUFFIXES = frozenset({".jpg", ".jpeg", ".png", ".gif", ".heic", ".webp"})


def _ask_path() -> str:
    return Prompt.ask("Path to photo (leave empty to cancel)", default="")


class FileMediaProvider(MediaProvider):
    """Copies a chosen image into the media directory.

    The task only keeps the resulting ``file://`` URI; the copy is owned by
    the media directory.
    """

    def __init__(
        self,
        permissions: PermissionGate,
        media_dir: Path | str,
        prompt: Callable[[], str] | None = None,
    ):
        self.permissions = permissions
        self.media_dir = Path(media_dir)
        self._prompt = prompt or _ask_path

    async def request_camera_permission(self) -> PermissionStatus:
        return await self.permissions.request("camera")

    async def capture(self) -> str | None:
        answer = (await asyncio.to_thread(self._prompt)).strip()
        if not answer:
            return None
        return await asyncio.to_thread(self._import, Path(answer).expanduser())

    def _import(self, source: Path) -> str:
        if not source.is_file():
            raise FileNotFoundError(f"No such file: {source}")
        if source.suffix.lower() not in IMAGE_SUFFIXES:
            raise OSError(f"Not an image file: {source}")
        self.media_dir.mkdir(parents=True, exist_ok=True)
        target = self.media_dir / f"{uuid.uuid4().hex}{source.suffix.lower()}"
        shutil.copy2(source, target)
        return target.resolve().as_uri()
