"""URI launcher using the desktop's registered handlers."""

from __future__ import annotations

import asyncio
import shutil
import sys
import webbrowser
from urllib.parse import urlparse

from todomatic.repositories import UriLauncher

WEB_SCHEMES = frozenset({"http", "https"})


class SystemUriLauncher(UriLauncher):
    """Opens web URLs in the browser and other schemes via the OS opener."""

    def __init__(self, platform: str | None = None):
        self.platform = platform or sys.platform

    async def can_open(self, uri: str) -> bool:
        scheme = urlparse(uri).scheme
        if scheme in WEB_SCHEMES:
            try:
                webbrowser.get()
            except webbrowser.Error:
                return False
            return True
        if self.platform == "darwin":
            return scheme == "maps"
        if self.platform.startswith("linux"):
            return await self._has_xdg_handler(scheme)
        return False

    async def open(self, uri: str) -> None:
        if urlparse(uri).scheme in WEB_SCHEMES:
            if not await asyncio.to_thread(webbrowser.open, uri):
                raise OSError(f"No browser could open {uri}")
            return

        opener = "open" if self.platform == "darwin" else "xdg-open"
        process = await asyncio.create_subprocess_exec(
            opener,
            uri,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        returncode = await process.wait()
        if returncode != 0:
            raise OSError(f"{opener} exited with status {returncode}")

    async def _has_xdg_handler(self, scheme: str) -> bool:
        if shutil.which("xdg-mime") is None:
            return False
        process = await asyncio.create_subprocess_exec(
            "xdg-mime",
            "query",
            "default",
            f"x-scheme-handler/{scheme}",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
        stdout, _ = await process.communicate()
        return process.returncode == 0 and bool(stdout.strip())
