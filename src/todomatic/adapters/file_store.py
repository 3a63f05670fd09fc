"""Key-value store adapters.

``JsonFileStore`` keeps every key in one JSON object file. Writes go to a
temporary sibling file that then replaces the original, so readers never see
a partial write.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from todomatic.repositories import KeyValueStore


class JsonFileStore(KeyValueStore):
    """File-backed key-value store."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._read)
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise OSError(f"{self.path}: value for '{key}' is not a string")
        return value

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            await asyncio.to_thread(self._write, key, value)

    def _read(self) -> dict:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise OSError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise OSError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        tmp_path.replace(self.path)


class MemoryStore(KeyValueStore):
    """Process-local store, used for ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value
