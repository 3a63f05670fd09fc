"""Contacts directory read from a JSON file.

The file holds a list of objects with ``name`` and ``phone_numbers``
(``phoneNumbers`` is accepted too); ``id`` defaults to the entry's index.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from todomatic.adapters.permissions import PermissionGate
from todomatic.models import Contact, PermissionStatus
from todomatic.repositories import ContactsProvider


class JsonContactsProvider(ContactsProvider):
    """ContactsProvider backed by a JSON file."""

    def __init__(self, permissions: PermissionGate, path: Path | str):
        self.permissions = permissions
        self.path = Path(path)

    async def request_permission(self) -> PermissionStatus:
        return await self.permissions.request("contacts")

    async def list_contacts(self) -> list[Contact]:
        return await asyncio.to_thread(self._read)

    def _read(self) -> list[Contact]:
        try:
            with open(self.path, encoding="utf-8") as f:
                entries = json.load(f)
        except FileNotFoundError:
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise OSError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(entries, list):
            raise OSError(f"{self.path} does not contain a list of contacts")

        contacts = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get("name"):
                raise OSError(f"{self.path}: contact {index} has no name")
            numbers = entry.get("phone_numbers", entry.get("phoneNumbers", []))
            contacts.append(
                Contact(
                    id=str(entry.get("id", index)),
                    name=entry["name"],
                    phone_numbers=[str(n) for n in numbers],
                )
            )
        return contacts
