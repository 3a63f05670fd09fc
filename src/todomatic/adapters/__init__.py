"""Adapters implementing the TodoMatic ports for a desktop/terminal host."""

from .contacts import JsonContactsProvider
from .file_store import JsonFileStore, MemoryStore
from .geolocation import HttpLocationProvider
from .launcher import SystemUriLauncher
from .media import FileMediaProvider
from .messaging import CommandMessagingProvider
from .permissions import PermissionGate

__all__ = [
    "JsonFileStore",
    "MemoryStore",
    "PermissionGate",
    "HttpLocationProvider",
    "FileMediaProvider",
    "JsonContactsProvider",
    "CommandMessagingProvider",
    "SystemUriLauncher",
]
