"""Repository and device interfaces for TodoMatic.

This package contains abstract base classes (ABCs) that define the contracts
for persistence and device capabilities. These are the "Ports" in the
Hexagonal Architecture; implementations (Adapters) are in
``todomatic.adapters``.
"""

from .devices import (
    ContactsProvider,
    LocationProvider,
    MediaProvider,
    MessagingProvider,
    UriLauncher,
)
from .repository import KeyValueStore

__all__ = [
    "KeyValueStore",
    "LocationProvider",
    "MediaProvider",
    "ContactsProvider",
    "MessagingProvider",
    "UriLauncher",
]
