"""Storage abstraction for TodoMatic.

The durable task mirror is a single serialized blob under one fixed key, so
the only storage contract the core needs is an asynchronous key-value store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for the persistent key-value store.

    Implementations must make ``set`` atomic: a reader sees either the old
    value or the new one, never a partial write.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Read the value stored under *key*.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            OSError: If the underlying storage cannot be read
        """
        raise NotImplementedError("KeyValueStore.get() must be implemented by adapter")

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Atomically overwrite the value stored under *key*.

        Args:
            key: Storage key
            value: Serialized value

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            OSError: If the underlying storage cannot be written
        """
        raise NotImplementedError("KeyValueStore.set() must be implemented by adapter")
