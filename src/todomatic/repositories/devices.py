"""Device capability interfaces for TodoMatic.

Each class is a port for one external collaborator consumed by the core
workflows. Adapters for a desktop/terminal host live in
``todomatic.adapters``; tests substitute fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from todomatic.models import (
    AddressComponents,
    Contact,
    Coordinates,
    PermissionStatus,
    SendStatus,
)


class LocationProvider(ABC):
    """Permission-gated position acquisition and reverse geocoding."""

    @abstractmethod
    async def request_permission(self) -> PermissionStatus:
        """Ask the user for access to their location."""
        raise NotImplementedError(
            "LocationProvider.request_permission() must be implemented by adapter"
        )

    @abstractmethod
    async def get_current_position(self) -> Coordinates:
        """Acquire the current position.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            Exception: Any adapter-specific error if no position is available
        """
        raise NotImplementedError(
            "LocationProvider.get_current_position() must be implemented by adapter"
        )

    @abstractmethod
    async def reverse_geocode(self, coordinates: Coordinates) -> AddressComponents | None:
        """Resolve coordinates to address parts.

        Returns:
            Address parts, or None if nothing was found

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            Exception: Any adapter-specific error if the lookup fails
        """
        raise NotImplementedError(
            "LocationProvider.reverse_geocode() must be implemented by adapter"
        )


class MediaProvider(ABC):
    """Camera/media picker."""

    @abstractmethod
    async def request_camera_permission(self) -> PermissionStatus:
        """Ask the user for access to the camera."""
        raise NotImplementedError(
            "MediaProvider.request_camera_permission() must be implemented by adapter"
        )

    @abstractmethod
    async def capture(self) -> str | None:
        """Capture a photo.

        Returns:
            URI of the captured media, or None if the user cancelled
        """
        raise NotImplementedError("MediaProvider.capture() must be implemented by adapter")


class ContactsProvider(ABC):
    """Contacts directory."""

    @abstractmethod
    async def request_permission(self) -> PermissionStatus:
        """Ask the user for access to their contacts."""
        raise NotImplementedError(
            "ContactsProvider.request_permission() must be implemented by adapter"
        )

    @abstractmethod
    async def list_contacts(self) -> list[Contact]:
        """List all contacts in the directory."""
        raise NotImplementedError(
            "ContactsProvider.list_contacts() must be implemented by adapter"
        )


class MessagingProvider(ABC):
    """SMS dispatcher."""

    @abstractmethod
    async def is_available(self) -> bool:
        """Whether this device can send SMS at all."""
        raise NotImplementedError(
            "MessagingProvider.is_available() must be implemented by adapter"
        )

    @abstractmethod
    async def send(self, recipients: Sequence[str], body: str) -> SendStatus:
        """Hand a message to the user for sending.

        Returns:
            SENT, or CANCELLED if the user backed out
        """
        raise NotImplementedError("MessagingProvider.send() must be implemented by adapter")


class UriLauncher(ABC):
    """Facility for opening URIs in external applications."""

    @abstractmethod
    async def can_open(self, uri: str) -> bool:
        """Whether some installed application handles *uri*."""
        raise NotImplementedError("UriLauncher.can_open() must be implemented by adapter")

    @abstractmethod
    async def open(self, uri: str) -> None:
        """Open *uri*.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            OSError: If no application could be launched
        """
        raise NotImplementedError("UriLauncher.open() must be implemented by adapter")
