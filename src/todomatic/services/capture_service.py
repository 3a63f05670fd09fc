"""Capture/share service - photo capture, contact lookup and SMS sharing.

Each operation is one linear pipeline: check permission or availability,
make exactly one capability call, interpret the result. User cancellation is
a silent no-op, not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from todomatic.errors import DeviceUnavailable, PermissionDenied, TodoMaticError
from todomatic.models import CapabilityLevel, ContactPick, PermissionStatus, SendStatus, Task
from todomatic.repositories import ContactsProvider, MediaProvider, MessagingProvider

logger = logging.getLogger(__name__)


def build_share_message(task: Task) -> str:
    """Plain-text SMS body describing *task*."""
    lines = [f"Task: {task.title}"]
    if task.description:
        lines.append(f"Description: {task.description}")
    lines.append(f"Status: {'Completed' if task.completed else 'Active'}")
    return "\n".join(lines)


class CaptureService:
    """Service for permission-gated device capabilities."""

    # The picker resolves to the first directory entry instead of letting
    # the user choose.
    contact_picker_level = CapabilityLevel.PARTIAL

    def __init__(
        self,
        media: MediaProvider,
        contacts: ContactsProvider,
        messaging: MessagingProvider,
    ):
        self.media = media
        self.contacts = contacts
        self.messaging = messaging

    async def capture_photo(self) -> str | None:
        """Take a photo.

        Returns:
            The media URI, or None if the user cancelled

        Raises:
            PermissionDenied: If camera access was refused
            TodoMaticError: If the media provider failed
        """
        status = await self.media.request_camera_permission()
        if status is not PermissionStatus.GRANTED:
            raise PermissionDenied("camera", "Camera permission is required for this feature")

        try:
            uri = await self.media.capture()
        except OSError as e:
            raise TodoMaticError(f"Failed to take photo: {e}") from e
        if uri is None:
            logger.info("photo capture cancelled")
        return uri

    async def pick_contact(self) -> ContactPick | None:
        """Pick a contact from the directory.

        Returns:
            The first contact, marked PARTIAL, or None if the directory is empty

        Raises:
            PermissionDenied: If contacts access was refused
            TodoMaticError: If the directory could not be read
        """
        status = await self.contacts.request_permission()
        if status is not PermissionStatus.GRANTED:
            raise PermissionDenied(
                "contacts", "Contacts permission is required for this feature"
            )

        try:
            contacts = await self.contacts.list_contacts()
        except OSError as e:
            raise TodoMaticError(f"Failed to access contacts: {e}") from e
        if not contacts:
            return None
        return ContactPick(contact=contacts[0], level=self.contact_picker_level)

    async def share_via_sms(self, task: Task, recipients: Sequence[str] = ()) -> SendStatus:
        """Hand a description of *task* to the SMS dispatcher.

        Returns:
            SENT, or CANCELLED if the user backed out

        Raises:
            DeviceUnavailable: If this device cannot send SMS
            TodoMaticError: If the dispatcher failed
        """
        if not await self.messaging.is_available():
            raise DeviceUnavailable("SMS is not available on this device")

        try:
            status = await self.messaging.send(list(recipients), build_share_message(task))
        except OSError as e:
            raise TodoMaticError(f"Failed to send SMS: {e}") from e
        logger.info("sms share of task %s: %s", task.id, status.value)
        return status
