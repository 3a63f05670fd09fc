"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem/device state.
"""

from __future__ import annotations

from collections.abc import Sequence
from unittest.mock import patch

import pytest

from todomatic.adapters import MemoryStore
from todomatic.models import (
    AddressComponents,
    Contact,
    Coordinates,
    PermissionStatus,
    SendStatus,
    Task,
)
from todomatic.repositories import (
    ContactsProvider,
    LocationProvider,
    MediaProvider,
    MessagingProvider,
    UriLauncher,
)
from todomatic.services import (
    CaptureService,
    LocationWorkflow,
    MapLinkResolver,
    TaskEditor,
    TaskStore,
)
from todomatic.services.context_manager import AppContext

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path):
    """Keep config, data and log files inside *tmp_path*."""
    from todomatic.services.config_service import get_config_service
    from todomatic.services.context_manager import get_app_context
    from todomatic.utils.logger import reset_logger

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    get_app_context.cache_clear()
    reset_logger()
    with (
        patch("todomatic.services.config_service.user_config_dir", return_value=tmpdir),
        patch("todomatic.services.config_service.user_data_dir", return_value=tmpdir),
        patch("todomatic.utils.logger.user_log_dir", return_value=tmpdir),
    ):
        yield
    get_config_service.cache_clear()
    get_app_context.cache_clear()
    reset_logger()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory."""
    from todomatic.services.config_service import ConfigService

    return ConfigService()


# ---------------------------------------------------------------------------
# Fake device capabilities
# ---------------------------------------------------------------------------


class FakeLocationProvider(LocationProvider):
    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.GRANTED,
        coordinates: Coordinates | None = None,
        address: AddressComponents | None = None,
        position_error: Exception | None = None,
        geocode_error: Exception | None = None,
    ):
        self.permission = permission
        self.coordinates = coordinates or Coordinates(latitude=37.7749, longitude=-122.4194)
        self.address = address
        self.position_error = position_error
        self.geocode_error = geocode_error
        self.position_calls = 0
        self.geocode_calls = 0

    async def request_permission(self) -> PermissionStatus:
        return self.permission

    async def get_current_position(self) -> Coordinates:
        self.position_calls += 1
        if self.position_error:
            raise self.position_error
        return self.coordinates

    async def reverse_geocode(self, coordinates: Coordinates) -> AddressComponents | None:
        self.geocode_calls += 1
        if self.geocode_error:
            raise self.geocode_error
        return self.address


class FakeMediaProvider(MediaProvider):
    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.GRANTED,
        uri: str | None = "file:///media/photo.jpg",
        error: Exception | None = None,
    ):
        self.permission = permission
        self.uri = uri
        self.error = error
        self.captures = 0

    async def request_camera_permission(self) -> PermissionStatus:
        return self.permission

    async def capture(self) -> str | None:
        self.captures += 1
        if self.error:
            raise self.error
        return self.uri


class FakeContactsProvider(ContactsProvider):
    def __init__(
        self,
        permission: PermissionStatus = PermissionStatus.GRANTED,
        contacts: list[Contact] | None = None,
        error: Exception | None = None,
    ):
        self.permission = permission
        self.contacts = contacts if contacts is not None else []
        self.error = error

    async def request_permission(self) -> PermissionStatus:
        return self.permission

    async def list_contacts(self) -> list[Contact]:
        if self.error:
            raise self.error
        return list(self.contacts)


class FakeMessagingProvider(MessagingProvider):
    def __init__(
        self,
        available: bool = True,
        status: SendStatus = SendStatus.SENT,
        error: Exception | None = None,
    ):
        self.available = available
        self.status = status
        self.error = error
        self.sent: list[tuple[list[str], str]] = []

    async def is_available(self) -> bool:
        return self.available

    async def send(self, recipients: Sequence[str], body: str) -> SendStatus:
        if self.error:
            raise self.error
        self.sent.append((list(recipients), body))
        return self.status


class FakeUriLauncher(UriLauncher):
    def __init__(
        self,
        supported: bool = True,
        check_error: Exception | None = None,
        failing: set[str] | None = None,
    ):
        self.supported = supported
        self.check_error = check_error
        self.failing = failing or set()
        self.opened: list[str] = []

    async def can_open(self, uri: str) -> bool:
        if self.check_error:
            raise self.check_error
        return self.supported

    async def open(self, uri: str) -> None:
        scheme = uri.split(":", 1)[0]
        if scheme in self.failing:
            raise OSError(f"cannot open {uri}")
        self.opened.append(uri)


class FailingStore(MemoryStore):
    """MemoryStore whose reads and/or writes raise OSError."""

    def __init__(self, initial=None, fail_get=False, fail_set=True):
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set

    async def get(self, key):
        if self.fail_get:
            raise OSError("disk unreadable")
        return await super().get(key)

    async def set(self, key, value):
        if self.fail_set:
            raise OSError("disk full")
        await super().set(key, value)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_task(
    task_id: str = "task-abc123",
    title: str = "Buy milk",
    created_at: int = 1_700_000_000_000,
    updated_at: int | None = None,
    **kwargs,
) -> Task:
    return Task(
        id=task_id,
        title=title,
        created_at=created_at,
        updated_at=created_at if updated_at is None else updated_at,
        **kwargs,
    )


@pytest.fixture()
def memory_store():
    return MemoryStore()


@pytest.fixture()
def store(memory_store):
    return TaskStore(memory_store)


@pytest.fixture()
def location_provider():
    return FakeLocationProvider()


@pytest.fixture()
def media_provider():
    return FakeMediaProvider()


@pytest.fixture()
def contacts_provider():
    return FakeContactsProvider(
        contacts=[Contact(id="1", name="Alice", phone_numbers=["+15550100"])]
    )


@pytest.fixture()
def messaging_provider():
    return FakeMessagingProvider()


@pytest.fixture()
def uri_launcher():
    return FakeUriLauncher()


@pytest.fixture()
def app_context(
    store,
    location_provider,
    media_provider,
    contacts_provider,
    messaging_provider,
    uri_launcher,
):
    """An AppContext wired to in-memory storage and fake devices."""
    return AppContext(
        store=store,
        editor=TaskEditor(store),
        location=LocationWorkflow(location_provider),
        maps=MapLinkResolver(uri_launcher, platform="linux"),
        capture=CaptureService(media_provider, contacts_provider, messaging_provider),
    )


@pytest.fixture()
def patch_app_context(app_context):
    """Make commands use *app_context* instead of the configured one."""
    with patch(
        "todomatic.services.context_manager.get_app_context",
        return_value=app_context,
    ):
        yield app_context


def seed(memory_store: MemoryStore, tasks: list[Task]) -> None:
    """Put *tasks* in the durable mirror so the next ``load()`` sees them."""
    from todomatic.services.task_store import TASKS_STORAGE_KEY, encode_collection

    memory_store.data[TASKS_STORAGE_KEY] = encode_collection(tasks)


def persisted(memory_store: MemoryStore) -> list[Task]:
    """Decode the durable mirror."""
    from todomatic.services.task_store import TASKS_STORAGE_KEY, decode_collection

    blob = memory_store.data.get(TASKS_STORAGE_KEY)
    return decode_collection(blob) if blob else []
