"""Application bootstrap for TodoMatic.

``get_app_context()`` wires the configured adapters into the core services
once per process; commands take everything they need from it.

Usage Pattern:
    from todomatic.services.context_manager import get_app_context

    app = get_app_context()
    await app.store.load()
    pending = app.store.toggle_completed(task_id)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from todomatic.adapters import (
    CommandMessagingProvider,
    FileMediaProvider,
    HttpLocationProvider,
    JsonContactsProvider,
    JsonFileStore,
    PermissionGate,
    SystemUriLauncher,
)
from todomatic.services.capture_service import CaptureService
from todomatic.services.config_service import ConfigService, get_config_service
from todomatic.services.location_service import LocationWorkflow
from todomatic.services.map_service import MapLinkResolver
from todomatic.services.task_editor import TaskEditor
from todomatic.services.task_store import TaskStore


@dataclass
class AppContext:
    """Core services wired to their adapters."""

    store: TaskStore
    editor: TaskEditor
    location: LocationWorkflow
    maps: MapLinkResolver
    capture: CaptureService


def build_app_context(config_service: ConfigService) -> AppContext:
    """Create an AppContext from configuration."""
    config = config_service.config

    store = TaskStore(JsonFileStore(config_service.storage_path), key=config.storage.key)
    location_provider = HttpLocationProvider(
        config.location, PermissionGate(config.location.permission)
    )
    capture = CaptureService(
        media=FileMediaProvider(
            PermissionGate(config.camera.permission), config_service.media_dir
        ),
        contacts=JsonContactsProvider(
            PermissionGate(config.contacts.permission), config_service.contacts_path
        ),
        messaging=CommandMessagingProvider(config.messaging.command),
    )
    return AppContext(
        store=store,
        editor=TaskEditor(store),
        location=LocationWorkflow(location_provider),
        maps=MapLinkResolver(SystemUriLauncher(), platform=config.maps.platform),
        capture=capture,
    )


@lru_cache(maxsize=1)
def get_app_context() -> AppContext:
    """Get a cached AppContext for the current configuration."""
    return build_app_context(get_config_service())
