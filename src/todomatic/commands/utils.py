"""Helpers shared by task commands."""

from __future__ import annotations

import typer
from rich.status import Status

from todomatic.models import LocationFix, Task
from todomatic.services import context_manager
from todomatic.services.context_manager import AppContext
from todomatic.services.location_service import (
    DETAIL_PRECISION,
    LocationState,
    location_label,
)
from todomatic.services.task_store import TaskStore
from todomatic.utils import exit_codes
from todomatic.utils.task_helpers import resolve_task_id
from todomatic.utils.ui.console import get_console
from todomatic.utils.ui.formatters import format_error, format_warning

console = get_console()

LOCATION_MESSAGES = {
    LocationState.REQUESTING_PERMISSION: "Requesting location permission...",
    LocationState.ACQUIRING_POSITION: "Getting location...",
    LocationState.REVERSE_GEOCODING: "Looking up address...",
}


async def open_session() -> AppContext:
    """Load the task collection, reporting storage errors on the console."""
    app = context_manager.get_app_context()
    app.store.on_error(lambda error: format_error(str(error)))
    await app.store.load()
    return app


def find_task(store: TaskStore, task_id_or_suffix: str) -> Task:
    """Resolve an ID or suffix against the loaded collection."""
    return store.require(resolve_task_id(store.tasks, task_id_or_suffix))


async def finish_writes(store: TaskStore) -> None:
    """Wait for pending writes; exit non-zero if any failed.

    Failures have already been printed by the store's error listener.
    """
    results = await store.flush()
    if any(not result.ok for result in results):
        format_warning("The change was not saved to disk")
        raise typer.Exit(code=exit_codes.ERROR_IO)


class LocationProgress:
    """Shows a spinner while the location workflow is busy.

    The permission step is printed rather than animated so an interactive
    permission prompt is not drawn over.
    """

    def __init__(self):
        self._status: Status | None = None

    def __call__(self, state: LocationState) -> None:
        if state is LocationState.REQUESTING_PERMISSION:
            console.print(f"[dim]{LOCATION_MESSAGES[state]}[/dim]")
        elif state in LOCATION_MESSAGES:
            if self._status is None:
                self._status = console.status(LOCATION_MESSAGES[state])
                self._status.start()
            else:
                self._status.update(LOCATION_MESSAGES[state])
        else:
            self.stop()

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None


async def attach_location(app: AppContext, generation: int) -> LocationFix | None:
    """Run the location workflow and feed the result into the current draft.

    Returns:
        The fix, or None if the draft moved on before it arrived
    """
    progress = LocationProgress()
    unsubscribe = app.location.subscribe(progress)
    try:
        fix = await app.location.acquire()
    finally:
        progress.stop()
        unsubscribe()
    app.location.reset()

    if fix.geocode_error:
        format_warning("Address lookup failed; saving coordinates only")
    if not app.editor.apply_location(generation, fix):
        return None
    console.print(
        "[dim]Location:[/dim] "
        + location_label(fix.coordinates, fix.formatted_address, DETAIL_PRECISION)
    )
    return fix


async def attach_photo(app: AppContext, generation: int) -> str | None:
    """Capture a photo and feed its URI into the current draft.

    Returns:
        The URI, or None if the user cancelled or the draft moved on
    """
    uri = await app.capture.capture_photo()
    if uri is None or not app.editor.apply_image(generation, uri):
        return None
    return uri
