"""Task store - canonical in-memory task collection and its durable mirror.

Every mutation sets memory first, notifies subscribers, then schedules a
write of the whole collection. Writes are serialized in dispatch order, so
the durable mirror converges on the in-memory state; callers that need to
know a write landed await the returned ``PendingWrite`` (or ``flush()``).
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from todomatic.errors import IOFailure, TaskNotFoundError, TodoMaticError, ValidationError
from todomatic.models import Task
from todomatic.repositories import KeyValueStore
from todomatic.utils.clock import next_timestamp

logger = logging.getLogger(__name__)

TASKS_STORAGE_KEY = "@todomatic_tasks"
CURRENT_SCHEMA_VERSION = 2

TasksListener = Callable[[list[Task]], None]
ErrorListener = Callable[[TodoMaticError], None]


# ---------------------------------------------------------------------------
# Durable record codec
# ---------------------------------------------------------------------------


def _migrate_v1(record: dict[str, Any]) -> dict[str, Any]:
    """v1 stored empty descriptions as ``""``; v2 stores them as null."""
    tasks = []
    for item in record["tasks"]:
        item = dict(item)
        if not item.get("description"):
            item["description"] = None
        tasks.append(item)
    return {"schemaVersion": 2, "tasks": tasks}


# version -> step that upgrades a record from that version to the next
_MIGRATIONS: dict[int, Callable[[dict[str, Any]], dict[str, Any]]] = {
    1: _migrate_v1,
}


def migrate_record(data: Any) -> dict[str, Any]:
    """Bring a decoded durable record up to ``CURRENT_SCHEMA_VERSION``.

    A bare JSON array is the unversioned v1 format.

    Raises:
        ValueError: If the record shape or version is not understood
    """
    if isinstance(data, list):
        data = {"schemaVersion": 1, "tasks": data}
    if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
        raise ValueError("task record must contain a 'tasks' list")

    version = data.get("schemaVersion")
    if not isinstance(version, int) or version < 1:
        raise ValueError(f"invalid schema version: {version!r}")
    if version > CURRENT_SCHEMA_VERSION:
        raise ValueError(
            f"schema version {version} is newer than supported ({CURRENT_SCHEMA_VERSION})"
        )

    while version < CURRENT_SCHEMA_VERSION:
        data = _MIGRATIONS[version](data)
        version = data["schemaVersion"]
    return data


def encode_collection(tasks: Iterable[Task]) -> str:
    """Serialize the whole collection into one versioned blob."""
    return json.dumps(
        {
            "schemaVersion": CURRENT_SCHEMA_VERSION,
            "tasks": [task.to_record() for task in tasks],
        }
    )


def decode_collection(blob: str) -> list[Task]:
    """Parse a durable blob, migrating older versions.

    Raises:
        ValueError: On malformed JSON, unknown versions or invalid task records
            (``pydantic.ValidationError`` is a ``ValueError``)
    """
    record = migrate_record(json.loads(blob))
    return [Task.model_validate(item) for item in record["tasks"]]


# ---------------------------------------------------------------------------
# Pending writes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WriteResult:
    """Outcome of one durable write."""

    ok: bool
    error: IOFailure | None = None


class PendingWrite:
    """Handle to a scheduled durable write.

    The write runs whether or not anyone awaits it; awaiting ``wait()``
    yields its ``WriteResult`` and never raises ``IOFailure``.
    """

    def __init__(self, task: asyncio.Task[WriteResult]):
        self._task = task

    @property
    def done(self) -> bool:
        return self._task.done()

    async def wait(self) -> WriteResult:
        return await asyncio.shield(self._task)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class TaskStore:
    """State container owning the task collection.

    The in-memory collection is the single source of truth. The durable
    mirror is rewritten in full after every mutation.

    Example:
        >>> store = TaskStore(JsonFileStore(path))
        >>> await store.load()
        >>> pending = store.toggle_completed(task_id)
        >>> result = await pending.wait()
    """

    def __init__(self, storage: KeyValueStore, key: str = TASKS_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._tasks: list[Task] = []
        self._listeners: list[TasksListener] = []
        self._error_listeners: list[ErrorListener] = []
        self._write_lock = asyncio.Lock()
        self._pending: set[asyncio.Task[WriteResult]] = set()

    @property
    def tasks(self) -> list[Task]:
        """A copy of the current in-memory collection."""
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def require(self, task_id: str) -> Task:
        """Like ``get`` but raises ``TaskNotFoundError``."""
        task = self.get(task_id)
        if task is None:
            raise TaskNotFoundError(f"Task '{task_id}' not found")
        return task

    # Subscriptions

    def subscribe(self, listener: TasksListener) -> Callable[[], None]:
        """Call *listener* with the new collection after every change.

        Returns:
            A function that removes the subscription
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def on_error(self, listener: ErrorListener) -> Callable[[], None]:
        """Call *listener* with every load/write failure."""
        self._error_listeners.append(listener)
        return lambda: self._error_listeners.remove(listener)

    # Durable mirror

    async def load(self) -> list[Task]:
        """Replace memory with the durable mirror's contents.

        A missing mirror yields an empty collection. An unreadable or corrupt
        mirror is reported to error listeners and also yields an empty
        collection.
        """
        tasks: list[Task] = []
        try:
            blob = await self._storage.get(self._key)
        except OSError as e:
            self._report(IOFailure(f"Failed to load tasks: {e}"))
        else:
            if blob is not None:
                try:
                    tasks = decode_collection(blob)
                except (ValueError, TypeError, KeyError) as e:
                    self._report(IOFailure(f"Failed to load tasks: {e}"))

        logger.debug("loaded %d task(s)", len(tasks))
        self._set(tasks)
        return self.tasks

    async def replace_all(self, tasks: Iterable[Task]) -> None:
        """Atomically overwrite the durable mirror with *tasks*.

        Memory is left untouched.

        Raises:
            IOFailure: If the write fails
        """
        blob = encode_collection(tasks)
        try:
            await self._storage.set(self._key, blob)
        except OSError as e:
            raise IOFailure(f"Failed to save tasks: {e}") from e

    async def flush(self) -> list[WriteResult]:
        """Wait for every write scheduled so far."""
        pending = list(self._pending)
        if not pending:
            return []
        return list(await asyncio.gather(*pending))

    # Mutations

    def upsert(self, task: Task) -> PendingWrite:
        """Insert *task*, or replace the task with the same id.

        Raises:
            ValidationError: If *task* would change an existing task's
                ``created_at``
        """
        existing = self.get(task.id)
        if existing is None:
            updated = [*self._tasks, task]
        else:
            if existing.created_at != task.created_at:
                raise ValidationError("createdAt cannot be changed")
            updated = [task if t.id == task.id else t for t in self._tasks]
        return self._commit(updated)

    def remove(self, task_id: str) -> PendingWrite:
        """Delete the task with *task_id*.

        Raises:
            TaskNotFoundError: If no such task exists
        """
        self.require(task_id)
        return self._commit([t for t in self._tasks if t.id != task_id])

    def toggle_completed(self, task_id: str) -> PendingWrite:
        """Flip completion status; ``updated_at`` strictly increases.

        Raises:
            TaskNotFoundError: If no such task exists
        """
        task = self.require(task_id)
        toggled = task.model_copy(
            update={
                "completed": not task.completed,
                "updated_at": next_timestamp(task.updated_at),
            }
        )
        return self.upsert(toggled)

    # Internals

    def _set(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        for listener in list(self._listeners):
            listener(self.tasks)

    def _commit(self, tasks: list[Task]) -> PendingWrite:
        self._set(tasks)
        write = asyncio.get_running_loop().create_task(self._persist(list(tasks)))
        self._pending.add(write)
        write.add_done_callback(self._pending.discard)
        return PendingWrite(write)

    async def _persist(self, snapshot: list[Task]) -> WriteResult:
        async with self._write_lock:
            try:
                await self.replace_all(snapshot)
            except IOFailure as e:
                self._report(e)
                return WriteResult(ok=False, error=e)
        logger.debug("persisted %d task(s)", len(snapshot))
        return WriteResult(ok=True)

    def _report(self, error: TodoMaticError) -> None:
        logger.error("%s", error)
        for listener in list(self._error_listeners):
            listener(error)
