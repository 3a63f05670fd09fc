"""Task editor - owns the create/edit draft and commits it to the store."""

from __future__ import annotations

import logging

from todomatic.errors import ValidationError
from todomatic.models import LocationFix, Task, TaskDraft
from todomatic.services.task_store import PendingWrite, TaskStore
from todomatic.utils.clock import new_task_id, next_timestamp, now_ms

logger = logging.getLogger(__name__)


class TaskEditor:
    """Service for the in-progress create/edit form.

    Each draft carries a generation token. Workflows (location, camera)
    capture the token when they start and hand it back with their result;
    results for a draft that has since been saved, cancelled or replaced are
    discarded instead of being applied to stale state.
    """

    def __init__(self, store: TaskStore):
        """Initialize the task editor.

        Args:
            store: TaskStore that receives committed drafts
        """
        self._store = store
        self._generation = 0
        self._draft = TaskDraft()

    @property
    def draft(self) -> TaskDraft:
        return self._draft

    @property
    def generation(self) -> int:
        return self._draft.generation

    def begin_create(self) -> TaskDraft:
        """Start an empty draft for a new task."""
        return self._start(TaskDraft())

    def begin_edit(self, task: Task) -> TaskDraft:
        """Start a draft pre-filled from *task*."""
        return self._start(
            TaskDraft(
                title=task.title,
                description=task.description or "",
                location=task.location,
                formatted_address=task.formatted_address,
                image=task.image,
                edit_target=task,
            )
        )

    def update(self, *, title: str | None = None, description: str | None = None) -> None:
        """Change the draft's text fields."""
        if title is not None:
            self._draft.title = title
        if description is not None:
            self._draft.description = description

    def apply_location(self, generation: int, fix: LocationFix) -> bool:
        """Attach a location workflow result to the draft.

        Returns:
            False if the result belongs to a draft that is no longer current
        """
        if not self._is_current(generation, "location"):
            return False
        self._draft.location = fix.coordinates
        self._draft.formatted_address = fix.formatted_address
        return True

    def apply_image(self, generation: int, uri: str) -> bool:
        """Attach a captured photo URI to the draft.

        Returns:
            False if the result belongs to a draft that is no longer current
        """
        if not self._is_current(generation, "image"):
            return False
        self._draft.image = uri
        return True

    def clear_location(self) -> None:
        self._draft.location = None
        self._draft.formatted_address = None

    def clear_image(self) -> None:
        self._draft.image = None

    def save(self) -> tuple[Task, PendingWrite]:
        """Commit the draft to the store and reset it.

        Returns:
            The committed task and its pending durable write

        Raises:
            ValidationError: If the title is empty; nothing is mutated
            TaskNotFoundError: If the edited task was deleted meanwhile
        """
        draft = self._draft
        title = draft.title.strip()
        if not title:
            raise ValidationError("Title is required")

        fields = {
            "title": title,
            "description": draft.description.strip() or None,
            "location": draft.location,
            "formatted_address": draft.formatted_address if draft.location else None,
            "image": draft.image,
        }

        if draft.edit_target is not None:
            current = self._store.require(draft.edit_target.id)
            task = Task(
                id=current.id,
                completed=current.completed,
                created_at=current.created_at,
                updated_at=next_timestamp(current.updated_at),
                **fields,
            )
        else:
            now = now_ms()
            task = Task(id=new_task_id(), created_at=now, updated_at=now, **fields)

        pending = self._store.upsert(task)
        logger.info("saved task %s", task.id)
        self.reset()
        return task, pending

    def cancel(self) -> None:
        """Discard the draft."""
        self.reset()

    def reset(self) -> None:
        self._start(TaskDraft())

    def _start(self, draft: TaskDraft) -> TaskDraft:
        self._generation += 1
        draft.generation = self._generation
        self._draft = draft
        return draft

    def _is_current(self, generation: int, what: str) -> bool:
        if generation != self._draft.generation:
            logger.debug(
                "discarding stale %s result (draft %d, current %d)",
                what,
                generation,
                self._draft.generation,
            )
            return False
        return True
