"""Filter/search over the task collection."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from todomatic.models import StatusFilter, Task
from todomatic.services.task_store import TaskStore

VisibleListener = Callable[[list[Task]], None]


def derive(
    tasks: Iterable[Task],
    status_filter: StatusFilter = StatusFilter.ALL,
    query: str = "",
) -> list[Task]:
    """Compute the displayable task sequence.

    Keeps tasks matching *status_filter* whose title contains *query*
    (case-insensitive), newest first. Tasks created in the same millisecond
    keep their input order.
    """
    result = list(tasks)

    if status_filter is StatusFilter.ACTIVE:
        result = [task for task in result if not task.completed]
    elif status_filter is StatusFilter.COMPLETED:
        result = [task for task in result if task.completed]

    if query:
        needle = query.casefold()
        result = [task for task in result if needle in task.title.casefold()]

    return sorted(result, key=lambda task: task.created_at, reverse=True)


def empty_state_message(status_filter: StatusFilter, query: str = "") -> tuple[str, str]:
    """Headline and hint shown when ``derive`` returns nothing."""
    if query:
        return "No tasks match your search", "Try using different keywords"
    if status_filter is not StatusFilter.ALL:
        return (
            f"No {status_filter.value.lower()} tasks",
            "Change the filter or add new tasks",
        )
    return "Add your first task", "Use 'todomatic add' to create a new task"


class TaskListView:
    """Derived view over a ``TaskStore``.

    Recomputes ``visible`` whenever the store's collection, the status filter
    or the search query changes, and notifies its own subscribers.
    """

    def __init__(
        self,
        store: TaskStore,
        status_filter: StatusFilter = StatusFilter.ALL,
        query: str = "",
    ):
        self._store = store
        self._status_filter = status_filter
        self._query = query
        self._listeners: list[VisibleListener] = []
        self._visible = derive(store.tasks, status_filter, query)
        self._unsubscribe = store.subscribe(self._on_tasks_changed)

    @property
    def visible(self) -> list[Task]:
        return list(self._visible)

    @property
    def status_filter(self) -> StatusFilter:
        return self._status_filter

    @status_filter.setter
    def status_filter(self, value: StatusFilter) -> None:
        self._status_filter = value
        self._refresh(self._store.tasks)

    @property
    def query(self) -> str:
        return self._query

    @query.setter
    def query(self, value: str) -> None:
        self._query = value
        self._refresh(self._store.tasks)

    @property
    def empty_message(self) -> tuple[str, str]:
        return empty_state_message(self._status_filter, self._query)

    def subscribe(self, listener: VisibleListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def close(self) -> None:
        """Stop following the store."""
        self._unsubscribe()

    def _on_tasks_changed(self, tasks: list[Task]) -> None:
        self._refresh(tasks)

    def _refresh(self, tasks: list[Task]) -> None:
        self._visible = derive(tasks, self._status_filter, self._query)
        for listener in list(self._listeners):
            listener(self.visible)
