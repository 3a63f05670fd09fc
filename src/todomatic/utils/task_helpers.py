"""Task helper utilities."""

from todomatic.errors import TaskNotFoundError, ValidationError
from todomatic.models import Task


def resolve_task_id(tasks: list[Task], task_id_or_suffix: str) -> str:
    """
    Resolve a task ID or suffix to a full task ID.

    Args:
        tasks: The current task collection
        task_id_or_suffix: Full task ID or the suffix shown by ``list``

    Returns:
        The full task ID

    Raises:
        TaskNotFoundError: If no task matches
        ValidationError: If the suffix matches more than one task
    """
    ref = task_id_or_suffix.strip().lstrip("#")
    if not ref:
        raise ValidationError("Task ID is required")

    for task in tasks:
        if task.id == ref:
            return task.id

    matching = [task for task in tasks if task.id.endswith(ref)]
    if not matching:
        raise TaskNotFoundError(f"No task found with ID or suffix '{task_id_or_suffix}'")
    if len(matching) > 1:
        titles = ", ".join(f"'{task.title}'" for task in matching[:5])
        raise ValidationError(
            f"Suffix '{task_id_or_suffix}' matches {len(matching)} tasks ({titles}); "
            "use a longer suffix"
        )
    return matching[0].id
