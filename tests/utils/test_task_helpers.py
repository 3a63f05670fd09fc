"""Tests for task helper utilities."""

import pytest
from conftest import make_task

from todomatic.errors import TaskNotFoundError, ValidationError
from todomatic.utils.task_helpers import resolve_task_id

TASKS = [
    make_task("task-abc123", "One"),
    make_task("task-def123", "Two"),
    make_task("task-ghi456", "Three"),
]


def test_resolve_full_id():
    assert resolve_task_id(TASKS, "task-abc123") == "task-abc123"


def test_resolve_suffix():
    assert resolve_task_id(TASKS, "456") == "task-ghi456"


def test_resolve_suffix_with_hash():
    assert resolve_task_id(TASKS, "#c123") == "task-abc123"


def test_resolve_no_match():
    with pytest.raises(TaskNotFoundError):
        resolve_task_id(TASKS, "zzz")


def test_resolve_ambiguous_suffix():
    with pytest.raises(ValidationError, match="matches 2 tasks"):
        resolve_task_id(TASKS, "123")


def test_resolve_empty_reference():
    with pytest.raises(ValidationError):
        resolve_task_id(TASKS, "  ")
