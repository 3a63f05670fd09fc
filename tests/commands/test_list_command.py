"""Unit tests for the list command."""

import json

import pytest
from conftest import make_task, seed
from typer.testing import CliRunner

from todomatic.commands.list_command import app

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("patch_app_context")

TASKS = [
    make_task("task-aaa1", "Team Meeting", created_at=100),
    make_task("task-bbb2", "Buy milk", created_at=300, completed=True),
    make_task("task-ccc3", "Call mom", created_at=200),
]


def titles(output):
    return [task["title"] for task in json.loads(output)["tasks"]]


def test_list_json_newest_first(memory_store):
    seed(memory_store, TASKS)
    result = runner.invoke(app, ["--json"])

    assert result.exit_code == 0, result.output
    assert titles(result.output) == ["Buy milk", "Call mom", "Team Meeting"]


def test_list_active(memory_store):
    seed(memory_store, TASKS)
    result = runner.invoke(app, ["--filter", "active", "--json"])
    assert titles(result.output) == ["Call mom", "Team Meeting"]


def test_list_completed(memory_store):
    seed(memory_store, TASKS)
    result = runner.invoke(app, ["-f", "COMPLETED", "--json"])
    assert titles(result.output) == ["Buy milk"]


def test_list_search(memory_store):
    seed(memory_store, TASKS)
    result = runner.invoke(app, ["--search", "MEET", "--json"])
    assert titles(result.output) == ["Team Meeting"]


def test_list_pretty(memory_store):
    seed(memory_store, TASKS)
    result = runner.invoke(app, [])

    assert result.exit_code == 0, result.output
    assert "2 active, 1 completed" in result.output
    assert result.output.index("Buy milk") < result.output.index("Team Meeting")


def test_list_empty_state():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Add your first task" in result.output


def test_list_empty_search(memory_store):
    seed(memory_store, TASKS)
    result = runner.invoke(app, ["--search", "zzz"])
    assert "No tasks match your search" in result.output


def test_list_corrupt_store_reports_and_shows_empty(memory_store):
    from todomatic.services.task_store import TASKS_STORAGE_KEY

    memory_store.data[TASKS_STORAGE_KEY] = "{broken"
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Failed to load tasks" in result.output
    assert "Add your first task" in result.output
