"""Output formatters for different formats."""

import json
from datetime import datetime
from typing import Any

import yaml
from rich.text import Text

from todomatic.models import StatusFilter, Task
from todomatic.services.filtering import empty_state_message
from todomatic.services.location_service import (
    DETAIL_PRECISION,
    LIST_PRECISION,
    location_label,
)
from todomatic.utils.ui.console import get_console

console = get_console()

STATUS_ICONS = {
    "open": "○",
    "completed": "✓",
}


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    if not task_ids:
        return {}

    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]

            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]

            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display plain data based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        console.print(data)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def format_created_date(timestamp_ms: int) -> str:
    """Render an epoch-millisecond timestamp as a local date."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d")


def format_tasks_pretty(
    tasks: list[Task],
    status_filter: StatusFilter = StatusFilter.ALL,
    query: str = "",
    all_task_ids: list[str] | None = None,
) -> None:
    """Format a derived task list in pretty format."""
    if not tasks:
        headline, hint = empty_state_message(status_filter, query)
        console.print(f"[yellow]{headline}[/yellow]")
        console.print(f"[dim]{hint}[/dim]")
        return

    active = [t for t in tasks if not t.completed]
    header = Text()
    header.append("📋 Tasks ", style="bold cyan")
    header.append(f"({len(active)} active, {len(tasks) - len(active)} completed)", style="dim")
    console.print(header)
    console.print()

    suffix_ids = all_task_ids if all_task_ids is not None else [t.id for t in tasks]
    suffix_map = calculate_unique_suffixes(suffix_ids)

    for task in tasks:
        format_task_item(task, indent="  ", suffix_map=suffix_map)


def format_task_item(
    task: Task,
    indent: str = "",
    suffix_map: dict[str, int] | None = None,
) -> None:
    """Format a single task list row."""
    status_icon = STATUS_ICONS["completed" if task.completed else "open"]

    line = Text(f"{indent}{status_icon} ")
    line.append(task.title, style="dim strike" if task.completed else "bold")
    if task.image:
        line.append("  📷", style="dim")
    console.print(line)

    if task.description:
        console.print(Text(f"{indent}   {task.description}", style="dim"))

    meta: list[tuple[str, str]] = [(format_created_date(task.created_at), "cyan")]

    if task.location:
        label = location_label(task.location, task.formatted_address, LIST_PRECISION)
        meta.append((f"📍 {label}", "magenta"))

    if suffix_map and task.id in suffix_map:
        suffix_length = suffix_map[task.id]
    else:
        suffix_length = 6
    meta.append((f"#{task.id[-suffix_length:]}", "dim"))

    meta_line = Text()
    meta_line.append(f"{indent}   └─ ", style="dim")
    for i, (text, style) in enumerate(meta):
        if i > 0:
            meta_line.append(" • ", style="dim")
        meta_line.append(text, style=style)
    console.print(meta_line)


def format_task_detail(task: Task) -> None:
    """Format one task with full detail, including precise coordinates."""
    status = "Completed" if task.completed else "Active"
    console.print(Text(task.title, style="bold"))
    console.print(f"[dim]ID:[/dim] {task.id}")
    console.print(f"[dim]Status:[/dim] {status}")
    if task.description:
        console.print(f"[dim]Description:[/dim] {task.description}")
    console.print(f"[dim]Created:[/dim] {format_created_date(task.created_at)}")
    console.print(f"[dim]Updated:[/dim] {format_created_date(task.updated_at)}")
    if task.location:
        console.print(
            "[dim]Location:[/dim] "
            + location_label(task.location, task.formatted_address, DETAIL_PRECISION)
        )
        if task.formatted_address:
            console.print(
                "[dim]Coordinates:[/dim] "
                + location_label(task.location, None, DETAIL_PRECISION)
            )
    if task.image:
        console.print(f"[dim]Photo:[/dim] {task.image}")
