"""Millisecond timestamps and id generation."""

from __future__ import annotations

import time
import uuid


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return int(time.time() * 1000)


def next_timestamp(previous: int) -> int:
    """Return a timestamp strictly greater than *previous*.

    Two mutations inside the same millisecond still get distinct, ordered
    ``updated_at`` values.
    """
    return max(now_ms(), previous + 1)


def new_task_id() -> str:
    """Generate an opaque, unique task id."""
    return uuid.uuid4().hex
