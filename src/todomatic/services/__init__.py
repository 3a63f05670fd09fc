"""Services module for TodoMatic - state and workflow layer."""

from .capture_service import CaptureService, build_share_message
from .filtering import TaskListView, derive, empty_state_message
from .location_service import LocationState, LocationWorkflow
from .map_service import MapLinkResolver
from .task_editor import TaskEditor
from .task_store import PendingWrite, TaskStore, WriteResult

__all__ = [
    "TaskStore",
    "PendingWrite",
    "WriteResult",
    "TaskEditor",
    "TaskListView",
    "derive",
    "empty_state_message",
    "LocationWorkflow",
    "LocationState",
    "MapLinkResolver",
    "CaptureService",
    "build_share_message",
]
