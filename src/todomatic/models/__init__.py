"""TodoMatic domain models.

This package contains Pydantic models for the task entity, the transient
edit draft, and the values exchanged with device capabilities.
"""

from .config_models import AppConfig
from .core import (
    AddressComponents,
    CapabilityLevel,
    Contact,
    ContactPick,
    Coordinates,
    LocationFix,
    PermissionStatus,
    SendStatus,
    StatusFilter,
    Task,
    TaskDraft,
)

__all__ = [
    # Task models
    "Task",
    "TaskDraft",
    "StatusFilter",
    # Location models
    "Coordinates",
    "AddressComponents",
    "LocationFix",
    # Capability models
    "PermissionStatus",
    "SendStatus",
    "CapabilityLevel",
    "Contact",
    "ContactPick",
    # Config models
    "AppConfig",
]
