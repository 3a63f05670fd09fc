"""Error taxonomy for TodoMatic.

Every error carries the exit code the CLI uses when it reaches the top level.
Cancellations are not errors and never appear here.
"""

from __future__ import annotations

from todomatic.utils import exit_codes


class TodoMaticError(Exception):
    """Base application error with exit code."""

    exit_code: int = exit_codes.ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ValidationError(TodoMaticError):
    """Raised when user input is rejected before any mutation (e.g. empty title)."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class PermissionDenied(TodoMaticError):
    """Raised when the user refuses access to a device capability."""

    exit_code = exit_codes.ERROR_PERMISSION_DENIED

    def __init__(self, capability: str, message: str | None = None):
        self.capability = capability
        super().__init__(
            message or f"{capability.capitalize()} permission is required for this feature"
        )


class DeviceUnavailable(TodoMaticError):
    """Raised when a capability (e.g. SMS) does not exist on this device."""

    exit_code = exit_codes.ERROR_UNAVAILABLE


class IOFailure(TodoMaticError):
    """Raised when the durable task mirror cannot be read or written."""

    exit_code = exit_codes.ERROR_IO


class PositionUnavailable(TodoMaticError):
    """Raised when the current position cannot be acquired."""

    exit_code = exit_codes.ERROR_NETWORK


class GeocodeFailure(TodoMaticError):
    """Reverse geocoding failed. Non-fatal: callers degrade to raw coordinates."""

    exit_code = exit_codes.ERROR_NETWORK


class LaunchFailure(TodoMaticError):
    """Raised when neither the native map URI nor the web fallback can be opened."""

    exit_code = exit_codes.ERROR_UNAVAILABLE


class TaskNotFoundError(TodoMaticError):
    """Raised when a task id (or id prefix) does not resolve to a task."""

    exit_code = exit_codes.ERROR_NOT_FOUND
