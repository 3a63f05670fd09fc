"""
Exit codes for TodoMatic.

Each failure kind the CLI can report maps to its own code so scripts can tell
them apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Persistence read/write failure
ERROR_IO = 3

# Network error (geolocation endpoints unreachable, timeout, etc.)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5

# Permission denied (location, camera, contacts)
ERROR_PERMISSION_DENIED = 6

# Capability not available on this device (SMS, map opener)
ERROR_UNAVAILABLE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_IO: "ERROR_IO",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
        ERROR_UNAVAILABLE: "ERROR_UNAVAILABLE",
    }
    return code_names.get(code, f"UNKNOWN({code})")

