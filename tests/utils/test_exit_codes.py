"""Tests for exit codes and the error taxonomy."""

import pytest

from todomatic.errors import (
    DeviceUnavailable,
    GeocodeFailure,
    IOFailure,
    LaunchFailure,
    PermissionDenied,
    PositionUnavailable,
    TaskNotFoundError,
    TodoMaticError,
    ValidationError,
)
from todomatic.utils import exit_codes


@pytest.mark.parametrize(
    "error,code",
    [
        (TodoMaticError("x"), exit_codes.ERROR_GENERAL),
        (ValidationError("x"), exit_codes.ERROR_INVALID_ARGS),
        (IOFailure("x"), exit_codes.ERROR_IO),
        (PositionUnavailable("x"), exit_codes.ERROR_NETWORK),
        (GeocodeFailure("x"), exit_codes.ERROR_NETWORK),
        (TaskNotFoundError("x"), exit_codes.ERROR_NOT_FOUND),
        (PermissionDenied("camera"), exit_codes.ERROR_PERMISSION_DENIED),
        (DeviceUnavailable("x"), exit_codes.ERROR_UNAVAILABLE),
        (LaunchFailure("x"), exit_codes.ERROR_UNAVAILABLE),
    ],
)
def test_error_exit_codes(error, code):
    assert error.exit_code == code


def test_exit_code_override():
    assert TodoMaticError("x", exit_code=9).exit_code == 9


def test_permission_denied_default_message():
    error = PermissionDenied("camera")
    assert str(error) == "Camera permission is required for this feature"
    assert error.capability == "camera"


def test_exit_code_names():
    assert exit_codes.get_exit_code_name(exit_codes.ERROR_IO) == "ERROR_IO"
    assert exit_codes.get_exit_code_name(42) == "UNKNOWN(42)"
