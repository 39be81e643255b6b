"""Unit tests for domain exceptions."""

import pytest

from attendtrack.domain.exceptions import (
    AttendTrackError,
    NotFound,
    PermissionDenied,
    ValidationError,
)


def test_permission_denied_inherits_attendtrack_error() -> None:
    """PermissionDenied is a subclass of AttendTrackError."""
    assert issubclass(PermissionDenied, AttendTrackError)


def test_not_found_inherits_attendtrack_error() -> None:
    """NotFound is a subclass of AttendTrackError."""
    assert issubclass(NotFound, AttendTrackError)


def test_validation_error_inherits_attendtrack_error() -> None:
    """ValidationError is a subclass of AttendTrackError."""
    assert issubclass(ValidationError, AttendTrackError)


def test_raise_not_found_catchable_as_attendtrack_error() -> None:
    """NotFound can be caught as AttendTrackError."""
    with pytest.raises(AttendTrackError):
        raise NotFound("AttendanceRecord", "42")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "User cannot verify attendance"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
