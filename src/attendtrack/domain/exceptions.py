"""Domain exceptions."""


class AttendTrackError(Exception):
    """Base exception for AttendTrack."""

    pass


class PermissionDenied(AttendTrackError):
    """User does not have permission for the requested action."""

    pass


class NotFound(AttendTrackError):
    """Requested resource was not found."""

    pass


class ValidationError(AttendTrackError):
    """Validation failed for input data."""

    pass
