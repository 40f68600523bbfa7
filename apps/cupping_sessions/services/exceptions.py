"""Domain-specific exceptions for cupping session services."""


class SessionsServiceError(Exception):
    """Base exception for session services."""
    pass


class SessionNotFoundError(SessionsServiceError):
    """Raised when session does not exist in the organization."""
    pass


class InvalidTransitionError(SessionsServiceError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current, target, reason=None):
        self.current = current
        self.target = target
        message = reason or f"Cannot change session status from {current} to {target}"
        super().__init__(message)


class SessionLockedError(SessionsServiceError):
    """Raised when modifying a session whose status forbids edits."""
    pass


class SessionSampleError(SessionsServiceError):
    """Raised when samples cannot be attached to a session."""
    pass


class SessionSampleNotFoundError(SessionsServiceError):
    """Raised when sample is not part of the session."""
    pass


class ParticipantError(SessionsServiceError):
    """Raised when a participant cannot be added."""
    pass


class SessionTemplateError(SessionsServiceError):
    """Raised when the requested template is not available."""
    pass
