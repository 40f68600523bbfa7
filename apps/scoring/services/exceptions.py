"""Domain-specific exceptions for scoring services."""

from ..exceptions import (
    ScoringServiceError,
    InvalidCategoryScoreError,
    InvalidFlavorSelectionError,
    InvalidScoreRecordError,
)


class ScoringSessionNotFoundError(ScoringServiceError):
    """Raised when the session does not exist in the user's organization."""
    pass


class SampleNotInSessionError(ScoringServiceError):
    """Raised when the sample is not on the session table."""
    pass


class ScoreNotFoundError(ScoringServiceError):
    """Raised when the user has no score for the sample."""
    pass


class SessionNotActiveError(ScoringServiceError):
    """Raised when scoring a session that is not ACTIVE."""
    pass


class IncompleteScoreError(ScoringServiceError):
    """Raised when submitting a score that lacks categories."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(message)


class ScoreAlreadySubmittedError(ScoringServiceError):
    """Raised when changing a score after it was submitted."""
    pass


class ScoringNotAllowedError(ScoringServiceError):
    """Raised when the user may not score in this session."""
    pass


__all__ = [
    'ScoringServiceError',
    'InvalidCategoryScoreError',
    'InvalidFlavorSelectionError',
    'InvalidScoreRecordError',
    'ScoringSessionNotFoundError',
    'SampleNotInSessionError',
    'ScoreNotFoundError',
    'SessionNotActiveError',
    'IncompleteScoreError',
    'ScoreAlreadySubmittedError',
    'ScoringNotAllowedError',
]
