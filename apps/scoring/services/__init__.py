"""Services for scoring business logic."""

from .exceptions import (
    ScoringServiceError,
    InvalidCategoryScoreError,
    InvalidFlavorSelectionError,
    InvalidScoreRecordError,
    ScoringSessionNotFoundError,
    SampleNotInSessionError,
    ScoreNotFoundError,
    SessionNotActiveError,
    IncompleteScoreError,
    ScoreAlreadySubmittedError,
    ScoringNotAllowedError,
)
from .score_submission import submit_score
from .score_queries import (
    get_session_scores,
    get_score_for_user,
)

__all__ = [
    # Exceptions
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
    # Submission
    'submit_score',
    # Queries
    'get_session_scores',
    'get_score_for_user',
]
