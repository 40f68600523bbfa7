"""Errors raised by the pure scoring layer (aggregation, value types)."""


class ScoringServiceError(Exception):
    """Base exception for scoring."""
    pass


class InvalidCategoryScoreError(ScoringServiceError):
    """Raised when a category value is unknown, out of range or off-step."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(message)


class InvalidFlavorSelectionError(ScoringServiceError):
    """Raised when a flavor selection breaks intensity or uniqueness rules."""
    pass


class InvalidScoreRecordError(ScoringServiceError):
    """Raised when a score record cannot be built."""
    pass
