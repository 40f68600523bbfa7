"""Domain-specific exceptions for grading services."""


class GradingServiceError(Exception):
    """Base exception for grading services."""
    pass


class GradingSampleNotFoundError(GradingServiceError):
    """Raised when the sample does not exist in the organization."""
    pass


class GradingNotFoundError(GradingServiceError):
    """Raised when the sample has not been graded."""
    pass


class GradingAlreadyExistsError(GradingServiceError):
    """Raised when creating a second grading for a sample."""
    pass
