"""Domain-specific exceptions for samples services."""


class SamplesServiceError(Exception):
    """Base exception for samples services."""
    pass


class SampleNotFoundError(SamplesServiceError):
    """Raised when sample does not exist in the organization."""
    pass


class SampleInUseError(SamplesServiceError):
    """Raised when deleting a sample that is part of a session."""
    pass
