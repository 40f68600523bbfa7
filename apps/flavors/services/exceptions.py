"""Domain-specific exceptions for flavor descriptor services."""


class FlavorsServiceError(Exception):
    """Base exception for flavor descriptor services."""
    pass


class DescriptorNotFoundError(FlavorsServiceError):
    """Raised when descriptor does not exist or is not available."""
    pass


class DuplicateDescriptorError(FlavorsServiceError):
    """Raised when the organization already has a descriptor with this name."""
    pass


class ProtectedDescriptorError(FlavorsServiceError):
    """Raised when modifying or deleting a default descriptor."""
    pass
