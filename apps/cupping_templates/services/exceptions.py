"""Domain-specific exceptions for cupping template services."""


class TemplatesServiceError(Exception):
    """Base exception for template services."""
    pass


class TemplateNotFoundError(TemplatesServiceError):
    """Raised when template does not exist or is not accessible."""
    pass


class ProtectedTemplateError(TemplatesServiceError):
    """Raised when modifying or deleting a default template."""
    pass
