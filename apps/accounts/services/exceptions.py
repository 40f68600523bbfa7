"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class OrganizationRegistrationError(AccountsServiceError):
    """Raised when organization registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class DuplicateMemberError(AccountsServiceError):
    """Raised when the email is already registered."""
    pass


class InsufficientRoleError(AccountsServiceError):
    """Raised when the acting user's role does not allow the operation."""
    pass
