"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    OrganizationRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    DuplicateMemberError,
    InsufficientRoleError,
)
from .user_registration import register_organization, invite_member
from .user_authentication import authenticate_user, issue_tokens

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'OrganizationRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'DuplicateMemberError',
    'InsufficientRoleError',
    # Services
    'register_organization',
    'invite_member',
    'authenticate_user',
    'issue_tokens',
]
