"""Member sign-in and JWT issuing."""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def _find_member(email: str) -> User:
    try:
        return (
            User.objects
            .select_related('organization')
            .get(email__iexact=email.strip())
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)


def _ensure_can_sign_in(user) -> None:
    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")
    if user.organization_id is None:
        raise InactiveAccountError("Account is not attached to an organization")


def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate an organization member with email and password.

    The email match is case-insensitive. A wrong password and an unknown
    email give the same error.

    Returns:
        Authenticated User with organization loaded

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated or has no organization
    """
    user = _find_member(email)

    if not user.check_password(password):
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    _ensure_can_sign_in(user)

    update_last_login(None, user)
    logger.info("Member %s signed in to organization %s", user.id, user.organization_id)
    return user


def issue_tokens(user) -> dict:
    """
    Refresh and access tokens for a member.

    Both tokens carry `organization_id` and `role` so clients can scope
    requests without another lookup.
    """
    refresh = RefreshToken.for_user(user)
    refresh['organization_id'] = str(user.organization_id) if user.organization_id else None
    refresh['role'] = user.role

    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }
