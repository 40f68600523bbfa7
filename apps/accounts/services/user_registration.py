"""Organization registration and member invitation services."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.cupping_templates.services import ensure_default_template
from ..models import Organization, UserRole
from .exceptions import (
    OrganizationRegistrationError,
    DuplicateMemberError,
    InsufficientRoleError,
)

User = get_user_model()

logger = logging.getLogger(__name__)

# Roles each inviter may hand out
INVITABLE_ROLES = {
    UserRole.ADMIN: {UserRole.ADMIN, UserRole.MANAGER, UserRole.CUPPER, UserRole.VIEWER},
    UserRole.MANAGER: {UserRole.MANAGER, UserRole.CUPPER, UserRole.VIEWER},
}


@transaction.atomic
def register_organization(
    *,
    organization_name: str,
    email: str,
    password: str,
    first_name: str = '',
    last_name: str = ''
) -> tuple[Organization, User]:
    """
    Register a new organization together with its first administrator.

    The organization starts with the "SCA Standard" template.

    Args:
        organization_name: Display name of the organization
        email: Administrator's email address
        password: Administrator's password (will be hashed)
        first_name: Administrator's first name
        last_name: Administrator's last name

    Returns:
        Tuple of (organization, admin user)

    Raises:
        OrganizationRegistrationError: If name is blank or email is taken
    """
    if not organization_name or not organization_name.strip():
        raise OrganizationRegistrationError("Organization name is required")

    if User.objects.filter(email__iexact=email).exists():
        raise OrganizationRegistrationError("A user with this email already exists")

    organization = Organization.objects.create(name=organization_name.strip())

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            organization=organization,
            role=UserRole.ADMIN,
        )
    except IntegrityError:
        raise OrganizationRegistrationError("A user with this email already exists")

    ensure_default_template(organization=organization, user=user)

    logger.info("Registered organization %s (%s)", organization.slug, organization.id)

    return organization, user


@transaction.atomic
def invite_member(
    *,
    organization: Organization,
    invited_by: User,
    email: str,
    password: str,
    role: str = UserRole.CUPPER,
    first_name: str = '',
    last_name: str = ''
) -> User:
    """
    Create a new member inside the inviter's organization.

    Admins may create any role; managers may not create admins.
    Viewers and cuppers cannot invite at all.

    Raises:
        InsufficientRoleError: If inviter may not grant the role
        DuplicateMemberError: If the email is already registered
    """
    allowed = INVITABLE_ROLES.get(invited_by.role, set())
    if invited_by.organization_id != organization.id or role not in allowed:
        raise InsufficientRoleError(
            f"Your role does not allow inviting members as {role}"
        )

    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateMemberError("A user with this email already exists")

    try:
        member = User.objects.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            organization=organization,
            role=role,
        )
    except IntegrityError:
        raise DuplicateMemberError("A user with this email already exists")

    return member
