"""Flavor descriptor catalog: global defaults plus organization entries."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet

from ..models import FlavorDescriptor
from .exceptions import (
    DescriptorNotFoundError,
    DuplicateDescriptorError,
    ProtectedDescriptorError,
)

logger = logging.getLogger(__name__)


def get_available_descriptors(
    *,
    organization,
    category: Optional[str] = None,
    search: str = ''
) -> QuerySet[FlavorDescriptor]:
    """
    Descriptors an organization may use when scoring.

    Defaults come first, then by category, then alphabetically.

    Args:
        organization: Requesting organization
        category: POSITIVE or NEGATIVE filter
        search: Case-insensitive name filter

    Returns:
        QuerySet of FlavorDescriptor
    """
    queryset = FlavorDescriptor.objects.filter(
        Q(is_default=True) | Q(organization=organization)
    )

    if category:
        queryset = queryset.filter(category=category)

    if search:
        queryset = queryset.filter(name__icontains=search)

    return queryset.order_by('-is_default', 'category', 'name')


def get_descriptor(*, descriptor_id: UUID, organization) -> FlavorDescriptor:
    """
    Get a descriptor available to the organization.

    Raises:
        DescriptorNotFoundError: If descriptor is neither default nor owned
    """
    try:
        return get_available_descriptors(organization=organization).get(id=descriptor_id)
    except FlavorDescriptor.DoesNotExist:
        raise DescriptorNotFoundError(f"Flavor descriptor {descriptor_id} not found")


def _get_custom_descriptor(descriptor_id, organization) -> FlavorDescriptor:
    try:
        descriptor = (
            FlavorDescriptor.objects
            .select_for_update()
            .get(Q(is_default=True) | Q(organization=organization), id=descriptor_id)
        )
    except FlavorDescriptor.DoesNotExist:
        raise DescriptorNotFoundError(f"Flavor descriptor {descriptor_id} not found")

    if descriptor.is_default:
        raise ProtectedDescriptorError("Default flavor descriptors cannot be modified")

    return descriptor


def _ensure_unique_name(name, organization, exclude_id=None):
    # names double as tally keys, so they may not shadow a default either
    queryset = FlavorDescriptor.objects.filter(
        Q(organization=organization) | Q(organization__isnull=True),
        name__iexact=name,
    )
    if exclude_id:
        queryset = queryset.exclude(id=exclude_id)

    if queryset.exists():
        raise DuplicateDescriptorError(
            "A flavor descriptor with this name already exists"
        )


@transaction.atomic
def create_descriptor(
    *,
    organization,
    created_by,
    name: str,
    category: str,
    description: str = ''
) -> FlavorDescriptor:
    """
    Create an organization-specific descriptor.

    Raises:
        DuplicateDescriptorError: If the organization or the defaults already have this name
    """
    name = name.strip()
    _ensure_unique_name(name, organization)

    descriptor = FlavorDescriptor.objects.create(
        organization=organization,
        created_by=created_by,
        name=name,
        category=category,
        description=description,
        is_default=False,
    )
    logger.info("Flavor descriptor '%s' created for organization %s", name, organization.id)
    return descriptor


@transaction.atomic
def update_descriptor(*, descriptor_id: UUID, organization, **fields) -> FlavorDescriptor:
    """
    Update a custom descriptor.

    Raises:
        DescriptorNotFoundError: If descriptor is not available
        ProtectedDescriptorError: If descriptor is a default
        DuplicateDescriptorError: If the new name is taken
    """
    descriptor = _get_custom_descriptor(descriptor_id, organization)

    if 'name' in fields:
        fields['name'] = fields['name'].strip()
        _ensure_unique_name(fields['name'], organization, exclude_id=descriptor.id)

    for field in ('name', 'category', 'description'):
        if field in fields:
            setattr(descriptor, field, fields[field])

    descriptor.save()
    return descriptor


@transaction.atomic
def delete_descriptor(*, descriptor_id: UUID, organization) -> None:
    """
    Delete a custom descriptor.

    Raises:
        DescriptorNotFoundError: If descriptor is not available
        ProtectedDescriptorError: If descriptor is a default
    """
    descriptor = _get_custom_descriptor(descriptor_id, organization)
    descriptor.delete()
    logger.info("Flavor descriptor %s deleted", descriptor_id)
