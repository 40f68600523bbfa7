"""Sample CRUD service."""

import logging
from typing import Any, Dict
from uuid import UUID

from django.db import transaction

from ..models import Sample
from .exceptions import SampleNotFoundError, SampleInUseError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'name', 'code', 'origin', 'region', 'farm', 'producer', 'variety',
    'altitude', 'processing_method', 'roast_level', 'moisture', 'density',
    'description', 'tags',
]


@transaction.atomic
def create_sample(*, organization, created_by, **fields) -> Sample:
    """
    Create a sample inside an organization.

    Args:
        organization: Owning organization
        created_by: User creating the sample
        **fields: Sample attributes (name and origin are required)

    Returns:
        Created Sample instance
    """
    data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    sample = Sample.objects.create(
        organization=organization,
        created_by=created_by,
        **data
    )
    logger.info("Sample %s created in organization %s", sample.id, organization.id)
    return sample


def get_sample(*, sample_id: UUID, organization) -> Sample:
    """
    Get sample by ID within an organization.

    Raises:
        SampleNotFoundError: If sample doesn't exist in the organization
    """
    try:
        return (
            Sample.objects
            .select_related('created_by')
            .get(id=sample_id, organization=organization)
        )
    except Sample.DoesNotExist:
        raise SampleNotFoundError(f"Sample {sample_id} not found")


@transaction.atomic
def update_sample(*, sample_id: UUID, organization, data: Dict[str, Any]) -> Sample:
    """
    Update an existing sample.

    Args:
        sample_id: Sample UUID
        organization: Owning organization
        data: Fields to update

    Returns:
        Updated Sample instance

    Raises:
        SampleNotFoundError: If sample doesn't exist
    """
    try:
        sample = (
            Sample.objects
            .select_for_update()
            .get(id=sample_id, organization=organization)
        )
    except Sample.DoesNotExist:
        raise SampleNotFoundError(f"Sample {sample_id} not found")

    for field, value in data.items():
        if field in UPDATABLE_FIELDS:
            setattr(sample, field, value)

    sample.save()
    return sample


@transaction.atomic
def delete_sample(*, sample_id: UUID, organization) -> None:
    """
    Delete a sample.

    Raises:
        SampleNotFoundError: If sample doesn't exist
        SampleInUseError: If sample is part of any cupping session
    """
    try:
        sample = (
            Sample.objects
            .select_for_update()
            .get(id=sample_id, organization=organization)
        )
    except Sample.DoesNotExist:
        raise SampleNotFoundError(f"Sample {sample_id} not found")

    if sample.session_samples.exists():
        raise SampleInUseError(
            "Cannot delete a sample that is used in cupping sessions"
        )

    sample.delete()
    logger.info("Sample %s deleted", sample_id)
