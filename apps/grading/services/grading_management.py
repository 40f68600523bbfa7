"""Green bean grading CRUD service."""

import logging
from typing import Any, Dict
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.samples.models import Sample
from ..calculations import assess_grade, GradeAssessment
from ..models import GreenBeanGrading
from .exceptions import (
    GradingSampleNotFoundError,
    GradingNotFoundError,
    GradingAlreadyExistsError,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'grading_system', 'primary_defects', 'secondary_defects', 'defect_breakdown',
    'screen_size_distribution', 'moisture_content', 'water_activity',
    'bulk_density', 'bean_color_assessment', 'uniformity_score',
    'certified_by', 'certification_date', 'notes',
]


def _lock_sample(sample_id, organization) -> Sample:
    try:
        return (
            Sample.objects
            .select_for_update()
            .get(id=sample_id, organization=organization)
        )
    except Sample.DoesNotExist:
        raise GradingSampleNotFoundError(f"Sample {sample_id} not found")


def _ensure_sample_exists(sample_id, organization):
    if not Sample.objects.filter(id=sample_id, organization=organization).exists():
        raise GradingSampleNotFoundError(f"Sample {sample_id} not found")


def get_grading(*, sample_id: UUID, organization) -> GreenBeanGrading:
    """
    Grading of a sample within an organization.

    Raises:
        GradingSampleNotFoundError: If sample doesn't exist in the organization
        GradingNotFoundError: If the sample has not been graded
    """
    _ensure_sample_exists(sample_id, organization)

    try:
        return (
            GreenBeanGrading.objects
            .select_related('sample', 'graded_by')
            .get(sample_id=sample_id)
        )
    except GreenBeanGrading.DoesNotExist:
        raise GradingNotFoundError("Grading not found for this sample")


@transaction.atomic
def create_grading(*, sample_id: UUID, organization, graded_by, **fields) -> GreenBeanGrading:
    """
    Grade a sample. Derived values are computed on save.

    Args:
        sample_id: Sample UUID
        organization: Owning organization
        graded_by: Member recording the grading
        **fields: Defect counts and measurements

    Raises:
        GradingSampleNotFoundError: If sample doesn't exist in the organization
        GradingAlreadyExistsError: If the sample is already graded
    """
    sample = _lock_sample(sample_id, organization)

    if GreenBeanGrading.objects.filter(sample=sample).exists():
        raise GradingAlreadyExistsError(
            "Grading already exists for this sample. Use PUT to update."
        )

    data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    grading = GreenBeanGrading.objects.create(
        sample=sample,
        graded_by=graded_by,
        graded_at=timezone.now(),
        **data
    )

    logger.info(
        "Sample %s graded %s (%s full defects)",
        sample.id,
        grading.classification,
        grading.full_defect_equivalents,
    )
    return grading


@transaction.atomic
def update_grading(*, sample_id: UUID, organization, graded_by, data: Dict[str, Any]) -> GreenBeanGrading:
    """
    Update a grading; fields left out keep their values.

    The updating member becomes the grader.

    Raises:
        GradingSampleNotFoundError: If sample doesn't exist in the organization
        GradingNotFoundError: If the sample has not been graded
    """
    sample = _lock_sample(sample_id, organization)

    try:
        grading = GreenBeanGrading.objects.select_for_update().get(sample=sample)
    except GreenBeanGrading.DoesNotExist:
        raise GradingNotFoundError("Grading not found")

    for field in UPDATABLE_FIELDS:
        if field in data:
            setattr(grading, field, data[field])

    grading.graded_by = graded_by
    grading.graded_at = timezone.now()
    grading.save()

    logger.info("Grading of sample %s updated to %s", sample.id, grading.classification)
    return grading


@transaction.atomic
def delete_grading(*, sample_id: UUID, organization) -> None:
    """
    Remove a sample's grading.

    Raises:
        GradingSampleNotFoundError: If sample doesn't exist in the organization
        GradingNotFoundError: If the sample has not been graded
    """
    sample = _lock_sample(sample_id, organization)

    deleted, _ = GreenBeanGrading.objects.filter(sample=sample).delete()
    if not deleted:
        raise GradingNotFoundError("Grading not found")

    logger.info("Grading of sample %s deleted", sample.id)


def preview_grade(*, sample_id: UUID, organization, **measurements) -> GradeAssessment:
    """
    Assessment for the given counts and measurements, without saving.

    Raises:
        GradingSampleNotFoundError: If sample doesn't exist in the organization
    """
    _ensure_sample_exists(sample_id, organization)
    return assess_grade(**measurements)
