"""Cupping template management service."""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet

from ..models import CuppingTemplate, ScoringSystem
from .exceptions import TemplateNotFoundError, ProtectedTemplateError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = 'SCA Standard'

SCA_STANDARD_CATEGORIES = [
    {
        'name': 'Fragrance/Aroma',
        'weight': 1,
        'description': 'The smell of the coffee when dry and when infused with hot water',
    },
    {
        'name': 'Flavor',
        'weight': 1,
        'description': 'The taste of the coffee when sipped',
    },
    {
        'name': 'Aftertaste',
        'weight': 1,
        'description': 'The length of positive flavor qualities emanating from the back of the palate',
    },
    {
        'name': 'Acidity',
        'weight': 1,
        'description': 'The brightness and liveliness of the coffee',
    },
    {
        'name': 'Body',
        'weight': 1,
        'description': 'The tactile feeling of the liquid in the mouth',
    },
    {
        'name': 'Balance',
        'weight': 1,
        'description': 'How all the various aspects of flavor, aftertaste, acidity and body work together',
    },
    {
        'name': 'Uniformity',
        'weight': 1,
        'description': 'How consistent the flavor is across multiple cups',
    },
    {
        'name': 'Clean Cup',
        'weight': 1,
        'description': 'A lack of interfering negative impressions from ingestion to aftertaste',
    },
    {
        'name': 'Sweetness',
        'weight': 1,
        'description': 'How much sweetness is perceived in the coffee',
    },
    {
        'name': 'Overall',
        'weight': 1,
        'description': 'The holistic assessment of the sample as perceived by the individual panelist',
    },
]

UPDATABLE_FIELDS = [
    'name', 'description', 'scoring_system', 'max_score', 'is_public', 'categories',
]


def list_templates(
    *,
    organization,
    search: Optional[str] = None,
    scoring_system: Optional[str] = None
) -> QuerySet[CuppingTemplate]:
    """
    Templates visible to an organization: its own plus public ones.

    Args:
        organization: Requesting organization
        search: Case-insensitive search in name and description
        scoring_system: SCA, COE or CUSTOM

    Returns:
        QuerySet ordered with defaults first, newest next
    """
    queryset = (
        CuppingTemplate.objects
        .filter(Q(organization=organization) | Q(is_public=True))
        .select_related('created_by')
    )

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(description__icontains=search)
        )

    if scoring_system:
        queryset = queryset.filter(scoring_system=scoring_system)

    return queryset.order_by('-is_default', '-created_at')


def get_template(*, template_id: UUID, organization) -> CuppingTemplate:
    """
    Get a template visible to the organization.

    Raises:
        TemplateNotFoundError: If template is neither owned nor public
    """
    try:
        return list_templates(organization=organization).get(id=template_id)
    except CuppingTemplate.DoesNotExist:
        raise TemplateNotFoundError(f"Template {template_id} not found")


def _get_owned_template(template_id, organization) -> CuppingTemplate:
    try:
        return (
            CuppingTemplate.objects
            .select_for_update()
            .get(id=template_id, organization=organization)
        )
    except CuppingTemplate.DoesNotExist:
        raise TemplateNotFoundError(f"Template {template_id} not found")


@transaction.atomic
def create_template(*, organization, created_by, **fields) -> CuppingTemplate:
    """Create a template owned by the organization."""
    data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    template = CuppingTemplate.objects.create(
        organization=organization,
        created_by=created_by,
        **data
    )
    logger.info("Template '%s' created for organization %s", template.name, organization.id)
    return template


@transaction.atomic
def update_template(*, template_id: UUID, organization, data: Dict[str, Any]) -> CuppingTemplate:
    """
    Update an organization template.

    Raises:
        TemplateNotFoundError: If template isn't owned by the organization
        ProtectedTemplateError: If template is a default
    """
    template = _get_owned_template(template_id, organization)

    if template.is_default:
        raise ProtectedTemplateError("Cannot modify default templates")

    for field, value in data.items():
        if field in UPDATABLE_FIELDS:
            setattr(template, field, value)

    template.save()
    return template


@transaction.atomic
def delete_template(*, template_id: UUID, organization) -> None:
    """
    Delete an organization template.

    Sessions using it keep running without a template.

    Raises:
        TemplateNotFoundError: If template isn't owned by the organization
        ProtectedTemplateError: If template is a default
    """
    template = _get_owned_template(template_id, organization)

    if template.is_default:
        raise ProtectedTemplateError("Cannot delete default templates")

    template.delete()
    logger.info("Template %s deleted", template_id)


@transaction.atomic
def ensure_default_template(*, organization, user=None) -> CuppingTemplate:
    """
    Return the organization's "SCA Standard" template, creating it if missing.
    """
    template, created = CuppingTemplate.objects.get_or_create(
        organization=organization,
        name=DEFAULT_TEMPLATE_NAME,
        is_default=True,
        defaults={
            'created_by': user,
            'description': 'Standard SCA cupping form with 10 categories',
            'scoring_system': ScoringSystem.SCA,
            'max_score': 100,
            'is_public': False,
            'categories': SCA_STANDARD_CATEGORIES,
        },
    )

    if created:
        logger.info("Created default template for organization %s", organization.id)

    return template
