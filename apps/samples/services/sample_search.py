"""Sample search and filtering service."""

from django.db.models import Q, QuerySet
from typing import Optional

from ..models import Sample


def search_samples(
    *,
    organization,
    search: Optional[str] = None,
    origin: Optional[str] = None,
    processing_method: Optional[str] = None,
    roast_level: Optional[str] = None,
) -> QuerySet[Sample]:
    """
    Search and filter an organization's samples.

    Args:
        organization: Organization whose samples are searched
        search: Search term for name, code, origin, producer, farm, variety
        origin: Filter by origin country
        processing_method: Filter by processing method
        roast_level: Filter by roast level

    Returns:
        Filtered QuerySet of Sample
    """
    queryset = Sample.objects.filter(organization=organization).select_related('created_by')

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(code__icontains=search) |
            Q(origin__icontains=search) |
            Q(producer__icontains=search) |
            Q(farm__icontains=search) |
            Q(variety__icontains=search)
        )

    if origin:
        queryset = queryset.filter(origin__icontains=origin)

    if processing_method:
        queryset = queryset.filter(processing_method=processing_method)

    if roast_level:
        queryset = queryset.filter(roast_level=roast_level)

    return queryset


def get_sample_origins(*, organization) -> list[str]:
    """Get the sorted list of distinct origins used by an organization."""
    origins = (
        Sample.objects
        .filter(organization=organization)
        .exclude(origin='')
        .values_list('origin', flat=True)
        .distinct()
        .order_by('origin')
    )

    return list(origins)
