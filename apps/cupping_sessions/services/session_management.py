"""Cupping session management service."""

import logging
from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.samples.models import Sample
from apps.cupping_templates.services import get_template, TemplateNotFoundError
from ..models import (
    CuppingSession,
    SessionSample,
    SessionParticipant,
    SessionStatus,
    ParticipantRole,
)
from .exceptions import (
    SessionNotFoundError,
    SessionLockedError,
    SessionSampleError,
    SessionTemplateError,
)
from .lifecycle import transition_session, LOCKED_STATUSES

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'name', 'description', 'location', 'blind_tasting', 'allow_comments',
    'require_calibration', 'scheduled_at', 'tags',
]


def blind_code_for(index: int) -> str:
    """
    Blind label for the sample at zero-based `index`.

    0 -> "Sample A", 25 -> "Sample Z", 26 -> "Sample AA".
    """
    letters = ''
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(65 + remainder) + letters
    return f"Sample {letters}"


def _session_queryset(organization):
    return (
        CuppingSession.objects
        .filter(organization=organization)
        .select_related('created_by', 'template')
    )


def list_sessions(
    *,
    organization,
    status: Optional[str] = None,
    search: Optional[str] = None
) -> QuerySet[CuppingSession]:
    """
    List an organization's sessions, newest first.

    Args:
        organization: Owning organization
        status: Filter by session status
        search: Case-insensitive search in name and location
    """
    queryset = _session_queryset(organization).prefetch_related(
        'session_samples__sample',
        'participants__user',
    )

    if status:
        queryset = queryset.filter(status=status)

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(location__icontains=search)
        )

    return queryset.order_by('-created_at')


def get_session(*, session_id: UUID, organization) -> CuppingSession:
    """
    Get session by ID within an organization.

    Raises:
        SessionNotFoundError: If session doesn't exist in the organization
    """
    try:
        return _session_queryset(organization).get(id=session_id)
    except CuppingSession.DoesNotExist:
        raise SessionNotFoundError(f"Session {session_id} not found")


def lock_session(*, session_id: UUID, organization) -> CuppingSession:
    """Fetch a session with a row lock. Call inside a transaction."""
    try:
        return (
            CuppingSession.objects
            .select_for_update()
            .get(id=session_id, organization=organization)
        )
    except CuppingSession.DoesNotExist:
        raise SessionNotFoundError(f"Session {session_id} not found")


def _resolve_samples(organization, sample_ids: Iterable[UUID]) -> list[Sample]:
    # keep caller order, drop repeats
    ordered_ids = list(dict.fromkeys(UUID(str(sample_id)) for sample_id in sample_ids))
    samples = Sample.objects.filter(id__in=ordered_ids, organization=organization).in_bulk()

    if len(samples) != len(ordered_ids):
        raise SessionSampleError("One or more samples not found in your organization")

    return [samples[sample_id] for sample_id in ordered_ids]


def _replace_samples(session: CuppingSession, samples: list[Sample]) -> None:
    session.session_samples.all().delete()
    SessionSample.objects.bulk_create([
        SessionSample(
            session=session,
            sample=sample,
            position=index + 1,
            is_blind=session.blind_tasting,
            blind_code=blind_code_for(index) if session.blind_tasting else '',
        )
        for index, sample in enumerate(samples)
    ])


def _refresh_blind_codes(session: CuppingSession) -> None:
    for index, session_sample in enumerate(session.session_samples.order_by('position')):
        session_sample.is_blind = session.blind_tasting
        session_sample.blind_code = blind_code_for(index) if session.blind_tasting else ''
        session_sample.save(update_fields=['is_blind', 'blind_code'])


def _resolve_template(organization, template_id):
    if template_id is None:
        return None
    try:
        return get_template(template_id=template_id, organization=organization)
    except TemplateNotFoundError as e:
        raise SessionTemplateError(str(e))


@transaction.atomic
def create_session(
    *,
    organization,
    created_by,
    name: str,
    sample_ids: Iterable[UUID] = (),
    template_id: Optional[UUID] = None,
    **fields
) -> CuppingSession:
    """
    Create a DRAFT session with its samples.

    The creator joins as a calibrated HEAD_JUDGE. Samples get positions
    1..n and, for blind tastings, codes "Sample A", "Sample B", ...

    Raises:
        SessionSampleError: If a sample is not available
        SessionTemplateError: If the template is not available
    """
    samples = _resolve_samples(organization, sample_ids)
    template = _resolve_template(organization, template_id)

    data = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    session = CuppingSession.objects.create(
        organization=organization,
        created_by=created_by,
        template=template,
        name=name,
        status=SessionStatus.DRAFT,
        **data
    )

    SessionParticipant.objects.create(
        session=session,
        user=created_by,
        role=ParticipantRole.HEAD_JUDGE,
        is_calibrated=True,
        calibrated_at=timezone.now(),
    )
    _replace_samples(session, samples)

    logger.info("Session %s created with %d samples", session.id, len(samples))
    return session


@transaction.atomic
def update_session(*, session_id: UUID, organization, data: Dict[str, Any]) -> CuppingSession:
    """
    Update a session that has not started yet.

    `data` may carry `sample_ids` to replace the sample list and
    `template_id` to change the template.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionLockedError: If session is active, completed or archived
        SessionSampleError: If a sample is not available
        SessionTemplateError: If the template is not available
    """
    session = lock_session(session_id=session_id, organization=organization)

    if session.status in LOCKED_STATUSES:
        raise SessionLockedError(
            f"Cannot modify a session that is {session.status.lower()}"
        )

    blind_before = session.blind_tasting

    for field, value in data.items():
        if field in UPDATABLE_FIELDS:
            setattr(session, field, value)

    if 'template_id' in data:
        session.template = _resolve_template(organization, data['template_id'])

    session.save()

    if 'sample_ids' in data:
        _replace_samples(session, _resolve_samples(organization, data['sample_ids']))
    elif session.blind_tasting != blind_before:
        _refresh_blind_codes(session)

    return session


@transaction.atomic
def delete_session(*, session_id: UUID, organization) -> None:
    """
    Delete a session and its samples, participants and scores.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionLockedError: If session is active
    """
    session = lock_session(session_id=session_id, organization=organization)

    if session.status == SessionStatus.ACTIVE:
        raise SessionLockedError("Cannot delete an active session")

    session.delete()
    logger.info("Session %s deleted", session_id)


def _change_status(session_id, organization, target_status) -> CuppingSession:
    session = lock_session(session_id=session_id, organization=organization)
    return transition_session(session, target_status)


@transaction.atomic
def start_session(*, session_id: UUID, organization) -> CuppingSession:
    """DRAFT/SCHEDULED -> ACTIVE. A session needs samples to start."""
    session = lock_session(session_id=session_id, organization=organization)

    if not session.session_samples.exists():
        raise SessionSampleError("Cannot start a session without samples")

    return transition_session(session, SessionStatus.ACTIVE)


@transaction.atomic
def complete_session(*, session_id: UUID, organization) -> CuppingSession:
    """ACTIVE -> COMPLETED."""
    return _change_status(session_id, organization, SessionStatus.COMPLETED)


@transaction.atomic
def schedule_session(*, session_id: UUID, organization, scheduled_at=None) -> CuppingSession:
    """DRAFT -> SCHEDULED, optionally setting the scheduled time first."""
    session = lock_session(session_id=session_id, organization=organization)

    if scheduled_at is not None:
        session.scheduled_at = scheduled_at
        session.save(update_fields=['scheduled_at', 'updated_at'])

    return transition_session(session, SessionStatus.SCHEDULED)


@transaction.atomic
def cancel_session(*, session_id: UUID, organization) -> CuppingSession:
    """DRAFT/SCHEDULED/ACTIVE -> CANCELLED."""
    return _change_status(session_id, organization, SessionStatus.CANCELLED)


@transaction.atomic
def archive_session(*, session_id: UUID, organization) -> CuppingSession:
    """COMPLETED/CANCELLED -> ARCHIVED."""
    return _change_status(session_id, organization, SessionStatus.ARCHIVED)
