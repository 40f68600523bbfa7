"""Adding and removing samples on a session's table."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Max

from apps.samples.models import Sample
from ..models import SessionSample
from .exceptions import (
    SessionLockedError,
    SessionSampleError,
    SessionSampleNotFoundError,
)
from .lifecycle import LOCKED_STATUSES
from .session_management import lock_session, blind_code_for

logger = logging.getLogger(__name__)


def _ensure_editable(session):
    if session.status in LOCKED_STATUSES:
        raise SessionLockedError(
            f"Cannot modify samples of a session that is {session.status.lower()}"
        )


@transaction.atomic
def add_sample_to_session(
    *,
    session_id: UUID,
    organization,
    sample_id: UUID,
    position: Optional[int] = None,
    blind_code: str = '',
    **brewing
) -> SessionSample:
    """
    Place a sample on the session table.

    Position defaults to the end of the table. In blind tastings a blind
    code is derived from the position unless one is given.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionLockedError: If session is active, completed or archived
        SessionSampleError: If sample is unknown or already on the table
    """
    session = lock_session(session_id=session_id, organization=organization)
    _ensure_editable(session)

    try:
        sample = Sample.objects.get(id=sample_id, organization=organization)
    except Sample.DoesNotExist:
        raise SessionSampleError(f"Sample {sample_id} not found in your organization")

    if session.session_samples.filter(sample=sample).exists():
        raise SessionSampleError("Sample is already part of this session")

    if position is None:
        last_position = session.session_samples.aggregate(last=Max('position'))['last'] or 0
        position = last_position + 1

    if session.blind_tasting and not blind_code:
        blind_code = blind_code_for(position - 1)

    session_sample = SessionSample.objects.create(
        session=session,
        sample=sample,
        position=position,
        is_blind=session.blind_tasting or bool(blind_code),
        blind_code=blind_code,
        grind_size=brewing.get('grind_size', ''),
        water_temp=brewing.get('water_temp'),
        brew_ratio=brewing.get('brew_ratio', ''),
        steep_time=brewing.get('steep_time'),
    )

    logger.info("Sample %s added to session %s at position %d", sample.id, session.id, position)
    return session_sample


@transaction.atomic
def remove_sample_from_session(*, session_id: UUID, organization, sample_id: UUID) -> None:
    """
    Take a sample off the session table.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionLockedError: If session is active, completed or archived
        SessionSampleNotFoundError: If sample is not on the table
    """
    session = lock_session(session_id=session_id, organization=organization)
    _ensure_editable(session)

    deleted, _ = session.session_samples.filter(sample_id=sample_id).delete()
    if not deleted:
        raise SessionSampleNotFoundError("Sample not found in session")

    logger.info("Sample %s removed from session %s", sample_id, session.id)
