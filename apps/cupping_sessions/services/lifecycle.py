"""
Session status lifecycle.

Every status change goes through transition_session; nothing else
writes CuppingSession.status.
"""

import logging

from django.db import transaction
from django.db.models import Count
from django.utils import timezone

from ..models import CuppingSession, SessionStatus, ParticipantRole
from .exceptions import InvalidTransitionError

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    SessionStatus.DRAFT: frozenset({
        SessionStatus.SCHEDULED,
        SessionStatus.ACTIVE,
        SessionStatus.CANCELLED,
    }),
    SessionStatus.SCHEDULED: frozenset({
        SessionStatus.DRAFT,
        SessionStatus.ACTIVE,
        SessionStatus.CANCELLED,
    }),
    SessionStatus.ACTIVE: frozenset({
        SessionStatus.COMPLETED,
        SessionStatus.CANCELLED,
    }),
    SessionStatus.COMPLETED: frozenset({SessionStatus.ARCHIVED}),
    SessionStatus.CANCELLED: frozenset({SessionStatus.ARCHIVED}),
    SessionStatus.ARCHIVED: frozenset(),
}

# Statuses in which the session definition can no longer be edited
LOCKED_STATUSES = frozenset({
    SessionStatus.ACTIVE,
    SessionStatus.COMPLETED,
    SessionStatus.ARCHIVED,
})


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def transition_session(session: CuppingSession, target_status: str, *, now=None) -> CuppingSession:
    """
    Move a session to `target_status` and persist it.

    Entering ACTIVE stamps started_at, entering COMPLETED stamps
    completed_at. SCHEDULED requires scheduled_at to be set.

    Raises:
        InvalidTransitionError: If the transition is not allowed
    """
    current = session.status

    if target_status not in SessionStatus.values:
        raise InvalidTransitionError(current, target_status, f"Unknown session status {target_status}")

    if not can_transition(current, target_status):
        raise InvalidTransitionError(current, target_status)

    if target_status == SessionStatus.SCHEDULED and session.scheduled_at is None:
        raise InvalidTransitionError(
            current, target_status, "A scheduled session needs a scheduled_at time"
        )

    now = now or timezone.now()
    update_fields = ['status', 'updated_at']

    if target_status == SessionStatus.ACTIVE:
        session.started_at = now
        update_fields.append('started_at')
    elif target_status == SessionStatus.COMPLETED:
        session.completed_at = now
        update_fields.append('completed_at')

    session.status = target_status
    session.save(update_fields=update_fields)

    logger.info("Session %s moved from %s to %s", session.id, current, target_status)
    return session


@transaction.atomic
def complete_session_if_fully_scored(*, session_id) -> bool:
    """
    Complete an ACTIVE session once every scoring participant has
    submitted a score for every sample.

    Observers are not expected to score.

    Returns:
        True if the session was completed by this call
    """
    try:
        session = CuppingSession.objects.select_for_update().get(id=session_id)
    except CuppingSession.DoesNotExist:
        return False

    if session.status != SessionStatus.ACTIVE:
        return False

    sample_ids = set(session.session_samples.values_list('sample_id', flat=True))
    judge_ids = set(
        session.participants
        .exclude(role=ParticipantRole.OBSERVER)
        .values_list('user_id', flat=True)
    )

    if not sample_ids or not judge_ids:
        return False

    submitted = (
        session.scores
        .filter(is_submitted=True, sample_id__in=sample_ids, user_id__in=judge_ids)
        .order_by()
        .values('user_id')
        .annotate(sample_count=Count('sample_id', distinct=True))
    )
    fully_scored = {row['user_id'] for row in submitted if row['sample_count'] == len(sample_ids)}

    if fully_scored != judge_ids:
        return False

    transition_session(session, SessionStatus.COMPLETED)
    logger.info("Session %s completed automatically, all scores submitted", session.id)
    return True
