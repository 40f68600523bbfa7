"""Reading scores back."""

from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.cupping_sessions.models import CuppingSession
from ..models import Score
from .exceptions import ScoringSessionNotFoundError, ScoreNotFoundError


def _scores_queryset():
    return (
        Score.objects
        .select_related('user', 'sample', 'session_sample')
        .prefetch_related('flavor_descriptors__descriptor')
    )


def get_session_scores(
    *,
    session_id: UUID,
    organization,
    sample_id: Optional[UUID] = None
) -> QuerySet[Score]:
    """
    All scores of a session, ordered by table position then creation.

    Raises:
        ScoringSessionNotFoundError: If session isn't in the organization
    """
    if not CuppingSession.objects.filter(id=session_id, organization=organization).exists():
        raise ScoringSessionNotFoundError(f"Session {session_id} not found")

    queryset = _scores_queryset().filter(session_id=session_id)

    if sample_id:
        queryset = queryset.filter(sample_id=sample_id)

    return queryset.order_by('session_sample__position', 'created_at')


def get_score_for_user(*, session_id: UUID, sample_id: UUID, user) -> Score:
    """
    The user's own score for a sample.

    Raises:
        ScoreNotFoundError: If the user hasn't scored the sample
    """
    try:
        return _scores_queryset().get(
            session_id=session_id,
            session__organization=user.organization,
            sample_id=sample_id,
            user=user,
        )
    except Score.DoesNotExist:
        raise ScoreNotFoundError("You have not scored this sample yet")
