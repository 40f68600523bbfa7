"""Session participants."""

from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from ..models import CuppingSession, SessionParticipant, ParticipantRole
from .exceptions import ParticipantError
from .session_management import lock_session


@transaction.atomic
def add_participant(
    *,
    session_id: UUID,
    organization,
    user_id: UUID,
    role: str = ParticipantRole.JUDGE,
    is_calibrated: bool = False
) -> SessionParticipant:
    """
    Add an organization member to a session.

    Raises:
        SessionNotFoundError: If session doesn't exist
        ParticipantError: If user is not a member or already participates
    """
    session = lock_session(session_id=session_id, organization=organization)

    try:
        user = User.objects.get(id=user_id, organization=organization, is_active=True)
    except User.DoesNotExist:
        raise ParticipantError("User is not an active member of your organization")

    if session.participants.filter(user=user).exists():
        raise ParticipantError("User already participates in this session")

    return SessionParticipant.objects.create(
        session=session,
        user=user,
        role=role,
        is_calibrated=is_calibrated,
        calibrated_at=timezone.now() if is_calibrated else None,
    )


def ensure_participant(*, session: CuppingSession, user) -> SessionParticipant:
    """Enroll `user` as a JUDGE unless already participating."""
    participant, _ = SessionParticipant.objects.get_or_create(
        session=session,
        user=user,
        defaults={'role': ParticipantRole.JUDGE},
    )
    return participant
