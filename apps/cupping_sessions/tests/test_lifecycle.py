"""Tests for the session status transition function."""

import itertools
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.cupping_sessions.models import CuppingSession, SessionStatus, ParticipantRole
from apps.cupping_sessions.services import (
    ALLOWED_TRANSITIONS,
    can_transition,
    transition_session,
    complete_session_if_fully_scored,
    add_participant,
    InvalidTransitionError,
)
from apps.scoring.models import Score


ALL_STATUSES = list(SessionStatus.values)


class TestTransitionTable:

    def test_table_covers_every_status(self):
        assert set(ALLOWED_TRANSITIONS) == set(ALL_STATUSES)

    @pytest.mark.parametrize('current,target', [
        ('DRAFT', 'SCHEDULED'),
        ('DRAFT', 'ACTIVE'),
        ('SCHEDULED', 'ACTIVE'),
        ('SCHEDULED', 'DRAFT'),
        ('ACTIVE', 'COMPLETED'),
        ('ACTIVE', 'CANCELLED'),
        ('COMPLETED', 'ARCHIVED'),
        ('CANCELLED', 'ARCHIVED'),
    ])
    def test_allowed(self, current, target):
        assert can_transition(current, target)

    @pytest.mark.parametrize('current,target', [
        ('DRAFT', 'COMPLETED'),
        ('ACTIVE', 'DRAFT'),
        ('COMPLETED', 'ACTIVE'),
        ('COMPLETED', 'CANCELLED'),
        ('ARCHIVED', 'DRAFT'),
        ('ACTIVE', 'ACTIVE'),
    ])
    def test_rejected(self, current, target):
        assert not can_transition(current, target)

    def test_archived_is_terminal(self):
        assert not any(can_transition('ARCHIVED', target) for target in ALL_STATUSES)


@pytest.mark.django_db
class TestTransitionSession:

    def _session(self, organization, admin_user, status, **extra):
        return CuppingSession.objects.create(
            organization=organization,
            created_by=admin_user,
            name=f'{status} table',
            status=status,
            **extra
        )

    def test_every_pair_follows_table(self, organization, admin_user):
        for current, target in itertools.product(ALL_STATUSES, ALL_STATUSES):
            session = self._session(
                organization, admin_user, current,
                scheduled_at=timezone.now() + timedelta(days=1),
            )
            if can_transition(current, target):
                transition_session(session, target)
                session.refresh_from_db()
                assert session.status == target
            else:
                with pytest.raises(InvalidTransitionError):
                    transition_session(session, target)
                session.refresh_from_db()
                assert session.status == current

    def test_activation_stamps_started_at(self, organization, admin_user):
        session = self._session(organization, admin_user, SessionStatus.DRAFT)

        transition_session(session, SessionStatus.ACTIVE)

        assert session.started_at is not None
        assert session.completed_at is None

    def test_completion_stamps_completed_at(self, organization, admin_user):
        session = self._session(organization, admin_user, SessionStatus.ACTIVE)
        moment = timezone.now()

        transition_session(session, SessionStatus.COMPLETED, now=moment)

        session.refresh_from_db()
        assert session.completed_at == moment

    def test_schedule_requires_time(self, organization, admin_user):
        session = self._session(organization, admin_user, SessionStatus.DRAFT)

        with pytest.raises(InvalidTransitionError, match='scheduled_at'):
            transition_session(session, SessionStatus.SCHEDULED)

    def test_unknown_status_rejected(self, organization, admin_user):
        session = self._session(organization, admin_user, SessionStatus.DRAFT)

        with pytest.raises(InvalidTransitionError):
            transition_session(session, 'PAUSED')


@pytest.mark.django_db
class TestAutoCompletion:

    def _submit(self, session, sample, user):
        return Score.objects.create(
            session=session,
            session_sample=session.session_samples.get(sample=sample),
            sample=sample,
            user=user,
            is_submitted=True,
            submitted_at=timezone.now(),
        )

    def test_completes_when_all_scored(self, active_session, admin_user, sample, second_sample):
        self._submit(active_session, sample, admin_user)
        assert complete_session_if_fully_scored(session_id=active_session.id) is False

        self._submit(active_session, second_sample, admin_user)
        assert complete_session_if_fully_scored(session_id=active_session.id) is True

        active_session.refresh_from_db()
        assert active_session.status == SessionStatus.COMPLETED
        assert active_session.completed_at is not None

    def test_waits_for_every_judge(
        self, organization, active_session, admin_user, cupper_user, sample, second_sample
    ):
        add_participant(session_id=active_session.id, organization=organization, user_id=cupper_user.id)
        self._submit(active_session, sample, admin_user)
        self._submit(active_session, second_sample, admin_user)
        self._submit(active_session, sample, cupper_user)

        assert complete_session_if_fully_scored(session_id=active_session.id) is False

    def test_observers_do_not_block(
        self, organization, active_session, admin_user, viewer_user, sample, second_sample
    ):
        add_participant(
            session_id=active_session.id,
            organization=organization,
            user_id=viewer_user.id,
            role=ParticipantRole.OBSERVER,
        )
        self._submit(active_session, sample, admin_user)
        self._submit(active_session, second_sample, admin_user)

        assert complete_session_if_fully_scored(session_id=active_session.id) is True

    def test_draft_sessions_untouched(self, cupping_session):
        assert complete_session_if_fully_scored(session_id=cupping_session.id) is False
