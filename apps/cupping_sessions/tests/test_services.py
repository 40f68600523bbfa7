import pytest
from datetime import timedelta
from django.utils import timezone

from apps.samples.models import Sample
from apps.cupping_templates.services import ensure_default_template
from apps.cupping_sessions.models import SessionStatus, ParticipantRole
from apps.cupping_sessions.services import (
    blind_code_for,
    create_session,
    update_session,
    delete_session,
    start_session,
    complete_session,
    schedule_session,
    cancel_session,
    archive_session,
    add_sample_to_session,
    remove_sample_from_session,
    add_participant,
    ensure_participant,
    get_session,
    SessionNotFoundError,
    SessionLockedError,
    SessionSampleError,
    SessionSampleNotFoundError,
    SessionTemplateError,
    ParticipantError,
    InvalidTransitionError,
)


def test_blind_codes():
    assert blind_code_for(0) == 'Sample A'
    assert blind_code_for(1) == 'Sample B'
    assert blind_code_for(25) == 'Sample Z'
    assert blind_code_for(26) == 'Sample AA'
    assert blind_code_for(27) == 'Sample AB'


# ============================================================================
# SESSION CREATION TESTS
# ============================================================================

@pytest.mark.django_db
class TestCreateSession:

    def test_creator_is_calibrated_head_judge(self, cupping_session, admin_user):
        participant = cupping_session.participants.get()

        assert participant.user == admin_user
        assert participant.role == ParticipantRole.HEAD_JUDGE
        assert participant.is_calibrated is True
        assert cupping_session.status == SessionStatus.DRAFT

    def test_samples_positioned_in_order(self, cupping_session, sample, second_sample):
        rows = list(cupping_session.session_samples.order_by('position'))

        assert [(r.sample, r.position) for r in rows] == [(sample, 1), (second_sample, 2)]
        assert all(r.blind_code == '' for r in rows)

    def test_blind_tasting_assigns_codes(self, organization, admin_user, sample, second_sample):
        session = create_session(
            organization=organization,
            created_by=admin_user,
            name='Blind Table',
            blind_tasting=True,
            sample_ids=[second_sample.id, sample.id],
        )

        codes = {
            row.sample_id: row.blind_code
            for row in session.session_samples.all()
        }
        assert codes == {second_sample.id: 'Sample A', sample.id: 'Sample B'}

    def test_repeated_sample_ids_collapse(self, organization, admin_user, sample):
        session = create_session(
            organization=organization,
            created_by=admin_user,
            name='Repeats',
            sample_ids=[sample.id, sample.id],
        )

        assert session.session_samples.count() == 1

    def test_foreign_sample_rejected(self, organization, admin_user, sample, foreign_sample):
        with pytest.raises(SessionSampleError):
            create_session(
                organization=organization,
                created_by=admin_user,
                name='Sneaky',
                sample_ids=[sample.id, foreign_sample.id],
            )

    def test_template_attached(self, organization, admin_user):
        template = ensure_default_template(organization=organization, user=admin_user)

        session = create_session(
            organization=organization,
            created_by=admin_user,
            name='Templated',
            template_id=template.id,
        )

        assert session.template == template

    def test_foreign_private_template_rejected(self, organization, admin_user, other_organization):
        template = ensure_default_template(organization=other_organization)

        with pytest.raises(SessionTemplateError):
            create_session(
                organization=organization,
                created_by=admin_user,
                name='Borrowed',
                template_id=template.id,
            )


# ============================================================================
# SESSION UPDATE / DELETE TESTS
# ============================================================================

@pytest.mark.django_db
class TestUpdateSession:

    def test_replace_samples(self, organization, cupping_session, second_sample):
        update_session(
            session_id=cupping_session.id,
            organization=organization,
            data={'sample_ids': [second_sample.id]},
        )

        assert list(cupping_session.session_samples.values_list('sample_id', 'position')) == [
            (second_sample.id, 1)
        ]

    def test_toggle_blind_refreshes_codes(self, organization, cupping_session):
        update_session(
            session_id=cupping_session.id,
            organization=organization,
            data={'blind_tasting': True},
        )

        codes = list(cupping_session.session_samples.order_by('position').values_list('blind_code', flat=True))
        assert codes == ['Sample A', 'Sample B']

    @pytest.mark.parametrize('locked_status', ['ACTIVE', 'COMPLETED', 'ARCHIVED'])
    def test_locked_statuses(self, organization, cupping_session, locked_status):
        cupping_session.status = locked_status
        cupping_session.save()

        with pytest.raises(SessionLockedError):
            update_session(
                session_id=cupping_session.id,
                organization=organization,
                data={'name': 'Renamed'},
            )

    def test_cannot_delete_active(self, organization, active_session):
        with pytest.raises(SessionLockedError):
            delete_session(session_id=active_session.id, organization=organization)

    def test_delete_draft(self, organization, cupping_session):
        delete_session(session_id=cupping_session.id, organization=organization)

        with pytest.raises(SessionNotFoundError):
            get_session(session_id=cupping_session.id, organization=organization)

    def test_samples_survive_session_delete(self, organization, cupping_session, sample):
        delete_session(session_id=cupping_session.id, organization=organization)

        assert Sample.objects.filter(id=sample.id).exists()

    def test_foreign_organization_cannot_see(self, other_organization, cupping_session):
        with pytest.raises(SessionNotFoundError):
            get_session(session_id=cupping_session.id, organization=other_organization)


# ============================================================================
# STATUS OPERATION TESTS
# ============================================================================

@pytest.mark.django_db
class TestStatusOperations:

    def test_full_happy_path(self, organization, cupping_session):
        start_session(session_id=cupping_session.id, organization=organization)
        complete_session(session_id=cupping_session.id, organization=organization)
        session = archive_session(session_id=cupping_session.id, organization=organization)

        assert session.status == SessionStatus.ARCHIVED
        assert session.started_at <= session.completed_at

    def test_start_requires_samples(self, organization, admin_user):
        session = create_session(organization=organization, created_by=admin_user, name='Empty')

        with pytest.raises(SessionSampleError):
            start_session(session_id=session.id, organization=organization)

    def test_complete_from_draft_rejected(self, organization, cupping_session):
        with pytest.raises(InvalidTransitionError):
            complete_session(session_id=cupping_session.id, organization=organization)

    def test_schedule_with_time(self, organization, cupping_session):
        when = timezone.now() + timedelta(days=2)

        session = schedule_session(
            session_id=cupping_session.id,
            organization=organization,
            scheduled_at=when,
        )

        assert session.status == SessionStatus.SCHEDULED
        assert session.scheduled_at == when

    def test_schedule_without_time_rejected(self, organization, cupping_session):
        with pytest.raises(InvalidTransitionError):
            schedule_session(session_id=cupping_session.id, organization=organization)

    def test_cancel_active_then_archive(self, organization, active_session):
        cancel_session(session_id=active_session.id, organization=organization)
        session = archive_session(session_id=active_session.id, organization=organization)

        assert session.status == SessionStatus.ARCHIVED

    def test_restart_completed_rejected(self, organization, active_session):
        complete_session(session_id=active_session.id, organization=organization)

        with pytest.raises(InvalidTransitionError):
            start_session(session_id=active_session.id, organization=organization)


# ============================================================================
# SESSION SAMPLES & PARTICIPANTS TESTS
# ============================================================================

@pytest.mark.django_db
class TestSessionSamples:

    def test_add_sample_appends(self, organization, admin_user, sample, second_sample):
        session = create_session(
            organization=organization,
            created_by=admin_user,
            name='Growing',
            blind_tasting=True,
            sample_ids=[sample.id],
        )

        session_sample = add_sample_to_session(
            session_id=session.id,
            organization=organization,
            sample_id=second_sample.id,
            water_temp=93,
        )

        assert session_sample.position == 2
        assert session_sample.blind_code == 'Sample B'
        assert session_sample.is_blind is True

    def test_add_duplicate_sample(self, organization, cupping_session, sample):
        with pytest.raises(SessionSampleError):
            add_sample_to_session(
                session_id=cupping_session.id,
                organization=organization,
                sample_id=sample.id,
            )

    def test_add_to_active_rejected(self, organization, active_session, admin_user):
        extra = Sample.objects.create(organization=organization, name='Late', origin='Peru')

        with pytest.raises(SessionLockedError):
            add_sample_to_session(
                session_id=active_session.id,
                organization=organization,
                sample_id=extra.id,
            )

    def test_remove_sample(self, organization, cupping_session, sample):
        remove_sample_from_session(
            session_id=cupping_session.id,
            organization=organization,
            sample_id=sample.id,
        )

        assert not cupping_session.session_samples.filter(sample=sample).exists()

    def test_remove_missing_sample(self, organization, cupping_session, foreign_sample):
        with pytest.raises(SessionSampleNotFoundError):
            remove_sample_from_session(
                session_id=cupping_session.id,
                organization=organization,
                sample_id=foreign_sample.id,
            )


@pytest.mark.django_db
class TestParticipants:

    def test_add_member(self, organization, cupping_session, cupper_user):
        participant = add_participant(
            session_id=cupping_session.id,
            organization=organization,
            user_id=cupper_user.id,
        )

        assert participant.role == ParticipantRole.JUDGE
        assert participant.calibrated_at is None

    def test_outsider_rejected(self, organization, cupping_session, outsider_user):
        with pytest.raises(ParticipantError):
            add_participant(
                session_id=cupping_session.id,
                organization=organization,
                user_id=outsider_user.id,
            )

    def test_duplicate_rejected(self, organization, cupping_session, admin_user):
        with pytest.raises(ParticipantError):
            add_participant(
                session_id=cupping_session.id,
                organization=organization,
                user_id=admin_user.id,
            )

    def test_ensure_participant_keeps_role(self, cupping_session, admin_user, cupper_user):
        head = ensure_participant(session=cupping_session, user=admin_user)
        judge = ensure_participant(session=cupping_session, user=cupper_user)

        assert head.role == ParticipantRole.HEAD_JUDGE
        assert judge.role == ParticipantRole.JUDGE
        assert cupping_session.participants.count() == 2
