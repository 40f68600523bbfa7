"""Tests for score submission and retrieval services."""

from decimal import Decimal

import pytest

from apps.cupping_sessions.models import SessionStatus, ParticipantRole
from apps.cupping_sessions.services import add_participant
from apps.scoring.models import Score
from apps.scoring.services import (
    submit_score,
    get_session_scores,
    get_score_for_user,
    InvalidCategoryScoreError,
    InvalidFlavorSelectionError,
    ScoringSessionNotFoundError,
    SampleNotInSessionError,
    ScoreNotFoundError,
    SessionNotActiveError,
    IncompleteScoreError,
    ScoreAlreadySubmittedError,
    ScoringNotAllowedError,
)


@pytest.mark.django_db
class TestSubmitScore:

    def test_save_draft(self, active_session, sample, cupper_user):
        score = submit_score(
            session_id=active_session.id,
            sample_id=sample.id,
            user=cupper_user,
            categories={'aroma': 8, 'flavor': 7.75},
            notes='Bright and clean',
        )

        assert score.aroma == Decimal('8.00')
        assert score.total_score == Decimal('15.75')
        assert score.is_complete is False
        assert score.is_submitted is False
        assert score.session_sample.sample_id == sample.id

    def test_draft_updates_are_merged(self, active_session, sample, cupper_user):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                     categories={'aroma': 8})
        score = submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                             categories={'body': 7, 'aroma': None})

        assert Score.objects.filter(session=active_session, user=cupper_user).count() == 1
        assert score.aroma is None
        assert score.body == Decimal('7.00')

    def test_scoring_enrolls_judge(self, active_session, sample, cupper_user):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                     categories={'aroma': 8})

        participant = active_session.participants.get(user=cupper_user)
        assert participant.role == ParticipantRole.JUDGE

    def test_submit_complete_score(self, active_session, sample, cupper_user, full_categories):
        score = submit_score(
            session_id=active_session.id,
            sample_id=sample.id,
            user=cupper_user,
            categories=full_categories,
            submit=True,
        )

        assert score.is_submitted is True
        assert score.submitted_at is not None
        assert score.total_score == Decimal('82.50')
        assert score.grade == 'Very Good'

    def test_submitted_score_is_locked(self, active_session, sample, cupper_user, full_categories):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                     categories=full_categories, submit=True)

        with pytest.raises(ScoreAlreadySubmittedError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         categories={'aroma': 10})

        score = Score.objects.get(session=active_session, sample=sample, user=cupper_user)
        assert score.aroma == Decimal('8.25')

    def test_incomplete_submit_names_missing_category(self, active_session, sample, cupper_user):
        with pytest.raises(IncompleteScoreError) as exc_info:
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         categories={'aroma': 8}, submit=True)

        assert exc_info.value.field == 'flavor'
        assert not Score.objects.filter(session=active_session, user=cupper_user).exists()

    @pytest.mark.parametrize('value', [10.25, -0.25, 7.3])
    def test_invalid_value_rejected(self, active_session, sample, cupper_user, value):
        with pytest.raises(InvalidCategoryScoreError) as exc_info:
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         categories={'acidity': value})

        assert exc_info.value.field == 'acidity'

    def test_unknown_category_rejected(self, active_session, sample, cupper_user):
        with pytest.raises(InvalidCategoryScoreError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         categories={'crema': None})

    def test_draft_session_rejected(self, cupping_session, sample, cupper_user):
        with pytest.raises(SessionNotActiveError):
            submit_score(session_id=cupping_session.id, sample_id=sample.id, user=cupper_user,
                         categories={'aroma': 8})

    def test_foreign_session_not_found(self, active_session, sample, outsider_user):
        with pytest.raises(ScoringSessionNotFoundError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=outsider_user,
                         categories={'aroma': 8})

    def test_sample_must_be_on_table(self, active_session, foreign_sample, cupper_user):
        with pytest.raises(SampleNotInSessionError):
            submit_score(session_id=active_session.id, sample_id=foreign_sample.id, user=cupper_user,
                         categories={'aroma': 8})

    def test_observer_cannot_score(self, organization, active_session, sample, viewer_user):
        add_participant(session_id=active_session.id, organization=organization,
                        user_id=viewer_user.id, role=ParticipantRole.OBSERVER)

        with pytest.raises(ScoringNotAllowedError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=viewer_user,
                         categories={'aroma': 8})

    def test_calibration_required(self, active_session, sample, cupper_user):
        active_session.require_calibration = True
        active_session.save()

        with pytest.raises(ScoringNotAllowedError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         categories={'aroma': 8})


@pytest.mark.django_db
class TestFlavorSelections:

    def test_selections_saved_with_default_intensity(self, active_session, sample, cupper_user,
                                                     fruity, musty):
        score = submit_score(
            session_id=active_session.id,
            sample_id=sample.id,
            user=cupper_user,
            flavor_descriptors=[
                {'descriptor_id': fruity.id, 'intensity': 5},
                {'descriptor_id': str(musty.id)},
            ],
        )

        intensities = {
            selection.descriptor.name: selection.intensity
            for selection in score.flavor_descriptors.select_related('descriptor')
        }
        assert intensities == {'Fruity': 5, 'Musty': 3}

    def test_selections_replaced(self, active_session, sample, cupper_user, fruity, musty):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                     flavor_descriptors=[{'descriptor_id': fruity.id}])
        score = submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                             flavor_descriptors=[{'descriptor_id': musty.id, 'intensity': 2}])

        assert [s.descriptor_id for s in score.flavor_descriptors.all()] == [musty.id]

    def test_omitted_selections_are_kept(self, active_session, sample, cupper_user, fruity):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                     flavor_descriptors=[{'descriptor_id': fruity.id}])
        score = submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                             categories={'aroma': 8})

        assert score.flavor_descriptors.count() == 1

    def test_duplicate_selection_rejected(self, active_session, sample, cupper_user, fruity):
        with pytest.raises(InvalidFlavorSelectionError):
            submit_score(
                session_id=active_session.id,
                sample_id=sample.id,
                user=cupper_user,
                flavor_descriptors=[
                    {'descriptor_id': fruity.id, 'intensity': 2},
                    {'descriptor_id': fruity.id, 'intensity': 4},
                ],
            )

    @pytest.mark.parametrize('intensity', [0, 6])
    def test_intensity_out_of_range(self, active_session, sample, cupper_user, fruity, intensity):
        with pytest.raises(InvalidFlavorSelectionError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         flavor_descriptors=[{'descriptor_id': fruity.id, 'intensity': intensity}])

    def test_foreign_descriptor_rejected(self, active_session, sample, cupper_user, foreign_descriptor):
        with pytest.raises(InvalidFlavorSelectionError):
            submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                         flavor_descriptors=[{'descriptor_id': foreign_descriptor.id}])

    def test_own_custom_descriptor_allowed(self, active_session, sample, cupper_user, custom_descriptor):
        score = submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                             flavor_descriptors=[{'descriptor_id': custom_descriptor.id}])

        assert score.flavor_descriptors.get().descriptor == custom_descriptor


@pytest.mark.django_db
class TestAutoCompletion:

    def test_last_submission_completes_session(self, active_session, sample, second_sample,
                                               admin_user, full_categories):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=admin_user,
                     categories=full_categories, submit=True)
        active_session.refresh_from_db()
        assert active_session.status == SessionStatus.ACTIVE

        submit_score(session_id=active_session.id, sample_id=second_sample.id, user=admin_user,
                     categories=full_categories, submit=True)
        active_session.refresh_from_db()
        assert active_session.status == SessionStatus.COMPLETED
        assert active_session.completed_at is not None

    def test_waits_for_every_judge(self, active_session, sample, second_sample,
                                   admin_user, cupper_user, full_categories):
        submit_score(session_id=active_session.id, sample_id=sample.id, user=cupper_user,
                     categories={'aroma': 8})
        for target in (sample, second_sample):
            submit_score(session_id=active_session.id, sample_id=target.id, user=admin_user,
                         categories=full_categories, submit=True)

        active_session.refresh_from_db()
        assert active_session.status == SessionStatus.ACTIVE

    def test_drafts_do_not_complete(self, active_session, sample, second_sample,
                                    admin_user, full_categories):
        for target in (sample, second_sample):
            submit_score(session_id=active_session.id, sample_id=target.id, user=admin_user,
                         categories=full_categories)

        active_session.refresh_from_db()
        assert active_session.status == SessionStatus.ACTIVE


@pytest.mark.django_db
class TestScoreQueries:

    def test_session_scores_ordered_by_position(self, organization, active_session, sample,
                                                second_sample, cupper_user, admin_user):
        submit_score(session_id=active_session.id, sample_id=second_sample.id, user=cupper_user,
                     categories={'aroma': 7})
        submit_score(session_id=active_session.id, sample_id=sample.id, user=admin_user,
                     categories={'aroma': 8})

        scores = list(get_session_scores(session_id=active_session.id, organization=organization))

        assert [score.sample_id for score in scores] == [sample.id, second_sample.id]

    def test_filter_by_sample(self, organization, active_session, sample, second_sample, cupper_user):
        for target in (sample, second_sample):
            submit_score(session_id=active_session.id, sample_id=target.id, user=cupper_user,
                         categories={'aroma': 7})

        scores = get_session_scores(session_id=active_session.id, organization=organization,
                                    sample_id=second_sample.id)

        assert scores.count() == 1

    def test_foreign_organization_cannot_read(self, other_organization, active_session):
        with pytest.raises(ScoringSessionNotFoundError):
            get_session_scores(session_id=active_session.id, organization=other_organization)

    def test_own_score_missing(self, active_session, sample, cupper_user):
        with pytest.raises(ScoreNotFoundError):
            get_score_for_user(session_id=active_session.id, sample_id=sample.id, user=cupper_user)
