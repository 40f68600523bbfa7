"""Tests for report generation services and the database repository."""

from datetime import date

import pytest
from django.utils import timezone

from apps.reports.repositories import DjangoReportRepository
from apps.reports.services import (
    report_filename,
    load_session_summaries,
    render_sample_charts,
    generate_session_report,
    get_session_summary,
    ReportSessionNotFoundError,
)
from apps.scoring.scaa import SCAA_CATEGORIES
from apps.scoring.services import submit_score
from .factories import make_record


@pytest.mark.parametrize('name,expected', [
    ('Morning Calibration', 'morning_calibration_report_2024-05-01.pdf'),
    ('Q-Grader #3 / Lab', 'q_grader__3___lab_report_2024-05-01.pdf'),
])
def test_report_filename(name, expected):
    assert report_filename(name, date(2024, 5, 1)) == expected


class TestWithMemoryRepository:

    def test_summaries_follow_table_order(self, memory_repository):
        session, summaries = load_session_summaries(session_id='session-1', repository=memory_repository)

        assert [summary.sample.name for summary in summaries] == ['Yirgacheffe Konga', 'Fazenda Santa Ines']
        assert summaries[0].evaluation_count == 2
        assert summaries[1].has_evaluations is False

    def test_drafts_left_out(self, memory_repository):
        memory_repository.add_score(make_record('bea', is_submitted=False, submitted_at=None))
        memory_repository.add_score(make_record('bea', sample_id='sample-2', is_submitted=False,
                                                submitted_at=None))

        _, summaries = load_session_summaries(session_id='session-1', repository=memory_repository)

        assert summaries[0].evaluation_count == 2
        assert summaries[1].has_evaluations is False
        assert memory_repository.get_scores_for_sample('session-1', 'sample-2') == []

    def test_unknown_session(self, memory_repository):
        with pytest.raises(ReportSessionNotFoundError):
            load_session_summaries(session_id='missing', repository=memory_repository)

    def test_generate_report(self, memory_repository):
        filename, pdf = generate_session_report(session_id='session-1', repository=memory_repository)

        assert filename == f'morning_calibration_report_{timezone.localdate():%Y-%m-%d}.pdf'
        assert pdf.startswith(b'%PDF')

    def test_generate_report_with_bad_chart(self, memory_repository):
        _, pdf = generate_session_report(
            session_id='session-1',
            repository=memory_repository,
            charts={'sample-1': b'\x00\x01broken'},
        )

        assert pdf.startswith(b'%PDF')

    def test_charts_rendered_for_scored_samples_only(self, memory_repository):
        _, summaries = load_session_summaries(session_id='session-1', repository=memory_repository)

        charts = render_sample_charts(summaries)

        assert set(charts) == {'sample-1'}
        assert charts['sample-1'].startswith(b'\x89PNG')

    def test_summary_hides_private_notes(self, memory_repository):
        data = get_session_summary(session_id='session-1', repository=memory_repository)

        assert data['samples'][0]['notes'] == [{'evaluator': 'Ada', 'notes': 'Jasmine'}]


@pytest.mark.django_db
class TestDjangoReportRepository:

    def _submit_all(self, session, target, user, value='8.00', **extra):
        return submit_score(
            session_id=session.id,
            sample_id=target.id,
            user=user,
            categories={category: value for category in SCAA_CATEGORIES},
            submit=True,
            **extra
        )

    def test_session_snapshot(self, organization, active_session, sample, second_sample):
        snapshot = DjangoReportRepository(organization).get_session(active_session.id)

        assert snapshot.name == 'Morning Calibration'
        assert snapshot.status == 'Active'
        assert snapshot.created_by_name == 'Ada Admin'
        assert [s.sample_id for s in snapshot.samples] == [str(sample.id), str(second_sample.id)]
        assert ('Processing Method', 'Washed') in snapshot.samples[0].details()
        assert snapshot.participants[0].role == 'HEAD_JUDGE'

    def test_foreign_organization(self, other_organization, active_session):
        with pytest.raises(ReportSessionNotFoundError):
            DjangoReportRepository(other_organization).get_session(active_session.id)

    def test_only_submitted_scores(self, organization, active_session, sample, cupper_user,
                                   admin_user, fruity):
        self._submit_all(active_session, sample, cupper_user, value='8.50',
                         flavor_descriptors=[{'descriptor_id': fruity.id, 'intensity': 4}])
        submit_score(session_id=active_session.id, sample_id=sample.id, user=admin_user,
                     categories={'aroma': 6})

        records = DjangoReportRepository(organization).get_scores_for_sample(active_session.id, sample.id)

        assert len(records) == 1
        record = records[0]
        assert record.evaluator_name == 'Carl Cupper'
        assert record.total == 85
        assert record.flavor_selections[0].name == 'Fruity'
        assert record.flavor_selections[0].intensity == 4

    def test_generate_from_database(self, organization, active_session, sample, admin_user):
        self._submit_all(active_session, sample, admin_user, notes='Bright')

        filename, pdf = generate_session_report(session_id=active_session.id, organization=organization)

        assert filename.startswith('morning_calibration_report_')
        assert pdf.startswith(b'%PDF')

    def test_summary_from_database(self, organization, active_session, sample, admin_user):
        self._submit_all(active_session, sample, admin_user, value='9.00')

        data = get_session_summary(session_id=active_session.id, organization=organization)

        first, second = data['samples']
        assert first['grade'] == 'Outstanding'
        assert first['average_total'] == '90.00'
        assert second['has_evaluations'] is False
