import pytest

from apps.reports.domain import SampleSnapshot, ParticipantSnapshot, SessionSnapshot
from apps.reports.repositories import InMemoryReportRepository
from .factories import SUBMITTED_AT, make_record, flavor


@pytest.fixture
def washed_snapshot():
    return SampleSnapshot(
        sample_id='sample-1',
        name='Yirgacheffe Konga',
        position=1,
        origin='Ethiopia',
        processing_method='Washed',
        altitude=1950,
    )


@pytest.fixture
def natural_snapshot():
    return SampleSnapshot(sample_id='sample-2', name='Fazenda Santa Ines', position=2, origin='Brazil')


@pytest.fixture
def session_snapshot(washed_snapshot, natural_snapshot):
    return SessionSnapshot(
        session_id='session-1',
        name='Morning Calibration',
        status='Completed',
        created_by_name='Ada Admin',
        location='Lab 1',
        started_at=SUBMITTED_AT,
        participants=(
            ParticipantSnapshot(user_id='ada', name='Ada Admin', role='HEAD_JUDGE'),
            ParticipantSnapshot(user_id='carl', name='Carl Cupper'),
        ),
        samples=(natural_snapshot, washed_snapshot),
    )


@pytest.fixture
def memory_repository(session_snapshot):
    """Two scores for the washed sample, none for the natural one."""
    return InMemoryReportRepository(
        sessions=[session_snapshot],
        scores=[
            make_record('ada', value='8.00', flavors=[flavor('Fruity', 3), flavor('Musty', 2, 'NEGATIVE')],
                        notes='Jasmine', private_notes='Check roast'),
            make_record('carl', value='8.50', flavors=[flavor('Fruity', 5), flavor('Caramel', 4)]),
        ],
    )
