"""
Read access to sessions and scores for report generation.

Aggregation and formatting only see `CuppingReportRepository`, so they
can run against the database or against plain in-memory records.
"""

from typing import Protocol, Iterable, Optional

from apps.cupping_sessions.models import CuppingSession
from apps.scoring.domain import FlavorSelection, ScoreRecord
from apps.scoring.models import Score
from .domain import SampleSnapshot, ParticipantSnapshot, SessionSnapshot
from .exceptions import ReportSessionNotFoundError


class CuppingReportRepository(Protocol):

    def get_session(self, session_id) -> SessionSnapshot:
        ...

    def get_scores_for_sample(self, session_id, sample_id) -> list[ScoreRecord]:
        ...


def score_to_record(score: Score) -> ScoreRecord:
    """Convert a Score row (with flavor selections loaded) to a ScoreRecord."""
    return ScoreRecord(
        score_id=str(score.id),
        session_id=str(score.session_id),
        sample_id=str(score.sample_id),
        evaluator_id=str(score.user_id),
        evaluator_name=score.user.get_display_name(),
        categories=score.category_values(),
        notes=score.notes,
        private_notes=score.private_notes,
        is_submitted=score.is_submitted,
        submitted_at=score.submitted_at,
        created_at=score.created_at,
        flavor_selections=tuple(
            FlavorSelection(
                descriptor_id=str(selection.descriptor_id),
                name=selection.descriptor.name,
                category=selection.descriptor.category,
                intensity=selection.intensity,
            )
            for selection in score.flavor_descriptors.all()
        ),
    )


class DjangoReportRepository:
    """Reads submitted scores of one organization's sessions."""

    def __init__(self, organization):
        self.organization = organization

    def get_session(self, session_id) -> SessionSnapshot:
        try:
            session = (
                CuppingSession.objects
                .select_related('created_by')
                .prefetch_related('session_samples__sample', 'participants__user')
                .get(id=session_id, organization=self.organization)
            )
        except CuppingSession.DoesNotExist:
            raise ReportSessionNotFoundError(f"Session {session_id} not found")

        return SessionSnapshot(
            session_id=str(session.id),
            name=session.name,
            status=session.get_status_display(),
            created_by_name=session.created_by.get_display_name() if session.created_by else '',
            description=session.description,
            location=session.location,
            started_at=session.started_at,
            completed_at=session.completed_at,
            participants=tuple(
                ParticipantSnapshot(
                    user_id=str(participant.user_id),
                    name=participant.user.get_display_name(),
                    role=participant.role,
                )
                for participant in session.participants.all()
            ),
            samples=tuple(
                SampleSnapshot(
                    sample_id=str(entry.sample_id),
                    name=entry.sample.name,
                    position=entry.position,
                    code=entry.sample.code,
                    origin=entry.sample.origin,
                    region=entry.sample.region,
                    variety=entry.sample.variety,
                    processing_method=entry.sample.get_processing_method_display(),
                    roast_level=entry.sample.get_roast_level_display(),
                    producer=entry.sample.producer,
                    farm=entry.sample.farm,
                    altitude=entry.sample.altitude,
                )
                for entry in session.session_samples.all()
            ),
        )

    def get_scores_for_sample(self, session_id, sample_id) -> list[ScoreRecord]:
        scores = (
            Score.objects
            .filter(
                session_id=session_id,
                session__organization=self.organization,
                sample_id=sample_id,
                is_submitted=True,
            )
            .select_related('user')
            .prefetch_related('flavor_descriptors__descriptor')
            .order_by('submitted_at', 'created_at')
        )
        return [score_to_record(score) for score in scores]


class InMemoryReportRepository:
    """Repository over prepared snapshots and records."""

    def __init__(self, sessions: Iterable[SessionSnapshot] = (), scores: Iterable[ScoreRecord] = ()):
        self._sessions = {session.session_id: session for session in sessions}
        self._scores = list(scores)

    def add_score(self, record: ScoreRecord):
        self._scores.append(record)

    def get_session(self, session_id) -> SessionSnapshot:
        session: Optional[SessionSnapshot] = self._sessions.get(str(session_id))
        if session is None:
            raise ReportSessionNotFoundError(f"Session {session_id} not found")
        return session

    def get_scores_for_sample(self, session_id, sample_id) -> list[ScoreRecord]:
        return [
            record for record in self._scores
            if record.session_id == str(session_id) and record.sample_id == str(sample_id)
            and record.is_submitted
        ]
