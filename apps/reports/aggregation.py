"""
Per-sample aggregates for reports.

Averages are taken over submitted scores only; a sample nobody has
scored yields a summary with no averages instead of dividing by zero.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, Optional

from apps.scoring.domain import ScoreRecord
from apps.scoring.flavor_tally import TalliedFlavor, tally_flavor_descriptors, split_by_polarity
from apps.scoring.scaa import (
    SCAA_CATEGORIES,
    CATEGORY_LABELS,
    classify_grade,
    classify_category_average,
)
from .domain import SampleSnapshot, SessionSnapshot

_CENTS = Decimal('0.01')


def _average(values: list) -> Optional[Decimal]:
    if not values:
        return None
    return (sum(values, Decimal('0')) / len(values)).quantize(_CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Evaluation:
    evaluator_name: str
    total: Decimal
    grade: str
    is_complete: bool


@dataclass(frozen=True)
class EvaluatorNote:
    evaluator_name: str
    created_at: Optional[datetime]
    notes: str
    private_notes: str


@dataclass(frozen=True)
class SampleSummary:
    sample: SampleSnapshot
    evaluation_count: int = 0
    average_total: Optional[Decimal] = None
    grade: Optional[str] = None
    category_averages: Mapping[str, Optional[Decimal]] = field(default_factory=dict)
    evaluations: tuple = ()
    positive_flavors: tuple = ()
    negative_flavors: tuple = ()
    notes: tuple = ()

    @property
    def has_evaluations(self) -> bool:
        return self.evaluation_count > 0

    @property
    def flavors(self) -> tuple:
        return self.positive_flavors + self.negative_flavors

    def category_rows(self) -> list[tuple[str, str, Optional[Decimal], Optional[str]]]:
        """(category, label, average, rating) in SCAA order."""
        rows = []
        for category in SCAA_CATEGORIES:
            average = self.category_averages.get(category)
            rating = None if average is None else classify_category_average(average)
            rows.append((category, CATEGORY_LABELS[category], average, rating))
        return rows


def summarize_sample(sample: SampleSnapshot, scores: Iterable[ScoreRecord]) -> SampleSummary:
    """
    Aggregate the scores of one sample.

    Category averages are taken over the scores that carry the category;
    a category nobody scored has no average.
    """
    scores = list(scores)
    if not scores:
        return SampleSummary(sample=sample)

    category_averages = {
        category: _average([
            score.categories[category]
            for score in scores
            if score.categories[category] is not None
        ])
        for category in SCAA_CATEGORIES
    }
    average_total = _average([score.total for score in scores])
    positive, negative = split_by_polarity(tally_flavor_descriptors(scores))

    return SampleSummary(
        sample=sample,
        evaluation_count=len(scores),
        average_total=average_total,
        grade=classify_grade(average_total),
        category_averages=category_averages,
        evaluations=tuple(
            Evaluation(
                evaluator_name=score.evaluator_name,
                total=score.total,
                grade=score.grade,
                is_complete=score.is_complete,
            )
            for score in scores
        ),
        positive_flavors=tuple(positive),
        negative_flavors=tuple(negative),
        notes=tuple(
            EvaluatorNote(
                evaluator_name=score.evaluator_name,
                created_at=score.created_at,
                notes=score.notes,
                private_notes=score.private_notes,
            )
            for score in scores
            if score.notes or score.private_notes
        ),
    )


def _decimal_str(value: Optional[Decimal]) -> Optional[str]:
    return None if value is None else str(value)


def _flavor_dict(flavor: TalliedFlavor) -> dict:
    return {'name': flavor.name, 'category': flavor.category, 'intensity': flavor.intensity}


def build_session_summary(
    session: SessionSnapshot,
    summaries: Iterable[SampleSummary],
    *,
    include_private_notes: bool = False
) -> dict:
    """JSON-friendly version of a session's sample summaries."""
    return {
        'session_id': session.session_id,
        'name': session.name,
        'status': session.status,
        'location': session.location,
        'created_by': session.created_by_name,
        'started_at': session.started_at.isoformat() if session.started_at else None,
        'completed_at': session.completed_at.isoformat() if session.completed_at else None,
        'participants': [
            {'user_id': participant.user_id, 'name': participant.name, 'role': participant.role}
            for participant in session.participants
        ],
        'samples': [
            {
                'sample_id': summary.sample.sample_id,
                'name': summary.sample.name,
                'position': summary.sample.position,
                'has_evaluations': summary.has_evaluations,
                'evaluation_count': summary.evaluation_count,
                'average_total': _decimal_str(summary.average_total),
                'grade': summary.grade,
                'categories': {
                    category: {'average': _decimal_str(average), 'rating': rating}
                    for category, _, average, rating in summary.category_rows()
                },
                'positive_flavors': [_flavor_dict(flavor) for flavor in summary.positive_flavors],
                'negative_flavors': [_flavor_dict(flavor) for flavor in summary.negative_flavors],
                'notes': [
                    {
                        'evaluator': note.evaluator_name,
                        'notes': note.notes,
                        **({'private_notes': note.private_notes} if include_private_notes else {}),
                    }
                    for note in summary.notes
                    if note.notes or include_private_notes
                ],
            }
            for summary in summaries
        ],
    }
