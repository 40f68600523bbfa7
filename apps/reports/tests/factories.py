"""Builders for score records used across report tests."""

from datetime import datetime, timezone as dt_timezone

from apps.scoring.domain import FlavorSelection, ScoreRecord
from apps.scoring.scaa import SCAA_CATEGORIES

SUBMITTED_AT = datetime(2024, 5, 1, 10, 0, tzinfo=dt_timezone.utc)


def make_record(evaluator, sample_id='sample-1', value='8.00', flavors=(), session_id='session-1', **extra):
    """Submitted score with every category set to `value`."""
    fields = {
        'score_id': f'{evaluator}-{sample_id}',
        'session_id': session_id,
        'sample_id': sample_id,
        'evaluator_id': evaluator,
        'evaluator_name': evaluator.title(),
        'categories': {category: value for category in SCAA_CATEGORIES},
        'is_submitted': True,
        'submitted_at': SUBMITTED_AT,
        'created_at': SUBMITTED_AT,
        'flavor_selections': tuple(flavors),
    }
    fields.update(extra)
    return ScoreRecord(**fields)


def flavor(name, intensity=3, category='POSITIVE'):
    return FlavorSelection(descriptor_id=None, name=name, category=category, intensity=intensity)
