"""Score submission service."""

import logging
from typing import Any, Iterable, Mapping, Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.cupping_sessions.models import CuppingSession, SessionSample, SessionStatus, ParticipantRole
from apps.cupping_sessions.services import ensure_participant, complete_session_if_fully_scored
from apps.flavors.services import get_available_descriptors
from ..domain import DEFAULT_INTENSITY, validate_intensity
from ..models import Score, ScoreFlavorDescriptor
from ..scaa import SCAA_CATEGORIES, validate_category_value
from .exceptions import (
    InvalidCategoryScoreError,
    InvalidFlavorSelectionError,
    ScoringSessionNotFoundError,
    SampleNotInSessionError,
    SessionNotActiveError,
    IncompleteScoreError,
    ScoreAlreadySubmittedError,
    ScoringNotAllowedError,
)

logger = logging.getLogger(__name__)


def _validate_categories(categories: Mapping[str, Any]) -> dict:
    validated = {}
    for category, value in categories.items():
        if value is None:
            if category not in SCAA_CATEGORIES:
                raise InvalidCategoryScoreError(category, f"Unknown score category '{category}'")
            validated[category] = None
        else:
            validated[category] = validate_category_value(category, value)
    return validated


def _validate_flavor_selections(organization, selections: Iterable[Mapping[str, Any]]) -> list:
    resolved = []
    seen = set()

    for selection in selections:
        try:
            descriptor_id = str(UUID(str(selection['descriptor_id'])))
        except (KeyError, ValueError):
            raise InvalidFlavorSelectionError("Each flavor selection needs a valid descriptor_id")
        intensity = selection.get('intensity')
        intensity = DEFAULT_INTENSITY if intensity is None else validate_intensity(intensity)

        if descriptor_id in seen:
            raise InvalidFlavorSelectionError(
                "A flavor descriptor can only be selected once per score"
            )
        seen.add(descriptor_id)
        resolved.append((descriptor_id, intensity))

    available = {
        str(descriptor.id): descriptor
        for descriptor in get_available_descriptors(organization=organization).filter(id__in=seen)
    }
    missing = seen - set(available)
    if missing:
        raise InvalidFlavorSelectionError(
            f"Flavor descriptor {sorted(missing)[0]} is not available to your organization"
        )

    return [(available[descriptor_id], intensity) for descriptor_id, intensity in resolved]


@transaction.atomic
def submit_score(
    *,
    session_id: UUID,
    sample_id: UUID,
    user,
    categories: Optional[Mapping[str, Any]] = None,
    notes: Optional[str] = None,
    private_notes: Optional[str] = None,
    flavor_descriptors: Optional[Iterable[Mapping[str, Any]]] = None,
    submit: bool = False
) -> Score:
    """
    Save (and optionally submit) the user's score for a sample.

    Drafts may be saved repeatedly. Once submitted a score is locked.
    The evaluator is enrolled as a JUDGE if not yet participating, and a
    submission may complete the session when it was the last one missing.

    Args:
        session_id: Session UUID
        sample_id: Sample UUID
        user: Evaluator
        categories: Category values keyed by SCAA category; None clears one
        notes: Notes shared in reports
        private_notes: Notes only the evaluator sees
        flavor_descriptors: [{'descriptor_id': ..., 'intensity': 1-5}];
            replaces existing selections when given
        submit: Finalize the score

    Returns:
        Saved Score instance

    Raises:
        ScoringSessionNotFoundError: If session isn't in the user's organization
        SessionNotActiveError: If session is not ACTIVE
        SampleNotInSessionError: If sample isn't on the session table
        InvalidCategoryScoreError: If a category value is invalid (names the field)
        InvalidFlavorSelectionError: If a flavor selection is invalid
        ScoreAlreadySubmittedError: If the score was already submitted
        IncompleteScoreError: If submitting with categories missing
        ScoringNotAllowedError: If the user is an observer or uncalibrated
    """
    try:
        session = CuppingSession.objects.get(id=session_id, organization=user.organization)
    except CuppingSession.DoesNotExist:
        raise ScoringSessionNotFoundError(f"Session {session_id} not found")

    if session.status != SessionStatus.ACTIVE:
        raise SessionNotActiveError("Scores can only be recorded while the session is active")

    try:
        session_sample = session.session_samples.get(sample_id=sample_id)
    except SessionSample.DoesNotExist:
        raise SampleNotInSessionError("Sample is not part of this session")

    validated = _validate_categories(categories or {})
    selections = None
    if flavor_descriptors is not None:
        selections = _validate_flavor_selections(user.organization, flavor_descriptors)

    participant = ensure_participant(session=session, user=user)
    if participant.role == ParticipantRole.OBSERVER:
        raise ScoringNotAllowedError("Observers cannot score samples")
    if session.require_calibration and not participant.is_calibrated:
        raise ScoringNotAllowedError("This session requires calibrated participants")

    score, created = Score.objects.select_for_update().get_or_create(
        session=session,
        sample_id=session_sample.sample_id,
        user=user,
        defaults={'session_sample': session_sample},
    )

    if score.is_submitted:
        raise ScoreAlreadySubmittedError("This score has already been submitted and can no longer be changed")

    for category, value in validated.items():
        setattr(score, category, value)
    if notes is not None:
        score.notes = notes
    if private_notes is not None:
        score.private_notes = private_notes

    if submit:
        values = score.category_values()
        missing = [category for category in SCAA_CATEGORIES if values[category] is None]
        if missing:
            raise IncompleteScoreError(
                missing[0],
                f"All categories must be scored before submitting; missing: {', '.join(missing)}"
            )
        score.is_submitted = True
        score.submitted_at = timezone.now()

    score.save()

    if selections is not None:
        score.flavor_descriptors.all().delete()
        ScoreFlavorDescriptor.objects.bulk_create([
            ScoreFlavorDescriptor(score=score, descriptor=descriptor, intensity=intensity)
            for descriptor, intensity in selections
        ])

    logger.info(
        "Score %s %s by user %s for sample %s in session %s (total %s)",
        score.id,
        'submitted' if submit else ('created' if created else 'updated'),
        user.id,
        session_sample.sample_id,
        session.id,
        score.total_score,
    )

    if submit:
        complete_session_if_fully_scored(session_id=session.id)

    return score
