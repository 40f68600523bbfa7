"""
Immutable value types for scores.

These carry no ORM dependency; the report layer and tests build them
directly, the persistence layer converts model rows into them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import InvalidFlavorSelectionError, InvalidScoreRecordError
from .scaa import (
    SCAA_CATEGORIES,
    validate_category_value,
    calculate_total,
    is_complete,
    classify_grade,
)

FLAVOR_CATEGORIES = ('POSITIVE', 'NEGATIVE')

INTENSITY_LABELS = {
    1: 'Very Light',
    2: 'Light',
    3: 'Medium',
    4: 'Strong',
    5: 'Very Strong',
}

DEFAULT_INTENSITY = 3


def validate_intensity(intensity) -> int:
    if isinstance(intensity, bool) or not isinstance(intensity, int) or intensity not in INTENSITY_LABELS:
        raise InvalidFlavorSelectionError(
            f"Flavor intensity must be an integer from 1 to 5, got {intensity!r}"
        )
    return intensity


@dataclass(frozen=True)
class FlavorSelection:
    """A flavor tag chosen by one evaluator, with its intensity."""

    descriptor_id: Optional[str]
    name: str
    category: str
    intensity: int = DEFAULT_INTENSITY

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidFlavorSelectionError("Flavor descriptor name is required")
        if self.category not in FLAVOR_CATEGORIES:
            raise InvalidFlavorSelectionError(
                f"Flavor category must be POSITIVE or NEGATIVE, got {self.category!r}"
            )
        validate_intensity(self.intensity)
        if self.descriptor_id is not None:
            object.__setattr__(self, 'descriptor_id', str(self.descriptor_id))

    @property
    def key(self) -> str:
        """Identity used for merging: the normalized name, with or without a catalog id."""
        return self.name.strip().casefold()

    @property
    def intensity_label(self) -> str:
        return INTENSITY_LABELS[self.intensity]


@dataclass(frozen=True)
class ScoreRecord:
    """One evaluator's assessment of one sample within one session."""

    score_id: str
    session_id: str
    sample_id: str
    evaluator_id: str
    evaluator_name: str
    categories: Mapping[str, Optional[Decimal]] = field(default_factory=dict)
    notes: str = ''
    private_notes: str = ''
    is_submitted: bool = False
    submitted_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    flavor_selections: tuple = ()

    def __post_init__(self):
        unknown = set(self.categories) - set(SCAA_CATEGORIES)
        if unknown:
            raise InvalidScoreRecordError(f"Unknown score categories: {', '.join(sorted(unknown))}")

        values = {}
        for category in SCAA_CATEGORIES:
            value = self.categories.get(category)
            values[category] = None if value is None else validate_category_value(category, value)
        object.__setattr__(self, 'categories', MappingProxyType(values))

        selections = tuple(self.flavor_selections)
        if not all(isinstance(selection, FlavorSelection) for selection in selections):
            raise InvalidScoreRecordError("flavor_selections must contain FlavorSelection values")
        keys = [selection.key for selection in selections]
        if len(keys) != len(set(keys)):
            raise InvalidFlavorSelectionError("A flavor descriptor can only be selected once per score")
        object.__setattr__(self, 'flavor_selections', selections)

        if self.is_submitted and self.submitted_at is None:
            raise InvalidScoreRecordError("A submitted score needs a submission time")

    @property
    def total(self) -> Decimal:
        return calculate_total(self.categories)

    @property
    def is_complete(self) -> bool:
        return is_complete(self.categories)

    @property
    def grade(self) -> str:
        return classify_grade(self.total)
