"""
Green coffee grading by defect count.

One primary defect counts as one full defect, five secondary defects count
as one. The full-defect count decides the grade class; moisture, water
activity, bulk density and visual uniformity adjust a 0-100 quality score.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional

SECONDARY_DEFECTS_PER_FULL_DEFECT = 5

SPECIALTY_GRADE = 'SPECIALTY_GRADE'
PREMIUM_GRADE = 'PREMIUM_GRADE'
EXCHANGE_GRADE = 'EXCHANGE_GRADE'
BELOW_STANDARD = 'BELOW_STANDARD'

# (upper bound inclusive, classification), lowest first
CLASSIFICATION_THRESHOLDS = (
    (Decimal('5'), SPECIALTY_GRADE),
    (Decimal('8'), PREMIUM_GRADE),
    (Decimal('23'), EXCHANGE_GRADE),
)

GRADE_LABELS = {
    SPECIALTY_GRADE: 'Grade 1',
    PREMIUM_GRADE: 'Grade 2',
    EXCHANGE_GRADE: 'Grade 3',
    BELOW_STANDARD: 'Below Standard',
}
UNGRADED_LABEL = 'Ungraded'

SCREEN_SIZES = tuple(range(13, 21))

MAX_DEFECT_DEDUCTION = Decimal('40')
IDEAL_MOISTURE = Decimal('11')
MAX_MOISTURE_DEDUCTION = Decimal('10')
IDEAL_WATER_ACTIVITY = Decimal('0.60')
MAX_WATER_ACTIVITY_DEDUCTION = Decimal('10')
IDEAL_BULK_DENSITY = Decimal('700')
BULK_DENSITY_TOLERANCE = Decimal('50')
MAX_DENSITY_BONUS = Decimal('10')

_CENTS = Decimal('0.01')


def screen_size_key(size: int) -> str:
    return f'size{size}'


SCREEN_SIZE_KEYS = tuple(screen_size_key(size) for size in SCREEN_SIZES)


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def calculate_full_defect_equivalents(primary_defects: int, secondary_defects: int) -> Decimal:
    """Primary defects plus secondary defects divided by five."""
    full = Decimal(primary_defects) + Decimal(secondary_defects) / SECONDARY_DEFECTS_PER_FULL_DEFECT
    return full.quantize(_CENTS, rounding=ROUND_HALF_UP)


def determine_grade_classification(full_defects) -> str:
    full_defects = _decimal(full_defects)
    for upper_bound, classification in CLASSIFICATION_THRESHOLDS:
        if full_defects <= upper_bound:
            return classification
    return BELOW_STANDARD


def determine_grade_label(classification: str) -> str:
    return GRADE_LABELS.get(classification, UNGRADED_LABEL)


def calculate_quality_score(
    *,
    full_defect_equivalents,
    moisture_content=None,
    water_activity=None,
    bulk_density=None,
    uniformity_score=None,
) -> Decimal:
    """
    Quality score from 0 to 100.

    Starts at 100 and:
    - loses one point per full defect, at most 40;
    - loses two points per percent of moisture away from 11 %, at most 10;
    - loses one point per 0.01 of water activity away from 0.60, at most 10;
    - gains up to 10 points for bulk density near 700 g/L, nothing beyond
      50 g/L away;
    - gains the visual uniformity score (1-10).

    Measurements left out neither add nor deduct.
    """
    score = Decimal('100')
    score -= min(_decimal(full_defect_equivalents), MAX_DEFECT_DEDUCTION)

    if moisture_content is not None:
        difference = abs(_decimal(moisture_content) - IDEAL_MOISTURE)
        score -= min(difference * 2, MAX_MOISTURE_DEDUCTION)

    if water_activity is not None:
        difference = abs(_decimal(water_activity) - IDEAL_WATER_ACTIVITY)
        score -= min(difference * 100, MAX_WATER_ACTIVITY_DEDUCTION)

    if bulk_density is not None:
        difference = abs(_decimal(bulk_density) - IDEAL_BULK_DENSITY)
        score += max(Decimal('0'), MAX_DENSITY_BONUS - difference / BULK_DENSITY_TOLERANCE * 10)

    if uniformity_score is not None:
        score += _decimal(uniformity_score)

    score = max(Decimal('0'), min(Decimal('100'), score))
    return score.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _screen_counts(distribution: Mapping[str, int]) -> list[tuple[int, int]]:
    return [(size, int(distribution.get(screen_size_key(size)) or 0)) for size in SCREEN_SIZES]


def calculate_average_screen_size(distribution: Mapping[str, int]) -> Optional[Decimal]:
    """Bean-weighted mean screen size, or None when no beans were counted."""
    counts = _screen_counts(distribution)
    total_beans = sum(count for _, count in counts)
    if total_beans == 0:
        return None

    weighted = sum(size * count for size, count in counts)
    return (Decimal(weighted) / total_beans).quantize(_CENTS, rounding=ROUND_HALF_UP)


def calculate_uniformity_percentage(distribution: Mapping[str, int]) -> Optional[Decimal]:
    """Share of beans in the most common screen size, or None when no beans were counted."""
    counts = [count for _, count in _screen_counts(distribution)]
    total_beans = sum(counts)
    if total_beans == 0:
        return None

    return (Decimal(max(counts)) * 100 / total_beans).quantize(_CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class GradeAssessment:
    full_defect_equivalents: Decimal
    classification: str
    grade: str
    quality_score: Decimal


def assess_grade(
    *,
    primary_defects: int = 0,
    secondary_defects: int = 0,
    moisture_content=None,
    water_activity=None,
    bulk_density=None,
    uniformity_score=None,
) -> GradeAssessment:
    """Defect equivalents, class, label and quality score in one pass."""
    full_defects = calculate_full_defect_equivalents(primary_defects, secondary_defects)
    classification = determine_grade_classification(full_defects)
    return GradeAssessment(
        full_defect_equivalents=full_defects,
        classification=classification,
        grade=determine_grade_label(classification),
        quality_score=calculate_quality_score(
            full_defect_equivalents=full_defects,
            moisture_content=moisture_content,
            water_activity=water_activity,
            bulk_density=bulk_density,
            uniformity_score=uniformity_score,
        ),
    )
