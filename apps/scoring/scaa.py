"""
SCAA score aggregation and grading.

Ten categories, each 0-10 in 0.25 steps, summed to a 0-100 total.
"""

from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from .exceptions import InvalidCategoryScoreError

SCAA_CATEGORIES = (
    'aroma',
    'flavor',
    'aftertaste',
    'acidity',
    'body',
    'balance',
    'sweetness',
    'cleanliness',
    'uniformity',
    'overall',
)

CATEGORY_LABELS = {
    'aroma': 'Fragrance/Aroma',
    'flavor': 'Flavor',
    'aftertaste': 'Aftertaste',
    'acidity': 'Acidity',
    'body': 'Body',
    'balance': 'Balance',
    'sweetness': 'Sweetness',
    'cleanliness': 'Clean Cup',
    'uniformity': 'Uniformity',
    'overall': 'Overall',
}

MIN_CATEGORY_SCORE = Decimal('0')
MAX_CATEGORY_SCORE = Decimal('10')
CATEGORY_STEP = Decimal('0.25')
MAX_TOTAL_SCORE = Decimal('100')

# (lower bound inclusive, label), highest first
GRADE_THRESHOLDS = (
    (Decimal('90'), 'Outstanding'),
    (Decimal('85'), 'Excellent'),
    (Decimal('80'), 'Very Good'),
    (Decimal('75'), 'Good'),
    (Decimal('70'), 'Fair'),
)
LOWEST_GRADE = 'Poor'

CATEGORY_RATING_THRESHOLDS = (
    (Decimal('8'), 'Excellent'),
    (Decimal('7'), 'Good'),
    (Decimal('6'), 'Fair'),
)
LOWEST_CATEGORY_RATING = 'Below Average'

_CENTS = Decimal('0.01')


def _as_decimal(value) -> Optional[Decimal]:
    if isinstance(value, bool):
        return None
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not number.is_finite():
        return None
    return number


def validate_category_value(category: str, value) -> Decimal:
    """
    Validate one category value and return it as a Decimal.

    Values outside [0, 10] or not on a 0.25 step are rejected, never
    clamped.

    Raises:
        InvalidCategoryScoreError: naming the failing category
    """
    if category not in SCAA_CATEGORIES:
        raise InvalidCategoryScoreError(category, f"Unknown score category '{category}'")

    number = _as_decimal(value)
    if number is None:
        raise InvalidCategoryScoreError(category, f"{category} must be a number")

    if number < MIN_CATEGORY_SCORE or number > MAX_CATEGORY_SCORE:
        raise InvalidCategoryScoreError(
            category,
            f"{category} must be between {MIN_CATEGORY_SCORE} and {MAX_CATEGORY_SCORE}"
        )

    if number % CATEGORY_STEP != 0:
        raise InvalidCategoryScoreError(
            category,
            f"{category} must be in increments of {CATEGORY_STEP}"
        )

    return number.quantize(_CENTS)


def calculate_total(values: Mapping[str, object]) -> Decimal:
    """
    Sum the category values into the 0-100 total.

    Absent (missing or None) categories count as 0. Present values are
    validated again before summing.
    """
    total = Decimal('0')
    for category, value in values.items():
        if value is None:
            continue
        total += validate_category_value(category, value)
    return total.quantize(_CENTS)


def is_complete(values: Mapping[str, object]) -> bool:
    """True only when all ten categories carry a value."""
    return all(values.get(category) is not None for category in SCAA_CATEGORIES)


def classify_grade(total) -> str:
    """
    Map a total score to its grade label.

    Lower bounds are inclusive: 90 is Outstanding, 89.99 is Excellent.
    """
    number = _as_decimal(total)
    if number is None:
        raise ValueError(f"Total score must be a number, got {total!r}")

    for threshold, label in GRADE_THRESHOLDS:
        if number >= threshold:
            return label
    return LOWEST_GRADE


def classify_category_average(value) -> str:
    """Rating label for an averaged category value in reports."""
    number = _as_decimal(value)
    if number is None:
        raise ValueError(f"Category average must be a number, got {value!r}")

    for threshold, label in CATEGORY_RATING_THRESHOLDS:
        if number >= threshold:
            return label
    return LOWEST_CATEGORY_RATING
