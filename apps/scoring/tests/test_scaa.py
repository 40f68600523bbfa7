"""Tests for SCAA aggregation and grading."""

import random
from decimal import Decimal

import pytest

from apps.scoring.exceptions import InvalidCategoryScoreError
from apps.scoring.scaa import (
    SCAA_CATEGORIES,
    GRADE_THRESHOLDS,
    LOWEST_GRADE,
    validate_category_value,
    calculate_total,
    is_complete,
    classify_grade,
    classify_category_average,
)

GRADE_ORDER = [LOWEST_GRADE] + [label for _, label in reversed(GRADE_THRESHOLDS)]

WORKED_EXAMPLE = {
    'aroma': 7.5,
    'flavor': 8.0,
    'aftertaste': 7.75,
    'acidity': 8.25,
    'body': 7.5,
    'balance': 8.0,
    'sweetness': 8.5,
    'cleanliness': 9.0,
    'uniformity': 9.0,
    'overall': 8.0,
}


def _random_scores(rng):
    return {category: Decimal(rng.randint(0, 40)) / 4 for category in SCAA_CATEGORIES}


class TestValidateCategoryValue:

    @pytest.mark.parametrize('value,expected', [
        (0, Decimal('0.00')),
        (10, Decimal('10.00')),
        (7.75, Decimal('7.75')),
        ('8.25', Decimal('8.25')),
        (Decimal('9.5'), Decimal('9.50')),
    ])
    def test_accepts_steps(self, value, expected):
        assert validate_category_value('aroma', value) == expected

    @pytest.mark.parametrize('value', [-0.25, 10.25, 11, 100])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(InvalidCategoryScoreError) as exc_info:
            validate_category_value('acidity', value)

        assert exc_info.value.field == 'acidity'

    @pytest.mark.parametrize('value', [7.1, 8.3, '9.33'])
    def test_rejects_off_step(self, value):
        with pytest.raises(InvalidCategoryScoreError, match='increments'):
            validate_category_value('body', value)

    @pytest.mark.parametrize('value', ['abc', None, True, float('nan'), float('inf')])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidCategoryScoreError):
            validate_category_value('flavor', value)

    def test_rejects_unknown_category(self):
        with pytest.raises(InvalidCategoryScoreError) as exc_info:
            validate_category_value('crema', 8)

        assert exc_info.value.field == 'crema'

    def test_never_clamps(self):
        with pytest.raises(InvalidCategoryScoreError):
            validate_category_value('overall', 10.5)


class TestCalculateTotal:

    def test_worked_example(self):
        total = calculate_total(WORKED_EXAMPLE)

        assert total == Decimal('81.50')
        assert classify_grade(total) == 'Very Good'

    def test_total_is_sum_within_bounds(self):
        rng = random.Random(20240501)
        for _ in range(500):
            values = _random_scores(rng)
            total = calculate_total(values)

            assert total == sum(values.values())
            assert Decimal('0') <= total <= Decimal('100')

    def test_perfect_and_zero(self):
        assert calculate_total({c: 10 for c in SCAA_CATEGORIES}) == Decimal('100.00')
        assert calculate_total({c: 0 for c in SCAA_CATEGORIES}) == Decimal('0.00')

    def test_absent_counts_as_zero(self):
        partial = {'aroma': 8, 'flavor': 7.5, 'body': None}

        assert calculate_total(partial) == Decimal('15.50')
        assert not is_complete(partial)

    def test_revalidates_values(self):
        with pytest.raises(InvalidCategoryScoreError):
            calculate_total({'aroma': 8, 'flavor': 12})


class TestIsComplete:

    def test_complete_needs_all_ten(self):
        assert is_complete(WORKED_EXAMPLE)
        assert not is_complete({k: v for k, v in WORKED_EXAMPLE.items() if k != 'overall'})

    def test_zero_counts_as_present(self):
        assert is_complete({c: 0 for c in SCAA_CATEGORIES})


class TestClassifyGrade:

    @pytest.mark.parametrize('total,grade', [
        (100, 'Outstanding'),
        (90, 'Outstanding'),
        (90.0, 'Outstanding'),
        (89.99, 'Excellent'),
        (85, 'Excellent'),
        (84.99, 'Very Good'),
        (80, 'Very Good'),
        (79.75, 'Good'),
        (75, 'Good'),
        (74.99, 'Fair'),
        (70, 'Fair'),
        (69.99, 'Poor'),
        (0, 'Poor'),
    ])
    def test_boundaries(self, total, grade):
        assert classify_grade(total) == grade

    def test_monotonic(self):
        totals = [Decimal(step) / 4 for step in range(0, 401)]
        ranks = [GRADE_ORDER.index(classify_grade(total)) for total in totals]

        assert ranks == sorted(ranks)

    def test_deterministic(self):
        assert {classify_grade(Decimal('81.5')) for _ in range(10)} == {'Very Good'}

    def test_rejects_non_number(self):
        with pytest.raises(ValueError):
            classify_grade('n/a')


@pytest.mark.parametrize('average,label', [
    (9.25, 'Excellent'),
    (8, 'Excellent'),
    (7.99, 'Good'),
    (7, 'Good'),
    (6.5, 'Fair'),
    (5.75, 'Below Average'),
])
def test_classify_category_average(average, label):
    assert classify_category_average(average) == label
