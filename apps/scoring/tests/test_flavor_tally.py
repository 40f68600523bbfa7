"""Tests for flavor tag merging."""

import pytest

from apps.scoring.domain import FlavorSelection, ScoreRecord
from apps.scoring.flavor_tally import tally_flavor_descriptors, split_by_polarity


def _score(evaluator, *selections):
    return ScoreRecord(
        score_id=f'score-{evaluator}',
        session_id='session',
        sample_id='sample',
        evaluator_id=evaluator,
        evaluator_name=evaluator,
        flavor_selections=selections,
    )


def _flavor(name, intensity=3, category='POSITIVE', descriptor_id=None):
    return FlavorSelection(descriptor_id=descriptor_id, name=name, category=category, intensity=intensity)


def test_keeps_max_intensity():
    scores = [
        _score('a', _flavor('Fruity', 3, descriptor_id='d-fruity')),
        _score('b', _flavor('Fruity', 5, descriptor_id='d-fruity')),
    ]

    tally = tally_flavor_descriptors(scores)

    assert len(tally) == 1
    assert tally[0].name == 'Fruity'
    assert tally[0].intensity == 5


def test_lower_intensity_does_not_override():
    scores = [
        _score('a', _flavor('Floral', 4)),
        _score('b', _flavor('Floral', 2)),
    ]

    assert tally_flavor_descriptors(scores)[0].intensity == 4


def test_merges_by_name_without_id():
    scores = [
        _score('a', _flavor('Caramel', 2)),
        _score('b', _flavor('caramel ', 4)),
    ]

    tally = tally_flavor_descriptors(scores)

    assert len(tally) == 1
    assert tally[0].name == 'Caramel'
    assert tally[0].intensity == 4


def test_catalog_and_free_text_tags_merge():
    scores = [
        _score('a', _flavor('Fruity', 2, descriptor_id='d-fruity')),
        _score('b', _flavor('fruity', 4)),
    ]

    tally = tally_flavor_descriptors(scores)

    assert len(tally) == 1
    assert tally[0].key == 'fruity'
    assert tally[0].name == 'Fruity'
    assert tally[0].intensity == 4


def test_keeps_first_seen_order():
    scores = [
        _score('a', _flavor('Nutty'), _flavor('Citrus')),
        _score('b', _flavor('Berry'), _flavor('Nutty', 5)),
    ]

    assert [flavor.name for flavor in tally_flavor_descriptors(scores)] == ['Nutty', 'Citrus', 'Berry']


def test_tally_is_idempotent():
    scores = [
        _score('a', _flavor('Fruity', 3), _flavor('Musty', 2, 'NEGATIVE')),
        _score('b', _flavor('Fruity', 5)),
    ]

    assert tally_flavor_descriptors(scores) == tally_flavor_descriptors(scores)


def test_no_scores():
    assert tally_flavor_descriptors([]) == []


@pytest.mark.parametrize('first,second', [(1, 5), (5, 1), (3, 3)])
def test_order_of_scores_does_not_change_intensity(first, second):
    forward = [_score('a', _flavor('Spicy', first)), _score('b', _flavor('Spicy', second))]

    assert tally_flavor_descriptors(forward)[0].intensity == max(first, second)
    assert tally_flavor_descriptors(reversed(forward))[0].intensity == max(first, second)


def test_split_by_polarity():
    tally = tally_flavor_descriptors([
        _score('a', _flavor('Nutty', 2), _flavor('Musty', 2, 'NEGATIVE'), _flavor('Berry', 4)),
        _score('b', _flavor('Caramel', 4), _flavor('Sour', 5, 'NEGATIVE')),
    ])

    positive, negative = split_by_polarity(tally)

    assert [flavor.name for flavor in positive] == ['Berry', 'Caramel', 'Nutty']
    assert [flavor.name for flavor in negative] == ['Sour', 'Musty']
