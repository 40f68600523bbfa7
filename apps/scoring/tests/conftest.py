import pytest

from apps.scoring.scaa import SCAA_CATEGORIES


@pytest.fixture
def full_categories():
    """Every category scored 8.25 (total 82.5)."""
    return {category: '8.25' for category in SCAA_CATEGORIES}
