"""Merging evaluators' flavor selections for one sample."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class TalliedFlavor:
    key: str
    name: str
    category: str
    intensity: int


def tally_flavor_descriptors(scores: Iterable) -> list[TalliedFlavor]:
    """
    Deduplicate flavor tags across scores, keeping the highest intensity.

    Tags merge by normalized name, so a catalog selection and a free-text
    tag of the same name count once. Output keeps first-seen order, so
    tallying the same scores twice gives the same list.

    Args:
        scores: ScoreRecord-like objects exposing `flavor_selections`
    """
    tally = {}

    for score in scores:
        for selection in score.flavor_selections:
            current = tally.get(selection.key)
            if current is None:
                tally[selection.key] = TalliedFlavor(
                    key=selection.key,
                    name=selection.name,
                    category=selection.category,
                    intensity=selection.intensity,
                )
            elif selection.intensity > current.intensity:
                tally[selection.key] = TalliedFlavor(
                    key=current.key,
                    name=current.name,
                    category=current.category,
                    intensity=selection.intensity,
                )

    return list(tally.values())


def split_by_polarity(tally: Iterable[TalliedFlavor]) -> tuple[list[TalliedFlavor], list[TalliedFlavor]]:
    """Positive and negative tags, each strongest first, then by name."""
    def order(flavor):
        return (-flavor.intensity, flavor.name.casefold())

    flavors = list(tally)
    positive = sorted((f for f in flavors if f.category == 'POSITIVE'), key=order)
    negative = sorted((f for f in flavors if f.category == 'NEGATIVE'), key=order)
    return positive, negative
