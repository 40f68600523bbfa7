"""Default flavor descriptors shared by every organization."""

import logging

from django.db import transaction

from ..models import FlavorDescriptor, FlavorCategory

logger = logging.getLogger(__name__)

POSITIVE_DESCRIPTORS = [
    ('Fruity', 'Fruit-like flavors and aromas'),
    ('Floral', 'Flower-like aromas and delicate flavors'),
    ('Sweet', 'Natural sweetness and sugar-like characteristics'),
    ('Nutty', 'Nut-like flavors such as almond, hazelnut, or walnut'),
    ('Chocolate', 'Cocoa and chocolate-like flavors'),
    ('Caramel', 'Caramelized sugar and toffee-like sweetness'),
    ('Citrus', 'Bright, acidic citrus fruit characteristics'),
    ('Berry', 'Berry fruit flavors like blueberry, raspberry, or blackberry'),
    ('Stone Fruit', 'Peach, apricot, plum-like flavors'),
    ('Tropical', 'Tropical fruit flavors like mango, pineapple, or papaya'),
    ('Vanilla', 'Vanilla bean and sweet spice characteristics'),
    ('Honey', 'Honey-like sweetness and floral notes'),
    ('Wine-like', 'Fermented fruit and wine-like complexity'),
    ('Spicy', 'Pleasant spice notes like cinnamon, clove, or cardamom'),
    ('Herbal', 'Pleasant herb-like characteristics'),
    ('Tea-like', 'Black tea or green tea characteristics'),
    ('Buttery', 'Rich, creamy, butter-like mouthfeel'),
    ('Bright', 'Lively, vibrant acidity and flavor'),
    ('Clean', 'Pure, clear flavors without off-notes'),
    ('Complex', 'Multiple layered flavors and aromas'),
]

NEGATIVE_DESCRIPTORS = [
    ('Bitter', 'Unpleasant bitter taste, often from over-extraction'),
    ('Sour', 'Unpleasantly acidic or vinegar-like'),
    ('Astringent', 'Dry, puckering sensation in the mouth'),
    ('Musty', 'Moldy, damp, or stale aromas and flavors'),
    ('Earthy', 'Unpleasant soil-like or dirt flavors'),
    ('Metallic', 'Metallic or mineral-like off-flavors'),
    ('Woody', 'Unpleasant wood or paper-like flavors'),
    ('Smoky', 'Excessive smoke or burnt characteristics'),
    ('Rubber', 'Rubber or petroleum-like off-flavors'),
    ('Chemical', 'Chemical or medicinal off-flavors'),
    ('Rancid', 'Spoiled or rancid oil-like flavors'),
    ('Fermented', 'Unpleasant fermentation or alcohol-like flavors'),
    ('Flat', 'Lack of acidity or brightness'),
    ('Harsh', 'Rough, aggressive, or unpleasant mouthfeel'),
    ('Thin', 'Weak body or watery consistency'),
    ('Muddy', 'Unclear or muddled flavors'),
    ('Stale', 'Old, flat, or past-prime characteristics'),
    ('Cardboard', 'Papery or cardboard-like off-flavors'),
    ('Phenolic', 'Medicinal or band-aid-like flavors'),
    ('Dirty', 'Unclean or contaminated flavors'),
]

DEFAULT_FLAVOR_DESCRIPTORS = (
    [(name, FlavorCategory.POSITIVE, description) for name, description in POSITIVE_DESCRIPTORS]
    + [(name, FlavorCategory.NEGATIVE, description) for name, description in NEGATIVE_DESCRIPTORS]
)


@transaction.atomic
def seed_default_descriptors() -> tuple[int, int]:
    """
    Create or refresh the global default descriptors.

    Safe to run repeatedly.

    Returns:
        Tuple (created_count, updated_count)
    """
    created_count = 0
    updated_count = 0

    for name, category, description in DEFAULT_FLAVOR_DESCRIPTORS:
        _, created = FlavorDescriptor.objects.update_or_create(
            name=name,
            organization=None,
            defaults={
                'category': category,
                'description': description,
                'is_default': True,
            },
        )
        if created:
            created_count += 1
        else:
            updated_count += 1

    logger.info(
        "Seeded default flavor descriptors: %d created, %d updated",
        created_count, updated_count,
    )
    return created_count, updated_count
