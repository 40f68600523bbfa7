"""
Management command to seed the default flavor descriptors.

Usage:
    python manage.py seed_flavor_descriptors
"""

from django.core.management.base import BaseCommand
from apps.flavors.services import seed_default_descriptors


class Command(BaseCommand):
    help = 'Create or refresh the global default flavor descriptors'

    def handle(self, *args, **options):
        created, updated = seed_default_descriptors()

        self.stdout.write(
            self.style.SUCCESS(
                f'Seeded flavor descriptors: {created} created, {updated} updated.'
            )
        )
