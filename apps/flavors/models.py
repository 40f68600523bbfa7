from django.db import models
from django.db.models import Q
import uuid


class FlavorCategory(models.TextChoices):
    POSITIVE = 'POSITIVE', 'Positive'
    NEGATIVE = 'NEGATIVE', 'Negative'


class FlavorDescriptor(models.Model):
    """
    Catalog entry for a flavor tag.

    Global defaults have no organization; custom entries belong to one.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, db_index=True)
    category = models.CharField(max_length=10, choices=FlavorCategory.choices)
    description = models.TextField(blank=True)
    is_default = models.BooleanField(default=False)
    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='flavor_descriptors'
    )
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_flavor_descriptors'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'flavor_descriptors'
        constraints = [
            models.UniqueConstraint(
                fields=['organization', 'name'],
                name='unique_flavor_name_per_organization',
            ),
            models.UniqueConstraint(
                fields=['name'],
                condition=Q(organization__isnull=True),
                name='unique_global_flavor_name',
            ),
        ]
        ordering = ['-is_default', 'category', 'name']

    def __str__(self):
        return f"{self.name} ({self.category})"
