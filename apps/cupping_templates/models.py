from django.db import models
from django.core.validators import MinValueValidator
import uuid


class ScoringSystem(models.TextChoices):
    SCA = 'SCA', 'SCA'
    COE = 'COE', 'Cup of Excellence'
    CUSTOM = 'CUSTOM', 'Custom'


class CuppingTemplate(models.Model):
    """Scoring form: named categories with weights."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        related_name='cupping_templates'
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    scoring_system = models.CharField(
        max_length=10,
        choices=ScoringSystem.choices,
        default=ScoringSystem.SCA
    )
    max_score = models.PositiveIntegerField(default=100, validators=[MinValueValidator(1)])
    is_public = models.BooleanField(default=False)
    is_default = models.BooleanField(default=False)
    # [{"name": ..., "weight": ..., "description": ...}, ...]
    categories = models.JSONField(default=list)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_templates'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cupping_templates'
        ordering = ['-is_default', '-created_at']
        indexes = [
            models.Index(fields=['organization', 'is_default'], name='templates_org_default_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.scoring_system})"
