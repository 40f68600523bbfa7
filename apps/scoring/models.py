from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid

from . import scaa


def _category_field():
    return models.DecimalField(
        max_digits=4,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('10'))]
    )


class Score(models.Model):
    """One evaluator's SCAA score for one sample in one session."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        'cupping_sessions.CuppingSession',
        on_delete=models.CASCADE,
        related_name='scores'
    )
    session_sample = models.ForeignKey(
        'cupping_sessions.SessionSample',
        on_delete=models.CASCADE,
        related_name='scores'
    )
    sample = models.ForeignKey(
        'samples.Sample',
        on_delete=models.CASCADE,
        related_name='scores'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='cupping_scores'
    )
    aroma = _category_field()
    flavor = _category_field()
    aftertaste = _category_field()
    acidity = _category_field()
    body = _category_field()
    balance = _category_field()
    sweetness = _category_field()
    cleanliness = _category_field()
    uniformity = _category_field()
    overall = _category_field()
    total_score = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0.00'),
        editable=False
    )
    max_score = models.PositiveIntegerField(default=100)
    notes = models.TextField(blank=True)
    private_notes = models.TextField(blank=True)
    is_complete = models.BooleanField(default=False, editable=False)
    is_submitted = models.BooleanField(default=False)
    submitted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'scores'
        unique_together = [['session', 'sample', 'user']]
        indexes = [
            models.Index(fields=['session', 'sample'], name='scores_session_sample_idx'),
            models.Index(fields=['session', 'is_submitted'], name='scores_session_submitted_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user} - {self.sample} ({self.total_score})"

    def category_values(self):
        return {category: getattr(self, category) for category in scaa.SCAA_CATEGORIES}

    def save(self, *args, **kwargs):
        values = self.category_values()
        self.total_score = scaa.calculate_total(values)
        self.is_complete = scaa.is_complete(values)
        if kwargs.get('update_fields') is not None:
            kwargs['update_fields'] = set(kwargs['update_fields']) | {'total_score', 'is_complete'}
        super().save(*args, **kwargs)

    @property
    def grade(self):
        return scaa.classify_grade(self.total_score)


class ScoreFlavorDescriptor(models.Model):
    """A flavor tag selected on a score, with intensity 1-5."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    score = models.ForeignKey(
        Score,
        on_delete=models.CASCADE,
        related_name='flavor_descriptors'
    )
    descriptor = models.ForeignKey(
        'flavors.FlavorDescriptor',
        on_delete=models.CASCADE,
        related_name='score_selections'
    )
    intensity = models.PositiveSmallIntegerField(
        default=3,
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'score_flavor_descriptors'
        unique_together = [['score', 'descriptor']]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.descriptor.name} ({self.intensity})"
