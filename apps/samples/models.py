from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class ProcessingMethod(models.TextChoices):
    WASHED = 'WASHED', 'Washed'
    NATURAL = 'NATURAL', 'Natural'
    HONEY = 'HONEY', 'Honey'
    SEMI_WASHED = 'SEMI_WASHED', 'Semi-Washed'
    WET_HULLED = 'WET_HULLED', 'Wet-Hulled'
    ANAEROBIC = 'ANAEROBIC', 'Anaerobic'
    CARBONIC_MACERATION = 'CARBONIC_MACERATION', 'Carbonic Maceration'
    OTHER = 'OTHER', 'Other'


class RoastLevel(models.TextChoices):
    LIGHT = 'LIGHT', 'Light'
    MEDIUM_LIGHT = 'MEDIUM_LIGHT', 'Medium-Light'
    MEDIUM = 'MEDIUM', 'Medium'
    MEDIUM_DARK = 'MEDIUM_DARK', 'Medium-Dark'
    DARK = 'DARK', 'Dark'
    FRENCH = 'FRENCH', 'French'
    ITALIAN = 'ITALIAN', 'Italian'


class Sample(models.Model):
    """A coffee sample owned by one organization."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        related_name='samples'
    )
    name = models.CharField(max_length=200, db_index=True)
    code = models.CharField(max_length=50, blank=True)
    origin = models.CharField(max_length=100, db_index=True)
    region = models.CharField(max_length=200, blank=True)
    farm = models.CharField(max_length=200, blank=True)
    producer = models.CharField(max_length=200, blank=True)
    variety = models.CharField(max_length=200, blank=True)
    altitude = models.PositiveIntegerField(
        null=True,
        blank=True,
        validators=[MaxValueValidator(10000)],
        help_text='Metres above sea level'
    )
    processing_method = models.CharField(
        max_length=30,
        choices=ProcessingMethod.choices,
        blank=True
    )
    roast_level = models.CharField(
        max_length=20,
        choices=RoastLevel.choices,
        blank=True
    )
    moisture = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
        help_text='Moisture content in percent'
    )
    density = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    description = models.TextField(blank=True)
    tags = models.JSONField(default=list, blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_samples'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'samples'
        indexes = [
            models.Index(fields=['organization', 'name'], name='samples_org_name_idx'),
            models.Index(fields=['organization', 'origin'], name='samples_org_origin_idx'),
            models.Index(fields=['created_at'], name='samples_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        if self.code:
            return f"{self.code} - {self.name}"
        return self.name
