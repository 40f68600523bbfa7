from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid

from . import calculations


class GradingSystem(models.TextChoices):
    SCA = 'SCA', 'SCA'


class GradeClassification(models.TextChoices):
    SPECIALTY_GRADE = calculations.SPECIALTY_GRADE, 'Specialty Grade'
    PREMIUM_GRADE = calculations.PREMIUM_GRADE, 'Premium Grade'
    EXCHANGE_GRADE = calculations.EXCHANGE_GRADE, 'Exchange Grade'
    BELOW_STANDARD = calculations.BELOW_STANDARD, 'Below Standard'


class GreenBeanGrading(models.Model):
    """
    Physical grading of a green coffee sample.

    Defect equivalents, class, grade label, quality score and screen size
    metrics are derived on save.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sample = models.OneToOneField(
        'samples.Sample',
        on_delete=models.CASCADE,
        related_name='grading'
    )
    grading_system = models.CharField(
        max_length=10,
        choices=GradingSystem.choices,
        default=GradingSystem.SCA
    )

    # Defects
    primary_defects = models.PositiveIntegerField(default=0)
    secondary_defects = models.PositiveIntegerField(default=0)
    # [{"type": ..., "count": ..., "category": 1|2, "description": ...}, ...]
    defect_breakdown = models.JSONField(default=list, blank=True)
    full_defect_equivalents = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        editable=False
    )

    # Screen size
    # {"size13": count, ..., "size20": count}
    screen_size_distribution = models.JSONField(null=True, blank=True)
    average_screen_size = models.DecimalField(
        max_digits=4,
        decimal_places=2,
        null=True,
        blank=True,
        editable=False
    )
    uniformity_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        editable=False
    )

    # Physical measurements
    moisture_content = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
        help_text='Moisture content in percent'
    )
    water_activity = models.DecimalField(
        max_digits=4,
        decimal_places=3,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('1'))]
    )
    bulk_density = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
        help_text='Grams per litre'
    )
    bean_color_assessment = models.CharField(max_length=100, blank=True)
    uniformity_score = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(10)]
    )

    # Result
    classification = models.CharField(
        max_length=20,
        choices=GradeClassification.choices,
        editable=False
    )
    grade = models.CharField(max_length=20, editable=False)
    quality_score = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0.00'),
        editable=False
    )

    # Sign-off
    graded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='green_bean_gradings'
    )
    graded_at = models.DateTimeField(null=True, blank=True)
    certified_by = models.CharField(max_length=200, blank=True)
    certification_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'green_bean_gradings'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['classification'], name='gradings_class_idx'),
        ]

    def __str__(self):
        return f"{self.sample} - {self.grade} ({self.full_defect_equivalents} defects)"

    def refresh_assessment(self):
        assessment = calculations.assess_grade(
            primary_defects=self.primary_defects,
            secondary_defects=self.secondary_defects,
            moisture_content=self.moisture_content,
            water_activity=self.water_activity,
            bulk_density=self.bulk_density,
            uniformity_score=self.uniformity_score,
        )
        self.full_defect_equivalents = assessment.full_defect_equivalents
        self.classification = assessment.classification
        self.grade = assessment.grade
        self.quality_score = assessment.quality_score

        distribution = self.screen_size_distribution or {}
        self.average_screen_size = calculations.calculate_average_screen_size(distribution)
        self.uniformity_percentage = calculations.calculate_uniformity_percentage(distribution)

    def save(self, *args, **kwargs):
        self.refresh_assessment()
        if kwargs.get('update_fields') is not None:
            kwargs['update_fields'] = set(kwargs['update_fields']) | {
                'full_defect_equivalents',
                'classification',
                'grade',
                'quality_score',
                'average_screen_size',
                'uniformity_percentage',
            }
        super().save(*args, **kwargs)
