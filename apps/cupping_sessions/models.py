from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class SessionStatus(models.TextChoices):
    DRAFT = 'DRAFT', 'Draft'
    SCHEDULED = 'SCHEDULED', 'Scheduled'
    ACTIVE = 'ACTIVE', 'Active'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'
    ARCHIVED = 'ARCHIVED', 'Archived'


class ParticipantRole(models.TextChoices):
    HEAD_JUDGE = 'HEAD_JUDGE', 'Head Judge'
    JUDGE = 'JUDGE', 'Judge'
    OBSERVER = 'OBSERVER', 'Observer'


class CuppingSession(models.Model):
    """
    A cupping session: a table of samples evaluated by participants.

    Status changes go through services.lifecycle.transition_session.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        'accounts.Organization',
        on_delete=models.CASCADE,
        related_name='cupping_sessions'
    )
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_sessions'
    )
    template = models.ForeignKey(
        'cupping_templates.CuppingTemplate',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sessions'
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=200, blank=True)
    status = models.CharField(
        max_length=20,
        choices=SessionStatus.choices,
        default=SessionStatus.DRAFT,
        db_index=True
    )
    blind_tasting = models.BooleanField(default=False)
    allow_comments = models.BooleanField(default=True)
    require_calibration = models.BooleanField(default=False)
    scheduled_at = models.DateTimeField(null=True, blank=True)
    started_at = models.DateTimeField(null=True, blank=True)
    completed_at = models.DateTimeField(null=True, blank=True)
    tags = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'cupping_sessions'
        indexes = [
            models.Index(fields=['organization', 'status'], name='sessions_org_status_idx'),
            models.Index(fields=['created_at'], name='sessions_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.status})"


class SessionSample(models.Model):
    """A sample placed on a session's table."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        CuppingSession,
        on_delete=models.CASCADE,
        related_name='session_samples'
    )
    sample = models.ForeignKey(
        'samples.Sample',
        on_delete=models.RESTRICT,
        related_name='session_samples'
    )
    position = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_blind = models.BooleanField(default=False)
    blind_code = models.CharField(max_length=20, blank=True)
    grind_size = models.CharField(max_length=50, blank=True)
    water_temp = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))],
        help_text='Water temperature in degrees Celsius'
    )
    brew_ratio = models.CharField(max_length=20, blank=True)
    steep_time = models.PositiveIntegerField(null=True, blank=True, help_text='Seconds')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'session_samples'
        unique_together = [['session', 'sample']]
        ordering = ['position']

    def __str__(self):
        return f"{self.session.name} #{self.position}: {self.display_name}"

    @property
    def display_name(self):
        if self.blind_code:
            return self.blind_code
        return self.sample.name


class SessionParticipant(models.Model):
    """A member taking part in a session."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        CuppingSession,
        on_delete=models.CASCADE,
        related_name='participants'
    )
    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='session_participations'
    )
    role = models.CharField(
        max_length=20,
        choices=ParticipantRole.choices,
        default=ParticipantRole.JUDGE
    )
    is_calibrated = models.BooleanField(default=False)
    calibrated_at = models.DateTimeField(null=True, blank=True)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'session_participants'
        unique_together = [['session', 'user']]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.email} in {self.session.name} ({self.role})"
