# Generated manually for the cupping_sessions app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
        ('cupping_templates', '0001_initial'),
        ('samples', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CuppingSession',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('location', models.CharField(blank=True, max_length=200)),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('SCHEDULED', 'Scheduled'), ('ACTIVE', 'Active'), ('COMPLETED', 'Completed'), ('CANCELLED', 'Cancelled'), ('ARCHIVED', 'Archived')], db_index=True, default='DRAFT', max_length=20)),
                ('blind_tasting', models.BooleanField(default=False)),
                ('allow_comments', models.BooleanField(default=True)),
                ('require_calibration', models.BooleanField(default=False)),
                ('scheduled_at', models.DateTimeField(blank=True, null=True)),
                ('started_at', models.DateTimeField(blank=True, null=True)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_sessions', to=settings.AUTH_USER_MODEL)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cupping_sessions', to='accounts.organization')),
                ('template', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sessions', to='cupping_templates.cuppingtemplate')),
            ],
            options={
                'db_table': 'cupping_sessions',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='SessionSample',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('position', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('is_blind', models.BooleanField(default=False)),
                ('blind_code', models.CharField(blank=True, max_length=20)),
                ('grind_size', models.CharField(blank=True, max_length=50)),
                ('water_temp', models.DecimalField(blank=True, decimal_places=2, help_text='Water temperature in degrees Celsius', max_digits=5, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('brew_ratio', models.CharField(blank=True, max_length=20)),
                ('steep_time', models.PositiveIntegerField(blank=True, help_text='Seconds', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('sample', models.ForeignKey(on_delete=django.db.models.deletion.RESTRICT, related_name='session_samples', to='samples.sample')),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='session_samples', to='cupping_sessions.cuppingsession')),
            ],
            options={
                'db_table': 'session_samples',
                'ordering': ['position'],
                'unique_together': {('session', 'sample')},
            },
        ),
        migrations.CreateModel(
            name='SessionParticipant',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('role', models.CharField(choices=[('HEAD_JUDGE', 'Head Judge'), ('JUDGE', 'Judge'), ('OBSERVER', 'Observer')], default='JUDGE', max_length=20)),
                ('is_calibrated', models.BooleanField(default=False)),
                ('calibrated_at', models.DateTimeField(blank=True, null=True)),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='participants', to='cupping_sessions.cuppingsession')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='session_participations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'session_participants',
                'ordering': ['joined_at'],
                'unique_together': {('session', 'user')},
            },
        ),
        migrations.AddIndex(
            model_name='cuppingsession',
            index=models.Index(fields=['organization', 'status'], name='sessions_org_status_idx'),
        ),
        migrations.AddIndex(
            model_name='cuppingsession',
            index=models.Index(fields=['created_at'], name='sessions_created_idx'),
        ),
    ]
