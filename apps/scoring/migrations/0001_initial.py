# Generated manually for the scoring app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


def category_field():
    return models.DecimalField(blank=True, decimal_places=2, max_digits=4, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('10'))])


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('cupping_sessions', '0001_initial'),
        ('flavors', '0001_initial'),
        ('samples', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Score',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('aroma', category_field()),
                ('flavor', category_field()),
                ('aftertaste', category_field()),
                ('acidity', category_field()),
                ('body', category_field()),
                ('balance', category_field()),
                ('sweetness', category_field()),
                ('cleanliness', category_field()),
                ('uniformity', category_field()),
                ('overall', category_field()),
                ('total_score', models.DecimalField(decimal_places=2, default=Decimal('0.00'), editable=False, max_digits=5)),
                ('max_score', models.PositiveIntegerField(default=100)),
                ('notes', models.TextField(blank=True)),
                ('private_notes', models.TextField(blank=True)),
                ('is_complete', models.BooleanField(default=False, editable=False)),
                ('is_submitted', models.BooleanField(default=False)),
                ('submitted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('sample', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='samples.sample')),
                ('session', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='cupping_sessions.cuppingsession')),
                ('session_sample', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='cupping_sessions.sessionsample')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='cupping_scores', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'scores',
                'ordering': ['created_at'],
                'unique_together': {('session', 'sample', 'user')},
            },
        ),
        migrations.CreateModel(
            name='ScoreFlavorDescriptor',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('intensity', models.PositiveSmallIntegerField(default=3, validators=[MinValueValidator(1), MaxValueValidator(5)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('descriptor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='score_selections', to='flavors.flavordescriptor')),
                ('score', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='flavor_descriptors', to='scoring.score')),
            ],
            options={
                'db_table': 'score_flavor_descriptors',
                'ordering': ['created_at'],
                'unique_together': {('score', 'descriptor')},
            },
        ),
        migrations.AddIndex(
            model_name='score',
            index=models.Index(fields=['session', 'sample'], name='scores_session_sample_idx'),
        ),
        migrations.AddIndex(
            model_name='score',
            index=models.Index(fields=['session', 'is_submitted'], name='scores_session_submitted_idx'),
        ),
    ]
