# Generated manually for the samples app

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
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Sample',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=200)),
                ('code', models.CharField(blank=True, max_length=50)),
                ('origin', models.CharField(db_index=True, max_length=100)),
                ('region', models.CharField(blank=True, max_length=200)),
                ('farm', models.CharField(blank=True, max_length=200)),
                ('producer', models.CharField(blank=True, max_length=200)),
                ('variety', models.CharField(blank=True, max_length=200)),
                ('altitude', models.PositiveIntegerField(blank=True, help_text='Metres above sea level', null=True, validators=[MaxValueValidator(10000)])),
                ('processing_method', models.CharField(blank=True, choices=[('WASHED', 'Washed'), ('NATURAL', 'Natural'), ('HONEY', 'Honey'), ('SEMI_WASHED', 'Semi-Washed'), ('WET_HULLED', 'Wet-Hulled'), ('ANAEROBIC', 'Anaerobic'), ('CARBONIC_MACERATION', 'Carbonic Maceration'), ('OTHER', 'Other')], max_length=30)),
                ('roast_level', models.CharField(blank=True, choices=[('LIGHT', 'Light'), ('MEDIUM_LIGHT', 'Medium-Light'), ('MEDIUM', 'Medium'), ('MEDIUM_DARK', 'Medium-Dark'), ('DARK', 'Dark'), ('FRENCH', 'French'), ('ITALIAN', 'Italian')], max_length=20)),
                ('moisture', models.DecimalField(blank=True, decimal_places=2, help_text='Moisture content in percent', max_digits=5, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('density', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True, validators=[MinValueValidator(Decimal('0'))])),
                ('description', models.TextField(blank=True)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_samples', to=settings.AUTH_USER_MODEL)),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='samples', to='accounts.organization')),
            ],
            options={
                'db_table': 'samples',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='sample',
            index=models.Index(fields=['organization', 'name'], name='samples_org_name_idx'),
        ),
        migrations.AddIndex(
            model_name='sample',
            index=models.Index(fields=['organization', 'origin'], name='samples_org_origin_idx'),
        ),
        migrations.AddIndex(
            model_name='sample',
            index=models.Index(fields=['created_at'], name='samples_created_idx'),
        ),
    ]
