# Generated manually for the grading app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('samples', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='GreenBeanGrading',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('grading_system', models.CharField(choices=[('SCA', 'SCA')], default='SCA', max_length=10)),
                ('primary_defects', models.PositiveIntegerField(default=0)),
                ('secondary_defects', models.PositiveIntegerField(default=0)),
                ('defect_breakdown', models.JSONField(blank=True, default=list)),
                ('full_defect_equivalents', models.DecimalField(decimal_places=2, default=Decimal('0.00'), editable=False, max_digits=12)),
                ('screen_size_distribution', models.JSONField(blank=True, null=True)),
                ('average_screen_size', models.DecimalField(blank=True, decimal_places=2, editable=False, max_digits=4, null=True)),
                ('uniformity_percentage', models.DecimalField(blank=True, decimal_places=2, editable=False, max_digits=5, null=True)),
                ('moisture_content', models.DecimalField(blank=True, decimal_places=2, help_text='Moisture content in percent', max_digits=5, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))])),
                ('water_activity', models.DecimalField(blank=True, decimal_places=3, max_digits=4, null=True, validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('1'))])),
                ('bulk_density', models.DecimalField(blank=True, decimal_places=2, help_text='Grams per litre', max_digits=7, null=True, validators=[MinValueValidator(Decimal('0'))])),
                ('bean_color_assessment', models.CharField(blank=True, max_length=100)),
                ('uniformity_score', models.PositiveSmallIntegerField(blank=True, null=True, validators=[MinValueValidator(1), MaxValueValidator(10)])),
                ('classification', models.CharField(choices=[('SPECIALTY_GRADE', 'Specialty Grade'), ('PREMIUM_GRADE', 'Premium Grade'), ('EXCHANGE_GRADE', 'Exchange Grade'), ('BELOW_STANDARD', 'Below Standard')], editable=False, max_length=20)),
                ('grade', models.CharField(editable=False, max_length=20)),
                ('quality_score', models.DecimalField(decimal_places=2, default=Decimal('0.00'), editable=False, max_digits=5)),
                ('graded_at', models.DateTimeField(blank=True, null=True)),
                ('certified_by', models.CharField(blank=True, max_length=200)),
                ('certification_date', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('graded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='green_bean_gradings', to=settings.AUTH_USER_MODEL)),
                ('sample', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='grading', to='samples.sample')),
            ],
            options={
                'db_table': 'green_bean_gradings',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='greenbeangrading',
            index=models.Index(fields=['classification'], name='gradings_class_idx'),
        ),
    ]
