from decimal import Decimal

from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from .calculations import SCREEN_SIZE_KEYS
from .models import GreenBeanGrading


class DefectItemSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=100)
    count = serializers.IntegerField(min_value=0)
    category = serializers.ChoiceField(choices=[1, 2])
    description = serializers.CharField(required=False, allow_blank=True)


class GreenBeanGradingSerializer(serializers.ModelSerializer):
    """Grading output, derived values included."""

    sample_name = serializers.CharField(source='sample.name', read_only=True)
    graded_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = GreenBeanGrading
        fields = [
            'id',
            'sample',
            'sample_name',
            'grading_system',
            'primary_defects',
            'secondary_defects',
            'full_defect_equivalents',
            'defect_breakdown',
            'screen_size_distribution',
            'average_screen_size',
            'uniformity_percentage',
            'moisture_content',
            'water_activity',
            'bulk_density',
            'bean_color_assessment',
            'uniformity_score',
            'classification',
            'grade',
            'quality_score',
            'graded_by',
            'graded_at',
            'certified_by',
            'certification_date',
            'notes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class GradingInputSerializer(serializers.ModelSerializer):
    """Create/update input. Model validators bound the measurements."""

    defect_breakdown = DefectItemSerializer(many=True, required=False)
    screen_size_distribution = serializers.DictField(
        child=serializers.IntegerField(min_value=0),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = GreenBeanGrading
        fields = [
            'grading_system',
            'primary_defects',
            'secondary_defects',
            'defect_breakdown',
            'screen_size_distribution',
            'moisture_content',
            'water_activity',
            'bulk_density',
            'bean_color_assessment',
            'uniformity_score',
            'certified_by',
            'certification_date',
            'notes',
        ]
        extra_kwargs = {
            'primary_defects': {'min_value': 0},
            'secondary_defects': {'min_value': 0},
        }

    def validate_screen_size_distribution(self, value):
        if value is None:
            return value
        unknown = sorted(set(value) - set(SCREEN_SIZE_KEYS))
        if unknown:
            raise serializers.ValidationError(
                f"Unknown screen sizes: {', '.join(unknown)}. Use size13 to size20."
            )
        return value

    def validate_defect_breakdown(self, value):
        return [dict(item) for item in value]


class GradePreviewSerializer(serializers.Serializer):
    """Counts and measurements for an unsaved assessment."""

    primary_defects = serializers.IntegerField(min_value=0)
    secondary_defects = serializers.IntegerField(min_value=0)
    moisture_content = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal('0'), max_value=Decimal('100'), required=False
    )
    water_activity = serializers.DecimalField(
        max_digits=4, decimal_places=3, min_value=Decimal('0'), max_value=Decimal('1'), required=False
    )
    bulk_density = serializers.DecimalField(
        max_digits=7, decimal_places=2, min_value=Decimal('0'), required=False
    )
    uniformity_score = serializers.IntegerField(min_value=1, max_value=10, required=False)


class GradeAssessmentSerializer(serializers.Serializer):
    full_defect_equivalents = serializers.DecimalField(max_digits=12, decimal_places=2)
    classification = serializers.CharField()
    grade = serializers.CharField()
    quality_score = serializers.DecimalField(max_digits=5, decimal_places=2)
