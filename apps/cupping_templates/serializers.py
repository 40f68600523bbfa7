from rest_framework import serializers
from .models import CuppingTemplate


class TemplateCategorySerializer(serializers.Serializer):
    """One scoring category inside a template."""

    name = serializers.CharField(max_length=100)
    weight = serializers.FloatField(min_value=0)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class CuppingTemplateSerializer(serializers.ModelSerializer):
    """Serializer for cupping templates."""

    categories = TemplateCategorySerializer(many=True)
    created_by_email = serializers.EmailField(source='created_by.email', read_only=True)

    class Meta:
        model = CuppingTemplate
        fields = [
            'id',
            'name',
            'description',
            'scoring_system',
            'max_score',
            'is_public',
            'is_default',
            'categories',
            'created_by',
            'created_by_email',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'is_default', 'created_by', 'created_at', 'updated_at']

    def validate_categories(self, value):
        if not value:
            raise serializers.ValidationError('A template needs at least one category.')
        names = [category['name'].strip().lower() for category in value]
        if len(names) != len(set(names)):
            raise serializers.ValidationError('Category names must be unique.')
        return value
