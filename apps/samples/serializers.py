from rest_framework import serializers
from .models import Sample


class SampleSerializer(serializers.ModelSerializer):
    """Main serializer for coffee samples."""

    created_by_email = serializers.EmailField(source='created_by.email', read_only=True)

    class Meta:
        model = Sample
        fields = [
            'id',
            'name',
            'code',
            'origin',
            'region',
            'farm',
            'producer',
            'variety',
            'altitude',
            'processing_method',
            'roast_level',
            'moisture',
            'density',
            'description',
            'tags',
            'created_by',
            'created_by_email',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']

    def validate_tags(self, value):
        if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
            raise serializers.ValidationError('Tags must be a list of strings.')
        return value


class SampleListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for sample lists."""

    class Meta:
        model = Sample
        fields = [
            'id',
            'name',
            'code',
            'origin',
            'processing_method',
            'roast_level',
            'created_at',
        ]
