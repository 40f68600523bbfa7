from rest_framework import serializers
from .models import FlavorDescriptor


class FlavorDescriptorSerializer(serializers.ModelSerializer):
    """Serializer for flavor descriptors."""

    # uniqueness per organization is checked by the service layer
    name = serializers.CharField(max_length=100)

    class Meta:
        model = FlavorDescriptor
        fields = [
            'id',
            'name',
            'category',
            'description',
            'is_default',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'is_default', 'created_at', 'updated_at']
