from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from .models import Score, ScoreFlavorDescriptor
from .scaa import SCAA_CATEGORIES


class ScoreFlavorDescriptorSerializer(serializers.ModelSerializer):
    descriptor_id = serializers.UUIDField(source='descriptor.id', read_only=True)
    name = serializers.CharField(source='descriptor.name', read_only=True)
    category = serializers.CharField(source='descriptor.category', read_only=True)

    class Meta:
        model = ScoreFlavorDescriptor
        fields = ['descriptor_id', 'name', 'category', 'intensity']
        read_only_fields = fields


class ScoreSerializer(serializers.ModelSerializer):
    """
    Score output.

    Private notes are only shown to the evaluator who wrote them.
    """

    user = UserMinimalSerializer(read_only=True)
    categories = serializers.SerializerMethodField()
    grade = serializers.CharField(read_only=True)
    flavor_descriptors = ScoreFlavorDescriptorSerializer(many=True, read_only=True)
    sample_position = serializers.IntegerField(source='session_sample.position', read_only=True)

    class Meta:
        model = Score
        fields = [
            'id',
            'session',
            'sample',
            'sample_position',
            'user',
            'categories',
            'total_score',
            'max_score',
            'grade',
            'is_complete',
            'is_submitted',
            'submitted_at',
            'notes',
            'private_notes',
            'flavor_descriptors',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_categories(self, obj) -> dict:
        return {
            category: None if value is None else str(value)
            for category, value in obj.category_values().items()
        }

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get('request')
        if request is None or request.user.id != instance.user_id:
            data.pop('private_notes', None)
        return data


class FlavorSelectionInputSerializer(serializers.Serializer):
    descriptor_id = serializers.UUIDField()
    intensity = serializers.IntegerField(required=False, allow_null=True)


class ScoreSubmitSerializer(serializers.Serializer):
    """
    Input for saving a score.

    Category values are validated by the scoring service so errors can
    name the failing category.
    """

    categories = serializers.DictField(required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    private_notes = serializers.CharField(required=False, allow_blank=True)
    flavor_descriptors = FlavorSelectionInputSerializer(many=True, required=False)
    submit = serializers.BooleanField(default=False)

    def to_internal_value(self, data):
        # flat category keys are accepted next to the nested dict
        if isinstance(data, dict):
            flat = {key: data[key] for key in SCAA_CATEGORIES if key in data}
            if flat:
                data = {**data, 'categories': {**flat, **data.get('categories', {})}}
        return super().to_internal_value(data)
