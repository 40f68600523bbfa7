from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from .models import (
    CuppingSession,
    SessionSample,
    SessionParticipant,
    ParticipantRole,
)


class SessionSampleSerializer(serializers.ModelSerializer):
    """A sample on a session table."""

    sample_name = serializers.CharField(source='sample.name', read_only=True)
    sample_origin = serializers.CharField(source='sample.origin', read_only=True)
    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = SessionSample
        fields = [
            'id',
            'sample',
            'sample_name',
            'sample_origin',
            'display_name',
            'position',
            'is_blind',
            'blind_code',
            'grind_size',
            'water_temp',
            'brew_ratio',
            'steep_time',
        ]
        read_only_fields = fields


class SessionParticipantSerializer(serializers.ModelSerializer):
    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = SessionParticipant
        fields = ['id', 'user', 'role', 'is_calibrated', 'calibrated_at', 'joined_at']
        read_only_fields = fields


class CuppingSessionSerializer(serializers.ModelSerializer):
    """Full session representation."""

    samples = SessionSampleSerializer(source='session_samples', many=True, read_only=True)
    participants = SessionParticipantSerializer(many=True, read_only=True)
    created_by = UserMinimalSerializer(read_only=True)
    template_name = serializers.CharField(source='template.name', read_only=True, default=None)

    class Meta:
        model = CuppingSession
        fields = [
            'id',
            'name',
            'description',
            'location',
            'status',
            'template',
            'template_name',
            'blind_tasting',
            'allow_comments',
            'require_calibration',
            'scheduled_at',
            'started_at',
            'completed_at',
            'tags',
            'created_by',
            'samples',
            'participants',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class CuppingSessionListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for session lists."""

    sample_count = serializers.SerializerMethodField()
    participant_count = serializers.SerializerMethodField()

    class Meta:
        model = CuppingSession
        fields = [
            'id',
            'name',
            'location',
            'status',
            'blind_tasting',
            'scheduled_at',
            'started_at',
            'completed_at',
            'sample_count',
            'participant_count',
            'created_at',
        ]

    def get_sample_count(self, obj) -> int:
        return len(obj.session_samples.all())

    def get_participant_count(self, obj) -> int:
        return len(obj.participants.all())


class CuppingSessionWriteSerializer(serializers.Serializer):
    """Input for creating and updating sessions."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)
    template_id = serializers.UUIDField(required=False, allow_null=True)
    blind_tasting = serializers.BooleanField(required=False)
    allow_comments = serializers.BooleanField(required=False)
    require_calibration = serializers.BooleanField(required=False)
    scheduled_at = serializers.DateTimeField(required=False, allow_null=True)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    sample_ids = serializers.ListField(child=serializers.UUIDField(), required=False)


class SessionSampleCreateSerializer(serializers.Serializer):
    sample_id = serializers.UUIDField()
    position = serializers.IntegerField(min_value=1, required=False)
    blind_code = serializers.CharField(max_length=20, required=False, allow_blank=True)
    grind_size = serializers.CharField(max_length=50, required=False, allow_blank=True)
    water_temp = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False, allow_null=True
    )
    brew_ratio = serializers.CharField(max_length=20, required=False, allow_blank=True)
    steep_time = serializers.IntegerField(min_value=0, required=False, allow_null=True)


class ParticipantCreateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    role = serializers.ChoiceField(choices=ParticipantRole.choices, default=ParticipantRole.JUDGE)
    is_calibrated = serializers.BooleanField(default=False)


class ScheduleSerializer(serializers.Serializer):
    scheduled_at = serializers.DateTimeField(required=False)
