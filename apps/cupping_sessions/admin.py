from django.contrib import admin
from .models import CuppingSession, SessionSample, SessionParticipant


class SessionSampleInline(admin.TabularInline):
    model = SessionSample
    extra = 0
    fields = ['position', 'sample', 'is_blind', 'blind_code']


class SessionParticipantInline(admin.TabularInline):
    model = SessionParticipant
    extra = 0
    fields = ['user', 'role', 'is_calibrated']


@admin.register(CuppingSession)
class CuppingSessionAdmin(admin.ModelAdmin):
    """Status is read-only here; it changes through the API lifecycle."""

    list_display = ['name', 'organization', 'status', 'blind_tasting', 'scheduled_at', 'created_at']
    list_filter = ['status', 'blind_tasting', 'organization']
    search_fields = ['name', 'location', 'organization__name']
    readonly_fields = ['status', 'started_at', 'completed_at', 'created_at', 'updated_at']
    inlines = [SessionSampleInline, SessionParticipantInline]
