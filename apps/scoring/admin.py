from django.contrib import admin
from .models import Score, ScoreFlavorDescriptor


class ScoreFlavorDescriptorInline(admin.TabularInline):
    model = ScoreFlavorDescriptor
    extra = 0


@admin.register(Score)
class ScoreAdmin(admin.ModelAdmin):
    list_display = ['session', 'sample', 'user', 'total_score', 'is_complete', 'is_submitted', 'submitted_at']
    list_filter = ['is_submitted', 'is_complete']
    search_fields = ['session__name', 'sample__name', 'user__email']
    readonly_fields = ['total_score', 'is_complete', 'created_at', 'updated_at']
    inlines = [ScoreFlavorDescriptorInline]
