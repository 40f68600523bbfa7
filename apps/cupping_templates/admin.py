from django.contrib import admin
from .models import CuppingTemplate


@admin.register(CuppingTemplate)
class CuppingTemplateAdmin(admin.ModelAdmin):
    list_display = ['name', 'scoring_system', 'organization', 'is_default', 'is_public', 'created_at']
    list_filter = ['scoring_system', 'is_default', 'is_public']
    search_fields = ['name', 'description', 'organization__name']
    readonly_fields = ['created_at', 'updated_at']
