from django.contrib import admin
from .models import Sample


@admin.register(Sample)
class SampleAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'origin', 'processing_method', 'roast_level', 'organization', 'created_at']
    list_filter = ['processing_method', 'roast_level', 'organization']
    search_fields = ['name', 'code', 'origin', 'producer', 'farm']
    readonly_fields = ['created_at', 'updated_at']
