from django.contrib import admin
from .models import FlavorDescriptor


@admin.register(FlavorDescriptor)
class FlavorDescriptorAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'is_default', 'organization', 'created_at']
    list_filter = ['category', 'is_default']
    search_fields = ['name', 'description']
    ordering = ['-is_default', 'category', 'name']
