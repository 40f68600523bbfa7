from django.contrib import admin
from .models import GreenBeanGrading


@admin.register(GreenBeanGrading)
class GreenBeanGradingAdmin(admin.ModelAdmin):
    list_display = ['sample', 'grade', 'classification', 'full_defect_equivalents', 'quality_score', 'graded_at']
    list_filter = ['classification', 'grading_system']
    search_fields = ['sample__name', 'sample__code', 'certified_by']
    readonly_fields = [
        'full_defect_equivalents', 'average_screen_size', 'uniformity_percentage',
        'classification', 'grade', 'quality_score', 'created_at', 'updated_at',
    ]
