from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    # GET /api/reports/sessions/{session_id}/pdf/     - PDF attachment
    # GET /api/reports/sessions/{session_id}/summary/ - JSON aggregates
    path('sessions/<uuid:session_id>/pdf/', views.session_report_pdf, name='session-pdf'),
    path('sessions/<uuid:session_id>/summary/', views.session_report_summary, name='session-summary'),
]
