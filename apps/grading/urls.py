from django.urls import path
from . import views

app_name = 'grading'

urlpatterns = [
    # GET    /api/samples/{sample_id}/grading/           - Grading of a sample
    # POST   /api/samples/{sample_id}/grading/           - Grade a sample
    # PUT    /api/samples/{sample_id}/grading/           - Update grading
    # PATCH  /api/samples/{sample_id}/grading/           - Update grading
    # DELETE /api/samples/{sample_id}/grading/           - Remove grading
    # POST   /api/samples/{sample_id}/grading/calculate/ - Preview without saving
    path('', views.sample_grading, name='sample-grading'),
    path('calculate/', views.grading_preview, name='grading-preview'),
]
