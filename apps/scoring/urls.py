from django.urls import path
from . import views

app_name = 'scoring'

urlpatterns = [
    # GET  /api/scores/sessions/{session_id}/                          - Session scores
    # POST /api/scores/sessions/{session_id}/samples/{sample_id}/      - Save/submit own score
    # GET  /api/scores/sessions/{session_id}/samples/{sample_id}/mine/ - Own score
    path('sessions/<uuid:session_id>/', views.session_scores, name='session-scores'),
    path('sessions/<uuid:session_id>/samples/<uuid:sample_id>/', views.submit_score, name='submit-score'),
    path('sessions/<uuid:session_id>/samples/<uuid:sample_id>/mine/', views.my_score, name='my-score'),
]
