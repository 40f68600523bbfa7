from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'cupping_sessions'

router = DefaultRouter()
router.register(r'', views.CuppingSessionViewSet, basename='session')

urlpatterns = [
    # GET    /api/sessions/                          - List sessions
    # POST   /api/sessions/                          - Create session
    # GET    /api/sessions/{id}/                     - Session details
    # PATCH  /api/sessions/{id}/                     - Update (not started only)
    # DELETE /api/sessions/{id}/                     - Delete (not while active)
    # POST   /api/sessions/{id}/start/               - DRAFT/SCHEDULED -> ACTIVE
    # POST   /api/sessions/{id}/complete/            - ACTIVE -> COMPLETED
    # POST   /api/sessions/{id}/schedule/            - DRAFT -> SCHEDULED
    # POST   /api/sessions/{id}/cancel/              - -> CANCELLED
    # POST   /api/sessions/{id}/archive/             - -> ARCHIVED
    # POST   /api/sessions/{id}/samples/             - Add sample
    # DELETE /api/sessions/{id}/samples/{sample_id}/ - Remove sample
    # POST   /api/sessions/{id}/participants/        - Add participant
    path('', include(router.urls)),
]
