from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'cupping_templates'

router = DefaultRouter()
router.register(r'', views.CuppingTemplateViewSet, basename='template')

urlpatterns = [
    # GET    /api/templates/                  - Own + public templates
    # POST   /api/templates/                  - Create template
    # PATCH  /api/templates/{id}/             - Update (non-default only)
    # DELETE /api/templates/{id}/             - Delete (ADMIN, non-default only)
    # POST   /api/templates/ensure-default/   - Create SCA Standard if missing
    path('', include(router.urls)),
]
