from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'flavors'

router = DefaultRouter()
router.register(r'', views.FlavorDescriptorViewSet, basename='descriptor')

urlpatterns = [
    # GET    /api/flavor-descriptors/          - Defaults + organization descriptors
    # POST   /api/flavor-descriptors/          - Create organization descriptor
    # PATCH  /api/flavor-descriptors/{id}/     - Update (custom only)
    # DELETE /api/flavor-descriptors/{id}/     - Delete (custom only)
    path('', include(router.urls)),
]
