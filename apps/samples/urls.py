from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'samples'

router = DefaultRouter()
router.register(r'', views.SampleViewSet, basename='sample')

urlpatterns = [
    # GET    /api/samples/            - List samples
    # POST   /api/samples/            - Create sample
    # GET    /api/samples/{id}/       - Sample details
    # PATCH  /api/samples/{id}/       - Update sample
    # DELETE /api/samples/{id}/       - Delete sample (unused only)
    # GET    /api/samples/origins/    - Distinct origins
    path('', include(router.urls)),
]
