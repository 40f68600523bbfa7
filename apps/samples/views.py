from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from apps.accounts.permissions import (
    IsOrganizationMember,
    IsCupperOrAbove,
    IsAdminOrManager,
)
from .serializers import SampleSerializer, SampleListSerializer
from .services import (
    create_sample,
    update_sample,
    delete_sample,
    search_samples,
    get_sample_origins,
    SampleNotFoundError,
    SampleInUseError,
)


class SamplePagination(PageNumberPagination):
    """Custom pagination for samples."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class SampleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Sample CRUD operations.

    Every query is scoped to the requesting user's organization.
    """

    serializer_class = SampleSerializer
    pagination_class = SamplePagination

    def get_permissions(self):
        if self.action in ('create', 'update', 'partial_update'):
            return [IsCupperOrAbove()]
        if self.action == 'destroy':
            return [IsAdminOrManager()]
        return [IsOrganizationMember()]

    def get_queryset(self):
        """
        Filter samples based on query parameters.

        Filters:
        - search: Search in name, code, origin, producer, farm, variety
        - origin: Filter by origin
        - processing_method: Filter by processing method
        - roast_level: Filter by roast level
        """
        return search_samples(
            organization=self.request.user.organization,
            search=self.request.query_params.get('search'),
            origin=self.request.query_params.get('origin'),
            processing_method=self.request.query_params.get('processing_method'),
            roast_level=self.request.query_params.get('roast_level'),
        )

    def get_serializer_class(self):
        if self.action == 'list':
            return SampleListSerializer
        return SampleSerializer

    def create(self, request, *args, **kwargs):
        """Create a new sample."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sample = create_sample(
            organization=request.user.organization,
            created_by=request.user,
            **serializer.validated_data
        )

        return Response(
            SampleSerializer(sample).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a sample (PUT and PATCH)."""
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            sample = update_sample(
                sample_id=instance.id,
                organization=request.user.organization,
                data=serializer.validated_data,
            )
        except SampleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(SampleSerializer(sample).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a sample that is not used in any session."""
        try:
            delete_sample(
                sample_id=kwargs.get('pk'),
                organization=request.user.organization,
            )
        except SampleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except SampleInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'])
    def origins(self, request):
        """Get list of all origins used by the organization."""
        return Response(get_sample_origins(organization=request.user.organization))
