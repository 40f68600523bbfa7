from rest_framework import viewsets, status
from rest_framework.response import Response
from apps.accounts.permissions import IsOrganizationMember, IsAdminOrManager
from .serializers import FlavorDescriptorSerializer
from .services import (
    get_available_descriptors,
    create_descriptor,
    update_descriptor,
    delete_descriptor,
    DescriptorNotFoundError,
    DuplicateDescriptorError,
    ProtectedDescriptorError,
)


def _error_response(error):
    if isinstance(error, DescriptorNotFoundError):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(error, ProtectedDescriptorError):
        return Response({'error': str(error)}, status=status.HTTP_403_FORBIDDEN)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class FlavorDescriptorViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the flavor descriptor catalog.

    list: Default descriptors plus the organization's own
    create/update/destroy: Organization descriptors only (ADMIN, MANAGER)
    """

    serializer_class = FlavorDescriptorSerializer
    pagination_class = None

    def get_permissions(self):
        if self.action in ('create', 'update', 'partial_update', 'destroy'):
            return [IsAdminOrManager()]
        return [IsOrganizationMember()]

    def get_queryset(self):
        return get_available_descriptors(
            organization=self.request.user.organization,
            category=self.request.query_params.get('category'),
            search=self.request.query_params.get('search', ''),
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            descriptor = create_descriptor(
                organization=request.user.organization,
                created_by=request.user,
                **serializer.validated_data
            )
        except DuplicateDescriptorError as e:
            return _error_response(e)

        return Response(
            FlavorDescriptorSerializer(descriptor).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            descriptor = update_descriptor(
                descriptor_id=kwargs.get('pk'),
                organization=request.user.organization,
                **serializer.validated_data
            )
        except (DescriptorNotFoundError, DuplicateDescriptorError, ProtectedDescriptorError) as e:
            return _error_response(e)

        return Response(FlavorDescriptorSerializer(descriptor).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_descriptor(
                descriptor_id=kwargs.get('pk'),
                organization=request.user.organization,
            )
        except (DescriptorNotFoundError, ProtectedDescriptorError) as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)
