from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from apps.accounts.permissions import (
    IsOrganizationMember,
    IsAdminOrManager,
    IsAdmin,
)
from .serializers import CuppingTemplateSerializer
from .services import (
    list_templates,
    create_template,
    update_template,
    delete_template,
    ensure_default_template,
    TemplateNotFoundError,
    ProtectedTemplateError,
)


class TemplatePagination(PageNumberPagination):
    page_size = 10
    page_size_query_param = 'page_size'
    max_page_size = 100


class CuppingTemplateViewSet(viewsets.ModelViewSet):
    """
    ViewSet for cupping templates.

    list/retrieve: organization templates plus public ones
    create/update: ADMIN, MANAGER
    destroy: ADMIN
    """

    serializer_class = CuppingTemplateSerializer
    pagination_class = TemplatePagination

    def get_permissions(self):
        if self.action in ('create', 'update', 'partial_update', 'ensure_default'):
            return [IsAdminOrManager()]
        if self.action == 'destroy':
            return [IsAdmin()]
        return [IsOrganizationMember()]

    def get_queryset(self):
        return list_templates(
            organization=self.request.user.organization,
            search=self.request.query_params.get('search'),
            scoring_system=self.request.query_params.get('scoring_system'),
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        template = create_template(
            organization=request.user.organization,
            created_by=request.user,
            **serializer.validated_data
        )

        return Response(
            CuppingTemplateSerializer(template).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            template = update_template(
                template_id=kwargs.get('pk'),
                organization=request.user.organization,
                data=serializer.validated_data,
            )
        except TemplateNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ProtectedTemplateError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(CuppingTemplateSerializer(template).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_template(
                template_id=kwargs.get('pk'),
                organization=request.user.organization,
            )
        except TemplateNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ProtectedTemplateError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['post'], url_path='ensure-default')
    def ensure_default(self, request):
        """Create the SCA Standard template if the organization lacks one."""
        template = ensure_default_template(
            organization=request.user.organization,
            user=request.user,
        )
        return Response(CuppingTemplateSerializer(template).data)
