from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsOrganizationMember
from .permissions import CanGradeSamples
from .serializers import (
    GreenBeanGradingSerializer,
    GradingInputSerializer,
    GradePreviewSerializer,
    GradeAssessmentSerializer,
)
from .services import (
    get_grading,
    create_grading,
    update_grading,
    delete_grading,
    preview_grade,
    GradingServiceError,
    GradingSampleNotFoundError,
    GradingNotFoundError,
    GradingAlreadyExistsError,
)


def _error_response(error):
    if isinstance(error, (GradingSampleNotFoundError, GradingNotFoundError)):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(error, GradingAlreadyExistsError):
        return Response({'error': str(error)}, status=status.HTTP_409_CONFLICT)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    request=GradingInputSerializer,
    responses={200: GreenBeanGradingSerializer, 201: GreenBeanGradingSerializer},
    description=(
        "Green bean grading of a sample. GET reads it, POST creates it, "
        "PUT/PATCH change the given fields, DELETE removes it."
    ),
    tags=['grading'],
)
@api_view(['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([CanGradeSamples])
def sample_grading(request, sample_id):
    """Read, create, update or delete the grading of a sample."""
    organization = request.user.organization

    try:
        if request.method == 'GET':
            grading = get_grading(sample_id=sample_id, organization=organization)
            return Response(GreenBeanGradingSerializer(grading).data)

        if request.method == 'DELETE':
            delete_grading(sample_id=sample_id, organization=organization)
            return Response(status=status.HTTP_204_NO_CONTENT)

        serializer = GradingInputSerializer(data=request.data, partial=request.method != 'POST')
        serializer.is_valid(raise_exception=True)

        if request.method == 'POST':
            grading = create_grading(
                sample_id=sample_id,
                organization=organization,
                graded_by=request.user,
                **serializer.validated_data
            )
            return Response(GreenBeanGradingSerializer(grading).data, status=status.HTTP_201_CREATED)

        grading = update_grading(
            sample_id=sample_id,
            organization=organization,
            graded_by=request.user,
            data=serializer.validated_data,
        )
        return Response(GreenBeanGradingSerializer(grading).data)

    except GradingServiceError as e:
        return _error_response(e)


@extend_schema(
    request=GradePreviewSerializer,
    responses={200: GradeAssessmentSerializer},
    description="Defect equivalents, grade and quality score for the given values, without saving.",
    tags=['grading'],
)
@api_view(['POST'])
@permission_classes([IsOrganizationMember])
def grading_preview(request, sample_id):
    """Grade preview; nothing is stored."""
    serializer = GradePreviewSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        assessment = preview_grade(
            sample_id=sample_id,
            organization=request.user.organization,
            **serializer.validated_data
        )
    except GradingServiceError as e:
        return _error_response(e)

    return Response(GradeAssessmentSerializer(assessment).data)
