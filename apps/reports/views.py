from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse
from drf_spectacular.types import OpenApiTypes
from apps.accounts.permissions import IsOrganizationMember
from .services import (
    generate_session_report,
    get_session_summary,
    ReportSessionNotFoundError,
)


@extend_schema(
    responses={200: OpenApiResponse(OpenApiTypes.BINARY, description='PDF report')},
    description="Download the PDF report of a session.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsOrganizationMember])
def session_report_pdf(request, session_id):
    """Session report as a PDF attachment."""
    try:
        filename, pdf_bytes = generate_session_report(
            session_id=session_id,
            organization=request.user.organization,
        )
    except ReportSessionNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    response = HttpResponse(pdf_bytes, content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


@extend_schema(
    responses={200: OpenApiTypes.OBJECT},
    description="Per-sample averages, grades and flavor tallies of a session.",
    tags=['reports'],
)
@api_view(['GET'])
@permission_classes([IsOrganizationMember])
def session_report_summary(request, session_id):
    """Session report aggregates as JSON."""
    try:
        summary = get_session_summary(
            session_id=session_id,
            organization=request.user.organization,
        )
    except ReportSessionNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(summary)
