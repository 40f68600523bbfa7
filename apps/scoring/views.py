import uuid

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.accounts.permissions import IsOrganizationMember, IsCupperOrAbove
from .serializers import ScoreSerializer, ScoreSubmitSerializer
from .services import (
    submit_score as submit_score_service,
    get_session_scores,
    get_score_for_user,
    ScoringServiceError,
    ScoringSessionNotFoundError,
    SampleNotInSessionError,
    ScoreNotFoundError,
    ScoreAlreadySubmittedError,
    ScoringNotAllowedError,
)

NOT_FOUND_ERRORS = (ScoringSessionNotFoundError, SampleNotInSessionError, ScoreNotFoundError)


def _error_response(error):
    body = {'error': str(error)}
    field = getattr(error, 'field', None)
    if field:
        body['field'] = field

    if isinstance(error, NOT_FOUND_ERRORS):
        return Response(body, status=status.HTTP_404_NOT_FOUND)
    if isinstance(error, ScoringNotAllowedError):
        return Response(body, status=status.HTTP_403_FORBIDDEN)
    if isinstance(error, ScoreAlreadySubmittedError):
        return Response(body, status=status.HTTP_409_CONFLICT)
    return Response(body, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    request=ScoreSubmitSerializer,
    responses={200: ScoreSerializer},
    description="Save or submit the current user's score for a sample in an active session.",
    tags=['scores'],
)
@api_view(['POST'])
@permission_classes([IsCupperOrAbove])
def submit_score(request, session_id, sample_id):
    """Create, update or submit a score."""
    serializer = ScoreSubmitSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        score = submit_score_service(
            session_id=session_id,
            sample_id=sample_id,
            user=request.user,
            **serializer.validated_data
        )
    except ScoringServiceError as e:
        return _error_response(e)

    # reload with flavor selections prefetched
    score = get_score_for_user(session_id=session_id, sample_id=score.sample_id, user=request.user)
    return Response(ScoreSerializer(score, context={'request': request}).data)


@extend_schema(responses={200: ScoreSerializer}, tags=['scores'])
@api_view(['GET'])
@permission_classes([IsOrganizationMember])
def my_score(request, session_id, sample_id):
    """The current user's score for a sample."""
    try:
        score = get_score_for_user(session_id=session_id, sample_id=sample_id, user=request.user)
    except ScoringServiceError as e:
        return _error_response(e)

    return Response(ScoreSerializer(score, context={'request': request}).data)


@extend_schema(
    parameters=[OpenApiParameter('sample', str, description='Only scores for this sample')],
    responses={200: ScoreSerializer(many=True)},
    tags=['scores'],
)
@api_view(['GET'])
@permission_classes([IsOrganizationMember])
def session_scores(request, session_id):
    """All scores recorded in a session."""
    sample_id = request.query_params.get('sample')
    if sample_id:
        try:
            sample_id = uuid.UUID(sample_id)
        except ValueError:
            return Response(
                {'error': 'sample must be a valid UUID', 'field': 'sample'},
                status=status.HTTP_400_BAD_REQUEST
            )

    try:
        scores = get_session_scores(
            session_id=session_id,
            organization=request.user.organization,
            sample_id=sample_id or None,
        )
    except ScoringServiceError as e:
        return _error_response(e)

    return Response(ScoreSerializer(scores, many=True, context={'request': request}).data)
