from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import (
    IsOrganizationMember,
    IsCupperOrAbove,
    IsAdminOrManager,
)
from .serializers import (
    CuppingSessionSerializer,
    CuppingSessionListSerializer,
    CuppingSessionWriteSerializer,
    SessionSampleSerializer,
    SessionSampleCreateSerializer,
    SessionParticipantSerializer,
    ParticipantCreateSerializer,
    ScheduleSerializer,
)
from .services import (
    list_sessions,
    get_session,
    create_session,
    update_session,
    delete_session,
    start_session,
    complete_session,
    schedule_session,
    cancel_session,
    archive_session,
    add_sample_to_session,
    remove_sample_from_session,
    add_participant,
    SessionsServiceError,
    SessionNotFoundError,
    SessionSampleNotFoundError,
)

NOT_FOUND_ERRORS = (SessionNotFoundError, SessionSampleNotFoundError)


def _error_response(error):
    if isinstance(error, NOT_FOUND_ERRORS):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class SessionPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class CuppingSessionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for cupping sessions.

    list/retrieve: any organization member
    create: ADMIN, MANAGER, CUPPER
    everything else: ADMIN, MANAGER
    """

    serializer_class = CuppingSessionSerializer
    pagination_class = SessionPagination

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [IsOrganizationMember()]
        if self.action == 'create':
            return [IsCupperOrAbove()]
        return [IsAdminOrManager()]

    def get_queryset(self):
        return list_sessions(
            organization=self.request.user.organization,
            status=self.request.query_params.get('status'),
            search=self.request.query_params.get('search'),
        )

    def get_serializer_class(self):
        if self.action == 'list':
            return CuppingSessionListSerializer
        if self.action in ('create', 'update', 'partial_update'):
            return CuppingSessionWriteSerializer
        return CuppingSessionSerializer

    def _session_response(self, session, status_code=status.HTTP_200_OK):
        session = get_session(session_id=session.id, organization=self.request.user.organization)
        return Response(CuppingSessionSerializer(session).data, status=status_code)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session = create_session(
                organization=request.user.organization,
                created_by=request.user,
                **serializer.validated_data
            )
        except SessionsServiceError as e:
            return _error_response(e)

        return self._session_response(session, status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            session = update_session(
                session_id=kwargs.get('pk'),
                organization=request.user.organization,
                data=serializer.validated_data,
            )
        except SessionsServiceError as e:
            return _error_response(e)

        return self._session_response(session)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_session(session_id=kwargs.get('pk'), organization=request.user.organization)
        except SessionsServiceError as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)

    def _transition(self, service, pk, **extra):
        try:
            session = service(session_id=pk, organization=self.request.user.organization, **extra)
        except SessionsServiceError as e:
            return _error_response(e)

        return self._session_response(session)

    @extend_schema(request=None, responses={200: CuppingSessionSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'])
    def start(self, request, pk=None):
        """Start the session (DRAFT/SCHEDULED -> ACTIVE)."""
        return self._transition(start_session, pk)

    @extend_schema(request=None, responses={200: CuppingSessionSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        """Complete the session (ACTIVE -> COMPLETED)."""
        return self._transition(complete_session, pk)

    @extend_schema(request=ScheduleSerializer, responses={200: CuppingSessionSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'])
    def schedule(self, request, pk=None):
        """Schedule the session (DRAFT -> SCHEDULED)."""
        serializer = ScheduleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._transition(schedule_session, pk, **serializer.validated_data)

    @extend_schema(request=None, responses={200: CuppingSessionSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'])
    def cancel(self, request, pk=None):
        return self._transition(cancel_session, pk)

    @extend_schema(request=None, responses={200: CuppingSessionSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'])
    def archive(self, request, pk=None):
        return self._transition(archive_session, pk)

    @extend_schema(request=SessionSampleCreateSerializer, responses={201: SessionSampleSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'], url_path='samples')
    def add_sample(self, request, pk=None):
        """Add a sample to the session table."""
        serializer = SessionSampleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session_sample = add_sample_to_session(
                session_id=pk,
                organization=request.user.organization,
                **serializer.validated_data
            )
        except SessionsServiceError as e:
            return _error_response(e)

        return Response(SessionSampleSerializer(session_sample).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=None, responses={204: None}, tags=['sessions'])
    @action(detail=True, methods=['delete'], url_path=r'samples/(?P<sample_id>[^/.]+)')
    def remove_sample(self, request, pk=None, sample_id=None):
        """Remove a sample from the session table."""
        try:
            remove_sample_from_session(
                session_id=pk,
                organization=request.user.organization,
                sample_id=sample_id,
            )
        except SessionsServiceError as e:
            return _error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=ParticipantCreateSerializer, responses={201: SessionParticipantSerializer}, tags=['sessions'])
    @action(detail=True, methods=['post'])
    def participants(self, request, pk=None):
        """Add an organization member to the session."""
        serializer = ParticipantCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            participant = add_participant(
                session_id=pk,
                organization=request.user.organization,
                **serializer.validated_data
            )
        except SessionsServiceError as e:
            return _error_response(e)

        return Response(SessionParticipantSerializer(participant).data, status=status.HTTP_201_CREATED)
