from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import User
from .permissions import IsOrganizationMember, IsAdminOrManager
from .serializers import (
    OrganizationRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    UserMinimalSerializer,
    MemberInviteSerializer,
)
from .services import (
    register_organization as register_organization_service,
    authenticate_user,
    issue_tokens,
    invite_member as invite_member_service,
    OrganizationRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    DuplicateMemberError,
    InsufficientRoleError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=OrganizationRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new organization with its first administrator and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register_organization(request):
    """Register a new organization and its admin account."""
    serializer = OrganizationRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        _, user = register_organization_service(**data)
    except OrganizationRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': 'Organization registered successfully',
        'user': UserSerializer(user).data,
        'tokens': issue_tokens(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': issue_tokens(user),
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsOrganizationMember])
def profile(request):
    """Get or update the current user's profile."""
    if request.method == 'GET':
        return Response(UserSerializer(request.user).data)

    serializer = UserSerializer(request.user, data=request.data, partial=True)
    if serializer.is_valid():
        serializer.save()
        return Response(serializer.data)

    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(
    request=MemberInviteSerializer,
    responses={
        201: UserSerializer,
        400: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Create a member account inside the caller's organization.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAdminOrManager])
def invite_member(request):
    """Invite a new member into the organization."""
    serializer = MemberInviteSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        member = invite_member_service(
            organization=request.user.organization,
            invited_by=request.user,
            **serializer.validated_data
        )
    except InsufficientRoleError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except DuplicateMemberError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(UserSerializer(member).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: UserMinimalSerializer(many=True)},
    description="List active members of the caller's organization.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsOrganizationMember])
def list_members(request):
    """List organization members."""
    members = User.objects.filter(
        organization_id=request.user.organization_id,
        is_active=True,
    ).order_by('first_name', 'last_name', 'email')

    return Response(UserMinimalSerializer(members, many=True).data)
