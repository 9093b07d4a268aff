"""
Authentication views for Saint Central.

Token obtain/refresh are simplejwt's own views; this module provides
registration and the signed-in user's profile.
"""

from django.db import transaction
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
import structlog

from core.api_tags import APITags
from core.throttling import RegistrationThrottle

from .serializers import (
    AuthResponseSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)

logger = structlog.get_logger(__name__)


@extend_schema(
    operation_id='register_user',
    summary='Register new user account',
    description='Create an account and return a JWT token pair.',
    request=UserRegistrationSerializer,
    responses={201: AuthResponseSerializer},
    tags=[APITags.AUTHENTICATION],
)
@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([RegistrationThrottle])
def register_view(request):
    """
    Register a new user account.

    **Response**:
    - `201 Created`: user plus `access` / `refresh` tokens
    - `400 Bad Request`: validation errors
    - `429 Too Many Requests`: rate limit exceeded
    """
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    with transaction.atomic():
        user = serializer.save()

    refresh = RefreshToken.for_user(user)
    logger.info("User registration successful", user_id=str(user.id))

    payload = AuthResponseSerializer({
        'access': str(refresh.access_token),
        'refresh': str(refresh),
        'user': user,
    }).data
    return Response(payload, status=status.HTTP_201_CREATED)


@extend_schema(
    methods=['GET'],
    operation_id='get_current_user',
    summary='Current user profile',
    responses={200: UserSerializer},
    tags=[APITags.AUTHENTICATION],
)
@extend_schema(
    methods=['PATCH'],
    operation_id='update_current_user',
    summary='Update current user profile',
    request=UserSerializer,
    responses={200: UserSerializer},
    tags=[APITags.AUTHENTICATION],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def me_view(request):
    """Return or partially update the signed-in user."""
    if request.method == 'GET':
        return Response(UserSerializer(request.user).data)

    serializer = UserSerializer(request.user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    logger.info("User profile updated", user_id=str(request.user.id),
                fields=sorted(serializer.validated_data))
    return Response(serializer.data)
