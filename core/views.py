"""
Core API views: media uploads and health check.
"""

from django.db import connection
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .api_tags import APITags
from .serializers import ImageUploadSerializer, MediaObjectSerializer
from .storage import MediaStorageService
from .throttling import UploadThrottle


class MediaUploadView(APIView):
    """
    Upload an image into one of the storage buckets.

    POST /api/v1/media/<bucket>/ with a multipart ``file`` field.
    """

    permission_classes = [IsAuthenticated]
    parser_classes = [MultiPartParser, FormParser]
    throttle_classes = [UploadThrottle]

    @extend_schema(
        summary="Upload image",
        description="Store an image in a bucket (church-images, event-images, bible-images) and return its public URL.",
        tags=[APITags.MEDIA],
        request=ImageUploadSerializer,
        responses={201: MediaObjectSerializer},
    )
    def post(self, request, bucket):
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        stored = MediaStorageService.upload(
            bucket, request.user, serializer.validated_data['file'])

        return Response(MediaObjectSerializer(stored).data, status=status.HTTP_201_CREATED)


class HealthCheckView(APIView):
    """Liveness/readiness probe used by load balancers."""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Health check", tags=[APITags.SYSTEM_HEALTH], responses={200: dict})
    def get(self, request):
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        return Response({'status': 'healthy', 'service': 'Saint Central API'})
