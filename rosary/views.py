"""
Rosary views: mysteries, prayer sessions and statistics, settings and
narrated audio.
"""

import logging

from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.api_tags import APITags

from .constants import (
    AUDIO_DURATIONS,
    LANGUAGES,
    MYSTERIES,
    PRAYER_THEMES,
    VOICE_GUIDES,
    mystery_of_the_day,
)
from .models import PrayerSession, RosarySettings
from .serializers import (
    AudioTrackQuerySerializer,
    AudioTrackSerializer,
    ImportResultSerializer,
    MysteryOfTheDaySerializer,
    MysterySerializer,
    PrayerHistoryImportSerializer,
    PrayerSessionSerializer,
    PrayerStatisticsSerializer,
    RosarySettingsSerializer,
    VoiceSwapResultSerializer,
    VoiceSwapSerializer,
)
from .services import PrayerStatisticsService, audio_track, filter_history, swap_voice
from .services.statistics import HISTORY_RANGES

logger = logging.getLogger(__name__)


@extend_schema(
    summary="List mysteries",
    description="The four sets of mysteries with their five mysteries each.",
    tags=[APITags.ROSARY],
    responses={200: MysterySerializer(many=True)},
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def mysteries_view(request):
    data = [{'key': key, **info} for key, info in MYSTERIES.items()]
    return Response(MysterySerializer(data, many=True).data)


@extend_schema(
    summary="Mystery of the day",
    description=(
        "Monday and Saturday: Joyful. Tuesday and Friday: Sorrowful. "
        "Wednesday and Sunday: Glorious. Thursday: Luminous."
    ),
    tags=[APITags.ROSARY],
    responses={200: MysteryOfTheDaySerializer},
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def today_view(request):
    today = timezone.localdate()
    key = mystery_of_the_day(today)
    voice = RosarySettings.for_user(request.user).voice_guide
    data = {
        'key': key,
        'date': today,
        'audio_url': audio_track(key, voice)['url'],
        **MYSTERIES[key],
    }
    return Response(MysteryOfTheDaySerializer(data).data)


@extend_schema(
    summary="Settings options",
    description="Voice guides, durations, languages and themes to choose from.",
    tags=[APITags.ROSARY],
    responses={200: dict},
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def options_view(request):
    return Response({
        'voice_guides': VOICE_GUIDES,
        'durations': AUDIO_DURATIONS,
        'languages': LANGUAGES,
        'themes': PRAYER_THEMES,
    })


@extend_schema_view(
    list=extend_schema(
        summary="Prayer history",
        description="Completed prayers, newest first.",
        tags=[APITags.ROSARY],
        parameters=[
            OpenApiParameter('range', OpenApiTypes.STR, enum=list(HISTORY_RANGES)),
            OpenApiParameter('mystery', OpenApiTypes.STR, enum=list(MYSTERIES)),
        ],
    ),
    create=extend_schema(summary="Record a completed prayer", tags=[APITags.ROSARY]),
    retrieve=extend_schema(summary="Get prayer session", tags=[APITags.ROSARY]),
    destroy=extend_schema(summary="Delete prayer session", tags=[APITags.ROSARY]),
)
class PrayerSessionViewSet(mixins.ListModelMixin,
                           mixins.CreateModelMixin,
                           mixins.RetrieveModelMixin,
                           mixins.DestroyModelMixin,
                           viewsets.GenericViewSet):
    serializer_class = PrayerSessionSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        queryset = PrayerSession.objects.filter(user=self.request.user).order_by('-prayed_at')
        if self.action == 'list':
            queryset = filter_history(
                queryset,
                time_range=self.request.query_params.get('range', 'all'),
                mystery=self.request.query_params.get('mystery'),
            )
        return queryset

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = PrayerStatisticsService.record(
            self.request.user,
            data['mystery'],
            duration_minutes=data.get('duration_minutes', 0),
            intention=data.get('intention', ''),
            prayed_at=data.get('prayed_at'),
        )

    @extend_schema(
        summary="Prayer statistics",
        description="Streaks, totals, last 7 days, last 12 months and mystery distribution.",
        tags=[APITags.ROSARY],
        responses={200: PrayerStatisticsSerializer},
    )
    @action(detail=False, methods=['get'])
    def statistics(self, request):
        stats = PrayerStatisticsService.statistics(request.user)
        return Response(PrayerStatisticsSerializer(stats).data)

    @extend_schema(
        summary="Import prayer history",
        description="Import sessions from a device statistics blob (`prayerHistory`).",
        tags=[APITags.ROSARY],
        request=PrayerHistoryImportSerializer,
        responses={200: ImportResultSerializer},
    )
    @action(detail=False, methods=['post'], url_path='import')
    def import_history(self, request):
        serializer = PrayerHistoryImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        imported = PrayerStatisticsService.import_history(request.user, serializer.validated_data)
        stats = PrayerStatisticsService.statistics(request.user)
        return Response(ImportResultSerializer({'imported': imported, 'statistics': stats}).data)


class RosarySettingsView(APIView):
    """The current user's rosary preferences."""

    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Get rosary settings", tags=[APITags.ROSARY],
                   responses={200: RosarySettingsSerializer})
    def get(self, request):
        return Response(RosarySettingsSerializer(RosarySettings.for_user(request.user)).data)

    @extend_schema(summary="Update rosary settings", tags=[APITags.ROSARY],
                   request=RosarySettingsSerializer,
                   responses={200: RosarySettingsSerializer})
    def patch(self, request):
        serializer = RosarySettingsSerializer(
            RosarySettings.for_user(request.user), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info(
            "Rosary settings updated",
            extra={'user_id': str(request.user.id), 'fields': sorted(serializer.validated_data)},
        )
        return Response(serializer.data)


@extend_schema(
    summary="Reset rosary settings",
    tags=[APITags.ROSARY],
    request=None,
    responses={200: RosarySettingsSerializer},
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def reset_settings_view(request):
    settings_obj = RosarySettings.for_user(request.user)
    settings_obj.reset()
    return Response(RosarySettingsSerializer(settings_obj).data, status=status.HTTP_200_OK)


@extend_schema(
    summary="Audio track",
    description="Narrated track URL for a mystery. Defaults to the user's voice guide.",
    tags=[APITags.ROSARY],
    parameters=[AudioTrackQuerySerializer],
    responses={200: AudioTrackSerializer},
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def audio_track_view(request):
    query = AudioTrackQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    voice = query.validated_data.get('voice') or RosarySettings.for_user(request.user).voice_guide
    return Response(audio_track(query.validated_data['mystery'], voice))


@extend_schema(
    summary="Swap narrating voice",
    description=(
        "Resolve another voice's track for the same mystery and the relative "
        "position to resume at once it has loaded."
    ),
    tags=[APITags.ROSARY],
    request=VoiceSwapSerializer,
    responses={200: VoiceSwapResultSerializer},
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def voice_swap_view(request):
    serializer = VoiceSwapSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return Response(swap_voice(**serializer.validated_data))
