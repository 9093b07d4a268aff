"""
Church event views: CRUD, search and month calendar.
"""

import logging

from django.db.models import Q
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import (
    OpenApiParameter,
    extend_schema,
    extend_schema_view,
)
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from churches.models import Church
from core.api_tags import APITags
from core.throttling import BurstProtectionThrottle, PostCreateThrottle

from .models import ChurchEvent
from .permissions import CanEditEvent
from .serializers import (
    CalendarDaySerializer,
    CalendarEntrySerializer,
    CalendarQuerySerializer,
    ChurchEventSerializer,
    DayQuerySerializer,
)
from .services import events_for_day, generate_calendar_month

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        summary="List church events",
        description="Events ordered by time. Filter with `?church=<id>`, search with `?q=`.",
        tags=[APITags.EVENTS],
        parameters=[
            OpenApiParameter('q', str, description="Matches title, description or author name"),
        ],
    ),
    create=extend_schema(
        summary="Create event",
        description="Church admins and owners only. Title and description are required.",
        tags=[APITags.EVENTS],
    ),
    retrieve=extend_schema(summary="Get event", tags=[APITags.EVENTS]),
    update=extend_schema(
        summary="Update event",
        description="The event creator or church admins and owners.",
        tags=[APITags.EVENTS],
    ),
    partial_update=extend_schema(summary="Partially update event", tags=[APITags.EVENTS]),
    destroy=extend_schema(
        summary="Delete event",
        description="Soft deletes the event.",
        tags=[APITags.EVENTS],
    ),
)
class ChurchEventViewSet(viewsets.ModelViewSet):
    """
    ViewSet for church events.

    Endpoints:
    - GET /events/?church=<id>&q=<text> - List events
    - POST /events/ - Create event
    - GET /events/calendar/?church=<id>&year=&month= - Month grid
    - GET /events/day/?church=<id>&date= - Occurrences on one day
    """

    serializer_class = ChurchEventSerializer
    permission_classes = [IsAuthenticated, CanEditEvent]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['church', 'is_recurring', 'recurrence_type']

    def get_queryset(self):
        queryset = (
            ChurchEvent.objects.active()
            .select_related('church', 'created_by')
            .order_by('time')
        )

        query = self.request.query_params.get('q', '').strip()
        if query:
            queryset = queryset.filter(
                Q(title__icontains=query) |
                Q(excerpt__icontains=query) |
                Q(author_name__icontains=query)
            )
        return queryset

    def get_throttles(self):
        """Apply throttling only on create."""
        if self.action == 'create':
            return [PostCreateThrottle(), BurstProtectionThrottle()]
        return super().get_throttles()

    def perform_create(self, serializer):
        church = serializer.validated_data['church']
        user = self.request.user
        if not church.is_manager(user):
            raise PermissionDenied("Only church admins and owners can create events.")

        author_name = serializer.validated_data.get('author_name') or user.full_name
        event = serializer.save(created_by=user, author_name=author_name)
        logger.info(
            "Church event created",
            extra={'event_id': str(event.id), 'church_id': str(church.id)},
        )

    def perform_destroy(self, instance):
        instance.soft_delete(user=self.request.user)

    def _church_events(self, church_id):
        church = get_object_or_404(Church, pk=church_id)
        return list(self.get_queryset().filter(church=church))

    @extend_schema(
        summary="Month calendar",
        description="Sunday-first month grid padded with adjacent-month days. "
                    "Recurring events are expanded into occurrences.",
        tags=[APITags.EVENTS],
        parameters=[CalendarQuerySerializer],
        responses={200: CalendarDaySerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def calendar(self, request):
        params = CalendarQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        events = self._church_events(data['church'])
        days = generate_calendar_month(data['year'], data['month'], events)
        return Response(
            CalendarDaySerializer(days, many=True, context=self.get_serializer_context()).data)

    @extend_schema(
        summary="Events on a day",
        tags=[APITags.EVENTS],
        parameters=[DayQuerySerializer],
        responses={200: CalendarEntrySerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def day(self, request):
        params = DayQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data

        events = self._church_events(data['church'])
        entries = events_for_day(data['date'], events)
        return Response(
            CalendarEntrySerializer(entries, many=True, context=self.get_serializer_context()).data)
