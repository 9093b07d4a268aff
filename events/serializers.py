"""
Church event serializers.
"""

from django.utils import timezone
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from core.storage import EVENT_IMAGES, MediaStorageService

from .models import ChurchEvent
from .services import sunday_weekday
from .utils import (
    describe_recurrence,
    decode_days_of_week,
    event_icon_and_color,
    image_url_or_placeholder,
    video_thumbnail,
)


@extend_schema_field(serializers.ListField(child=serializers.IntegerField(min_value=0, max_value=6)))
class DaysOfWeekField(serializers.Field):
    """
    Weekday list (0 = Sunday). Also accepts the packed integer form
    ``135`` for ``[1, 3, 5]``.
    """

    def to_internal_value(self, data):
        try:
            return decode_days_of_week(data)
        except (TypeError, ValueError) as exc:
            raise serializers.ValidationError(str(exc))

    def to_representation(self, value):
        return list(value) if value else None


class ChurchEventSerializer(serializers.ModelSerializer):
    """Church event with display helpers."""

    recurrence_days_of_week = DaysOfWeekField(required=False, allow_null=True)
    icon = serializers.SerializerMethodField()
    color = serializers.SerializerMethodField()
    video_thumbnail = serializers.SerializerMethodField()
    display_image = serializers.SerializerMethodField()
    recurrence_summary = serializers.SerializerMethodField()
    can_edit = serializers.SerializerMethodField()
    church_name = serializers.CharField(source='church.name', read_only=True)

    class Meta:
        model = ChurchEvent
        fields = [
            'id', 'church', 'church_name', 'title', 'excerpt', 'image_url',
            'video_link', 'time', 'author_name', 'event_location',
            'created_by', 'is_recurring', 'recurrence_type',
            'recurrence_interval', 'recurrence_days_of_week',
            'recurrence_end_date', 'icon', 'color', 'video_thumbnail',
            'display_image', 'recurrence_summary', 'can_edit',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']
        extra_kwargs = {
            'author_name': {'required': False},
            'event_location': {'required': False},
        }

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Event title is required.")
        return value

    def validate_excerpt(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Event description is required.")
        return value

    def validate_image_url(self, value):
        return MediaStorageService.resolve_url(EVENT_IMAGES, value)

    def validate(self, attrs):
        instance = self.instance
        if instance is not None and 'church' in attrs and attrs['church'] != instance.church:
            raise serializers.ValidationError(
                {'church': "An event cannot be moved to another church."})

        def current(name):
            if name in attrs:
                return attrs[name]
            return getattr(instance, name, None)

        if current('is_recurring'):
            if not current('recurrence_type'):
                attrs['recurrence_type'] = 'weekly'
            if not current('recurrence_interval'):
                attrs['recurrence_interval'] = 1
            time = current('time')
            end_date = current('recurrence_end_date')
            if time and end_date and end_date < time:
                raise serializers.ValidationError(
                    {'recurrence_end_date': "The recurrence must end after the event starts."})
            if current('recurrence_type') == 'weekly' and not current('recurrence_days_of_week') and time:
                attrs['recurrence_days_of_week'] = [sunday_weekday(timezone.localtime(time).date())]
        return attrs

    def get_icon(self, obj):
        return event_icon_and_color(obj.title)['icon']

    def get_color(self, obj):
        return event_icon_and_color(obj.title)['color']

    @extend_schema_field(serializers.URLField(allow_null=True))
    def get_video_thumbnail(self, obj):
        return video_thumbnail(obj.video_link)

    def get_display_image(self, obj):
        return image_url_or_placeholder(obj.image_url)

    def get_recurrence_summary(self, obj):
        return describe_recurrence(obj)

    @extend_schema_field(serializers.BooleanField())
    def get_can_edit(self, obj):
        request = self.context.get('request')
        return bool(request) and obj.can_edit(request.user)


class CalendarEntrySerializer(serializers.Serializer):
    """One occurrence of an event on a calendar day."""
    starts_at = serializers.DateTimeField()
    event = ChurchEventSerializer()


class CalendarDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    day_of_month = serializers.IntegerField()
    day_of_week = serializers.IntegerField(help_text="0 = Sunday")
    is_current_month = serializers.BooleanField()
    is_today = serializers.BooleanField()
    events = CalendarEntrySerializer(many=True)


class CalendarQuerySerializer(serializers.Serializer):
    church = serializers.UUIDField()
    year = serializers.IntegerField(min_value=1, max_value=9999)
    month = serializers.IntegerField(min_value=1, max_value=12)


class DayQuerySerializer(serializers.Serializer):
    church = serializers.UUIDField()
    date = serializers.DateField()
