"""
Serializers for the rosary app.
"""

from rest_framework import serializers

from .constants import MYSTERY_CHOICES, VOICE_CHOICES, INTRODUCTION
from .models import PrayerSession, RosarySettings


class MysterySerializer(serializers.Serializer):
    key = serializers.CharField()
    name = serializers.CharField()
    short_name = serializers.CharField()
    description = serializers.CharField()
    color = serializers.CharField()
    icon = serializers.CharField()
    mysteries = serializers.SerializerMethodField()

    def get_mysteries(self, obj):
        return [
            {'index': i, 'title': title, 'description': description}
            for i, (title, description) in enumerate(obj['mysteries'], start=1)
        ]


class MysteryOfTheDaySerializer(MysterySerializer):
    date = serializers.DateField()
    audio_url = serializers.CharField()


class PrayerSessionSerializer(serializers.ModelSerializer):
    mystery_name = serializers.CharField(source='get_mystery_display', read_only=True)

    class Meta:
        model = PrayerSession
        fields = [
            'id', 'mystery', 'mystery_name', 'prayed_at', 'duration_minutes',
            'intention', 'created_at',
        ]
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {'prayed_at': {'required': False}}


class ChartPointSerializer(serializers.Serializer):
    label = serializers.CharField()
    count = serializers.IntegerField()


class DistributionSerializer(serializers.Serializer):
    key = serializers.CharField()
    name = serializers.CharField()
    count = serializers.IntegerField()
    color = serializers.CharField()


class PrayerStatisticsSerializer(serializers.Serializer):
    streak_days = serializers.IntegerField()
    longest_streak = serializers.IntegerField()
    total_prayers = serializers.IntegerField()
    total_prayer_time = serializers.IntegerField(help_text="Minutes")
    total_prayer_time_display = serializers.CharField()
    last_prayed = serializers.DateTimeField(allow_null=True)
    streak_history = serializers.ListField(child=serializers.IntegerField())
    weekly = ChartPointSerializer(many=True)
    monthly = ChartPointSerializer(many=True)
    mystery_distribution = DistributionSerializer(many=True)


class PrayerHistoryImportSerializer(serializers.Serializer):
    """
    Client statistics blob. Only ``prayerHistory`` is imported; the
    counters are accepted and ignored.
    """

    prayerHistory = serializers.ListField(child=serializers.DictField(), required=False)
    prayerStatistics = serializers.DictField(required=False)


class ImportResultSerializer(serializers.Serializer):
    imported = serializers.IntegerField()
    statistics = PrayerStatisticsSerializer()


class RosarySettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = RosarySettings
        fields = [
            'voice_guide', 'duration', 'language', 'theme', 'auto_play_next',
            'show_images', 'text_size', 'vibration_enabled', 'allow_screen_dimming',
            'background_ambience', 'reminders', 'notifications_enabled', 'updated_at',
        ]
        read_only_fields = ['updated_at']


class AudioTrackQuerySerializer(serializers.Serializer):
    mystery = serializers.ChoiceField(choices=MYSTERY_CHOICES + [(INTRODUCTION, 'Introduction')])
    voice = serializers.ChoiceField(choices=VOICE_CHOICES, required=False)


class AudioTrackSerializer(serializers.Serializer):
    mystery = serializers.CharField()
    voice = serializers.CharField()
    url = serializers.CharField()


class VoiceSwapSerializer(serializers.Serializer):
    mystery = serializers.ChoiceField(choices=MYSTERY_CHOICES + [(INTRODUCTION, 'Introduction')])
    voice = serializers.ChoiceField(choices=VOICE_CHOICES)
    position_ms = serializers.IntegerField(min_value=0)
    duration_ms = serializers.IntegerField(min_value=1)
    playing = serializers.BooleanField(default=False)


class VoiceSwapResultSerializer(AudioTrackSerializer):
    resume_fraction = serializers.FloatField()
    resume_percentage = serializers.FloatField()
    resume_playing = serializers.BooleanField()
