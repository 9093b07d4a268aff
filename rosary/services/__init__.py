from .audio import audio_track, swap_voice
from .statistics import (
    PrayerStatisticsService,
    current_streak,
    filter_history,
    format_prayer_time,
    longest_streak,
    monthly_counts,
    mystery_distribution,
    streak_history,
    weekly_counts,
)

__all__ = [
    'PrayerStatisticsService',
    'audio_track',
    'current_streak',
    'filter_history',
    'format_prayer_time',
    'longest_streak',
    'monthly_counts',
    'mystery_distribution',
    'streak_history',
    'swap_voice',
    'weekly_counts',
]
