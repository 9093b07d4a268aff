"""
Django admin configuration for the rosary app.
"""

from django.contrib import admin

from .models import PrayerSession, RosarySettings


@admin.register(PrayerSession)
class PrayerSessionAdmin(admin.ModelAdmin):
    list_display = ['user', 'mystery', 'prayed_at', 'duration_minutes']
    list_filter = ['mystery']
    search_fields = ['user__email', 'intention']
    raw_id_fields = ['user']
    date_hierarchy = 'prayed_at'


@admin.register(RosarySettings)
class RosarySettingsAdmin(admin.ModelAdmin):
    list_display = ['user', 'voice_guide', 'duration', 'language', 'theme', 'updated_at']
    list_filter = ['voice_guide', 'language', 'theme']
    search_fields = ['user__email']
    raw_id_fields = ['user']
