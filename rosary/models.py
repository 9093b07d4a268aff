"""
Rosary models: per-user prayer settings and completed prayer sessions.
"""

import uuid

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
import structlog

from .constants import (
    DEFAULT_SETTINGS,
    DURATION_CHOICES,
    LANGUAGE_CHOICES,
    MYSTERY_CHOICES,
    THEME_CHOICES,
    VOICE_CHOICES,
)

logger = structlog.get_logger(__name__)


class RosarySettings(models.Model):
    """
    Prayer preferences for one user. Created with defaults on first read.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='rosary_settings',
    )
    voice_guide = models.CharField(
        _('voice guide'), max_length=20, choices=VOICE_CHOICES,
        default=DEFAULT_SETTINGS['voice_guide'])
    duration = models.CharField(
        _('audio duration'), max_length=10, choices=DURATION_CHOICES,
        default=DEFAULT_SETTINGS['duration'])
    language = models.CharField(
        _('language'), max_length=5, choices=LANGUAGE_CHOICES,
        default=DEFAULT_SETTINGS['language'])
    theme = models.CharField(
        _('theme'), max_length=20, choices=THEME_CHOICES,
        default=DEFAULT_SETTINGS['theme'])
    auto_play_next = models.BooleanField(default=DEFAULT_SETTINGS['auto_play_next'])
    show_images = models.BooleanField(default=DEFAULT_SETTINGS['show_images'])
    text_size = models.PositiveSmallIntegerField(
        default=DEFAULT_SETTINGS['text_size'],
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    vibration_enabled = models.BooleanField(default=DEFAULT_SETTINGS['vibration_enabled'])
    allow_screen_dimming = models.BooleanField(default=DEFAULT_SETTINGS['allow_screen_dimming'])
    background_ambience = models.BooleanField(default=DEFAULT_SETTINGS['background_ambience'])
    reminders = models.BooleanField(default=DEFAULT_SETTINGS['reminders'])
    notifications_enabled = models.BooleanField(default=DEFAULT_SETTINGS['notifications_enabled'])
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'rosary_settings'
        verbose_name = _('Rosary Settings')
        verbose_name_plural = _('Rosary Settings')

    def __str__(self):
        return f"Rosary settings for {self.user_id}"

    @classmethod
    def for_user(cls, user):
        settings_obj, _ = cls.objects.get_or_create(user=user)
        return settings_obj

    def reset(self):
        """Restore every preference to its default."""
        for field, value in DEFAULT_SETTINGS.items():
            setattr(self, field, value)
        self.save()
        logger.info("Rosary settings reset", user_id=str(self.user_id))


class PrayerSession(models.Model):
    """
    A completed rosary prayer.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='prayer_sessions',
    )
    mystery = models.CharField(_('mystery'), max_length=10, choices=MYSTERY_CHOICES)
    prayed_at = models.DateTimeField(_('prayed at'), default=timezone.now)
    duration_minutes = models.PositiveIntegerField(_('duration (minutes)'), default=0)
    intention = models.TextField(_('intention'), blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'prayer_sessions'
        verbose_name = _('Prayer Session')
        verbose_name_plural = _('Prayer Sessions')
        ordering = ['-prayed_at']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'mystery', 'prayed_at'], name='unique_prayer_session'),
        ]
        indexes = [
            models.Index(fields=['user', '-prayed_at'], name='prayer_sess_user_id_4e1a9c_idx'),
        ]

    def __str__(self):
        return f"{self.get_mystery_display()} on {self.prayed_at:%Y-%m-%d}"
