"""
Church event models.

Events belong to a church, may repeat (daily, weekly, monthly or yearly) and
are soft deleted.
"""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
import structlog

logger = structlog.get_logger(__name__)


class ChurchEventQuerySet(models.QuerySet):

    def active(self):
        return self.filter(is_deleted=False)

    def for_church(self, church_id):
        return self.filter(church_id=church_id)


class ChurchEvent(models.Model):
    """
    An event on a church's calendar.

    ``recurrence_days_of_week`` holds weekday numbers with 0 = Sunday and
    is only meaningful for weekly recurrence.
    """

    RECURRENCE_CHOICES = [
        ('daily', _('Daily')),
        ('weekly', _('Weekly')),
        ('monthly', _('Monthly')),
        ('yearly', _('Yearly')),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    church = models.ForeignKey(
        'churches.Church',
        on_delete=models.CASCADE,
        related_name='events',
    )
    title = models.CharField(_('title'), max_length=200)
    excerpt = models.TextField(_('description'))
    image_url = models.CharField(_('image URL'), max_length=500, blank=True, null=True)
    video_link = models.URLField(_('video link'), max_length=500, blank=True, null=True)
    time = models.DateTimeField(_('time'))
    author_name = models.CharField(_('author name'), max_length=200, blank=True)
    event_location = models.CharField(_('location'), max_length=300, blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_events',
    )

    # Recurrence
    is_recurring = models.BooleanField(_('recurring'), default=False)
    recurrence_type = models.CharField(
        _('recurrence type'),
        max_length=10,
        choices=RECURRENCE_CHOICES,
        null=True,
        blank=True,
    )
    recurrence_interval = models.PositiveIntegerField(
        _('recurrence interval'),
        null=True,
        blank=True,
        validators=[MinValueValidator(1)],
    )
    recurrence_days_of_week = models.JSONField(
        _('recurrence days of week'),
        null=True,
        blank=True,
        help_text=_('Weekday numbers, 0 = Sunday ... 6 = Saturday'),
    )
    recurrence_end_date = models.DateTimeField(
        _('recurrence end date'), null=True, blank=True)

    is_deleted = models.BooleanField(default=False)
    deleted_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ChurchEventQuerySet.as_manager()

    class Meta:
        db_table = 'church_events'
        verbose_name = _('Church Event')
        verbose_name_plural = _('Church Events')
        ordering = ['time']
        indexes = [
            models.Index(fields=['church', 'time'], name='church_even_church__5e0a7c_idx'),
            models.Index(fields=['is_deleted'], name='church_even_is_dele_2f4c1d_idx'),
        ]

    def __str__(self):
        return self.title

    def clear_recurrence(self):
        """Drop recurrence fields that do not apply to this event."""
        if not self.is_recurring:
            self.recurrence_type = None
            self.recurrence_interval = None
            self.recurrence_end_date = None
            self.recurrence_days_of_week = None
            return
        if not self.recurrence_interval:
            self.recurrence_interval = 1
        if self.recurrence_type != 'weekly':
            self.recurrence_days_of_week = None

    def save(self, *args, **kwargs):
        self.clear_recurrence()
        super().save(*args, **kwargs)

    def soft_delete(self, user=None):
        self.is_deleted = True
        self.deleted_at = timezone.now()
        self.save(update_fields=['is_deleted', 'deleted_at', 'updated_at'])
        logger.info(
            "Church event deleted",
            event_id=str(self.id),
            church_id=str(self.church_id),
            user_id=str(user.id) if user else None,
        )

    def can_edit(self, user):
        """The creator, or a church admin/owner, may edit or delete."""
        if not user or not user.is_authenticated:
            return False
        if self.created_by_id == user.id:
            return True
        return self.church.is_manager(user)
