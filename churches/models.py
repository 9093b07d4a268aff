"""
Church models for Saint Central.

Churches, their memberships (with the member/admin/owner role that governs
who may manage church content) and scheduled Bible studies.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

MANAGER_ROLES = frozenset({'admin', 'owner'})


def is_manager_role(role):
    """Whether a membership role may manage church content."""
    return bool(role) and role.lower() in MANAGER_ROLES


class Church(models.Model):
    """
    A church listed in the directory.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(_('name'), max_length=200)
    category = models.CharField(
        _('category'),
        max_length=100,
        blank=True,
        help_text=_('Church category, e.g. "Catholic Church"')
    )
    description = models.TextField(_('description'), blank=True)
    founded = models.CharField(_('founded'), max_length=50, blank=True)

    # Contact
    phone = models.CharField(_('phone'), max_length=50, blank=True)
    email = models.EmailField(_('email'), blank=True)
    website = models.URLField(_('website'), blank=True)
    mass_schedule = models.TextField(_('mass schedule'), blank=True)

    # Public URL in the church-images bucket, or an external URL
    image = models.CharField(_('image'), max_length=500, blank=True)

    # Location
    address = models.CharField(_('address'), max_length=300, blank=True)
    lat = models.DecimalField(
        _('latitude'), max_digits=9, decimal_places=6, null=True, blank=True)
    lng = models.DecimalField(
        _('longitude'), max_digits=9, decimal_places=6, null=True, blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_churches',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'churches'
        verbose_name = _('Church')
        verbose_name_plural = _('Churches')
        ordering = ['name']
        indexes = [
            models.Index(fields=['category'], name='churches_categor_3c1f0b_idx'),
            models.Index(fields=['name'], name='churches_name_8d2e41_idx'),
        ]

    def __str__(self):
        return self.name

    def role_of(self, user):
        """Return the user's membership role in this church, or None."""
        if not user or not user.is_authenticated:
            return None
        return (
            self.memberships.filter(user=user)
            .values_list('role', flat=True)
            .first()
        )

    def is_manager(self, user):
        return is_manager_role(self.role_of(user))


class ChurchMember(models.Model):
    """
    Membership of a user in a church.
    """

    ROLE_CHOICES = [
        ('member', _('Member')),
        ('admin', _('Admin')),
        ('owner', _('Owner')),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    church = models.ForeignKey(
        Church,
        on_delete=models.CASCADE,
        related_name='memberships',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='church_memberships',
    )
    role = models.CharField(
        _('role'), max_length=20, choices=ROLE_CHOICES, default='member')
    joined_at = models.DateTimeField(_('joined at'), default=timezone.now)

    class Meta:
        db_table = 'church_members'
        verbose_name = _('Church Member')
        verbose_name_plural = _('Church Members')
        ordering = ['joined_at']
        constraints = [
            models.UniqueConstraint(
                fields=['church', 'user'], name='unique_church_membership'),
        ]

    def __str__(self):
        return f"{self.user.email} in {self.church.name} ({self.role})"

    @property
    def can_manage(self):
        return is_manager_role(self.role)


class BibleStudy(models.Model):
    """
    A scheduled Bible study session at a church.
    """

    DEFAULT_DESCRIPTION = 'Bible Study'
    DEFAULT_LEADER = 'Bible Study Leader'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    church = models.ForeignKey(
        Church,
        on_delete=models.CASCADE,
        related_name='bible_studies',
    )
    date = models.DateField(_('date'))
    time = models.CharField(
        _('time'),
        max_length=50,
        help_text=_('Display time, e.g. "7:00 PM"')
    )
    image = models.CharField(_('image'), max_length=500, blank=True)
    created_by = models.CharField(
        _('leader'),
        max_length=200,
        blank=True,
        default=DEFAULT_LEADER,
    )
    description = models.TextField(
        _('description'), blank=True, default=DEFAULT_DESCRIPTION)
    location = models.CharField(_('location'), max_length=300, blank=True)
    is_recurring = models.BooleanField(_('recurring'), default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'bible_study_times'
        verbose_name = _('Bible Study')
        verbose_name_plural = _('Bible Studies')
        ordering = ['-date']

    def __str__(self):
        return f"{self.description} at {self.church.name} on {self.date}"

    def save(self, *args, **kwargs):
        """Fill blank description and leader with their defaults."""
        if not (self.description or '').strip():
            self.description = self.DEFAULT_DESCRIPTION
        if not (self.created_by or '').strip():
            self.created_by = self.DEFAULT_LEADER
        super().save(*args, **kwargs)
