"""
Authentication models for Saint Central.

The ``User`` model backs the ``users`` table that every other app points at:
church memberships, events, feed posts, comments, likes, friendships and
rosary prayer sessions.
"""

import uuid

from django.contrib.auth.models import AbstractUser, UserManager
from django.core.validators import EmailValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
import structlog

logger = structlog.get_logger(__name__)


class EmailUserManager(UserManager):
    """
    Manager that creates users keyed on email.

    A username is still stored for admin compatibility; when none is given
    it is derived from the email address.
    """

    def _create_user(self, username, email, password, **extra_fields):
        email = self.normalize_email(email)
        if not email:
            raise ValueError("The email address must be set.")
        username = username or email
        return super()._create_user(username, email, password, **extra_fields)

    def create_user(self, email=None, password=None, username=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(username, email, password, **extra_fields)

    def create_superuser(self, email=None, password=None, username=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self._create_user(username, email, password, **extra_fields)


class User(AbstractUser):
    """
    Custom User model extending Django's AbstractUser.

    Email is the login field. ``first_name`` and ``last_name`` are shown as
    the author of posts and comments, ``denomination`` is optional profile
    information.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(
        unique=True,
        validators=[EmailValidator()],
        help_text="Required. Enter a valid email address."
    )
    username = models.CharField(
        max_length=150,
        unique=True,
        help_text="Defaults to the email address."
    )
    denomination = models.CharField(
        _('denomination'),
        max_length=100,
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EmailUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['email'], name='users_email_4b85f2_idx'),
            models.Index(fields=['created_at'], name='users_created_6541e8_idx'),
        ]

    def __str__(self):
        return self.email

    @property
    def full_name(self):
        """First and last name, or the email when both are blank."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email
