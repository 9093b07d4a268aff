"""
Social models for Saint Central.

Friendships, prayer groups, intentions (the community feed), culture posts,
and the comments and likes that attach to intentions and culture posts
through the contenttypes framework.
"""

import uuid

from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey, GenericRelation
from django.contrib.contenttypes.models import ContentType
from django.core.validators import MinLengthValidator
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

User = settings.AUTH_USER_MODEL


class Group(models.Model):
    """
    A prayer group. The creator is its first admin member.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(_('group name'), max_length=100)
    description = models.TextField(_('description'), blank=True)
    church = models.ForeignKey(
        'churches.Church',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='groups',
    )
    created_by = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_prayer_groups',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'groups'
        verbose_name = _('Group')
        verbose_name_plural = _('Groups')
        ordering = ['name']

    def __str__(self):
        return self.name

    def role_of(self, user):
        return (
            self.memberships.filter(user=user)
            .values_list('role', flat=True)
            .first()
        )

    def is_admin(self, user):
        return self.role_of(user) == 'admin'


class GroupMember(models.Model):
    """
    Membership of a user in a prayer group.
    """

    ROLE_CHOICES = [
        ('admin', _('Admin')),
        ('member', _('Member')),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey(Group, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='prayer_group_memberships')
    role = models.CharField(_('role'), max_length=20, choices=ROLE_CHOICES, default='member')
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'group_members'
        verbose_name = _('Group Member')
        verbose_name_plural = _('Group Members')
        ordering = ['joined_at']
        constraints = [
            models.UniqueConstraint(fields=['group', 'user'], name='unique_group_membership'),
        ]

    def __str__(self):
        return f"{self.user_id} in {self.group.name}"


class FriendshipQuerySet(models.QuerySet):

    def involving(self, user):
        return self.filter(Q(user_1=user) | Q(user_2=user))

    def between(self, user_a, user_b):
        return self.filter(
            Q(user_1=user_a, user_2=user_b) | Q(user_1=user_b, user_2=user_a))

    def accepted(self):
        return self.filter(status=Friendship.ACCEPTED)

    def pending(self):
        return self.filter(status=Friendship.PENDING)


class Friendship(models.Model):
    """
    A friend request from ``user_1`` to ``user_2``.

    The friendship is mutual once ``status`` is accepted.
    """

    PENDING = 'pending'
    ACCEPTED = 'accepted'
    DECLINED = 'declined'
    STATUS_CHOICES = [
        (PENDING, _('Pending')),
        (ACCEPTED, _('Accepted')),
        (DECLINED, _('Declined')),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_1 = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id_1',
        related_name='friend_requests_sent',
        help_text=_('User who sent the request'),
    )
    user_2 = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id_2',
        related_name='friend_requests_received',
        help_text=_('User who received the request'),
    )
    status = models.CharField(_('status'), max_length=10, choices=STATUS_CHOICES, default=PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = FriendshipQuerySet.as_manager()

    class Meta:
        db_table = 'friends'
        verbose_name = _('Friendship')
        verbose_name_plural = _('Friendships')
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user_1', 'user_2'], name='unique_friend_request'),
            models.CheckConstraint(condition=~Q(user_1=models.F('user_2')), name='no_self_friendship'),
        ]

    def __str__(self):
        return f"{self.user_1_id} -> {self.user_2_id} ({self.status})"

    def other(self, user):
        """The participant that is not ``user``."""
        return self.user_2 if self.user_1_id == user.id else self.user_1


class Engageable(models.Model):
    """Abstract base for content that can be liked and commented on."""

    comments = GenericRelation('social.Comment')
    likes = GenericRelation('social.Like')

    class Meta:
        abstract = True


class Intention(Engageable):
    """
    A resolution, prayer or goal shared on the community feed.
    """

    TYPE_CHOICES = [
        ('resolution', _('Resolution')),
        ('prayer', _('Prayer')),
        ('goal', _('Goal')),
    ]

    JUST_ME = 'Just Me'
    FRIENDS = 'Friends'
    CERTAIN_GROUPS = 'Certain Groups'
    FRIENDS_AND_GROUPS = 'Friends & Groups'
    VISIBILITY_CHOICES = [
        (JUST_ME, _('Just Me')),
        (FRIENDS, _('Friends')),
        (CERTAIN_GROUPS, _('Certain Groups')),
        (FRIENDS_AND_GROUPS, _('Friends & Groups')),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='intentions')
    title = models.CharField(_('title'), max_length=200)
    description = models.TextField(_('description'), blank=True)
    type = models.CharField(_('type'), max_length=20, choices=TYPE_CHOICES, default='prayer')
    visibility = models.CharField(
        _('visibility'), max_length=20, choices=VISIBILITY_CHOICES, default=FRIENDS)
    selected_groups = models.JSONField(
        _('selected groups'),
        default=list,
        blank=True,
        help_text=_('Group ids that may see a "Certain Groups" intention'),
    )
    church = models.ForeignKey(
        'churches.Church',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='intentions',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'intentions'
        verbose_name = _('Intention')
        verbose_name_plural = _('Intentions')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', '-created_at'], name='intentions_user_id_8f1c2a_idx'),
            models.Index(fields=['visibility'], name='intentions_visibil_3b7d90_idx'),
        ]

    def __str__(self):
        return self.title


class CulturePost(Engageable):
    """
    A culture or testimony article.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(_('title'), max_length=200)
    excerpt = models.TextField(_('excerpt'))
    image_url = models.CharField(_('image URL'), max_length=500, blank=True, null=True)
    video_link = models.URLField(_('video link'), max_length=500, blank=True, null=True)
    category = models.CharField(_('category'), max_length=100, blank=True)
    author_name = models.CharField(_('author name'), max_length=200, blank=True)
    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='culture_posts',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'culture_posts'
        verbose_name = _('Culture Post')
        verbose_name_plural = _('Culture Posts')
        ordering = ['-created_at']

    def __str__(self):
        return self.title


class Comment(models.Model):
    """
    A comment on an intention or culture post.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='social_comments')
    content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        db_column='commentable_type',
    )
    object_id = models.UUIDField(db_column='commentable_id')
    commentable = GenericForeignKey('content_type', 'object_id')
    content = models.TextField(validators=[MinLengthValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        verbose_name = _('Comment')
        verbose_name_plural = _('Comments')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['content_type', 'object_id'], name='comments_commentable_idx'),
        ]

    def __str__(self):
        return f"Comment by {self.user_id}: {self.content[:50]}"


class Like(models.Model):
    """
    A like on an intention or culture post. One per user per object.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='likes')
    content_type = models.ForeignKey(
        ContentType,
        on_delete=models.CASCADE,
        db_column='likeable_type',
    )
    object_id = models.UUIDField(db_column='likeable_id')
    likeable = GenericForeignKey('content_type', 'object_id')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'likes'
        verbose_name = _('Like')
        verbose_name_plural = _('Likes')
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'content_type', 'object_id'], name='unique_like_per_user'),
        ]
        indexes = [
            models.Index(fields=['content_type', 'object_id'], name='likes_likeable_idx'),
        ]

    def __str__(self):
        return f"Like by {self.user_id} on {self.object_id}"
