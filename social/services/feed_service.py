"""
Community feed service.

Builds the intention feed for a viewer. Visibility depends on the author's
chosen audience, the viewer's accepted friends and the prayer groups the
two share. The queryset is narrowed in the database to candidate authors
and the visibility rules are then applied per post.
"""

from dataclasses import dataclass, field

from django.contrib.contenttypes.models import ContentType
from django.db.models import Count, Exists, OuterRef, Q
import structlog

from ..models import Friendship, GroupMember, Intention, Like
from ..utils import parse_selected_groups

logger = structlog.get_logger(__name__)

FEED_FILTERS = ('all', 'mine', 'friends', 'groups')

HEADER_TITLES = {
    'all': 'Community',
    'mine': 'My Posts',
    'friends': 'Friends',
    'groups': 'Groups',
}


def header_title(feed_filter):
    return HEADER_TITLES.get(feed_filter, HEADER_TITLES['all'])


@dataclass
class FeedContext:
    """Everything about the viewer the visibility rules need."""

    viewer_id: str
    friend_ids: set = field(default_factory=set)
    # group id -> set of member user ids, for the viewer's groups
    group_members: dict = field(default_factory=dict)
    # viewer's groups in join order: [(group id, group name)]
    groups: list = field(default_factory=list)

    @property
    def group_ids(self):
        return set(self.group_members)

    def is_friend(self, user_id):
        return str(user_id) in self.friend_ids

    def shares_group(self, user_id):
        user_id = str(user_id)
        return any(user_id in members for members in self.group_members.values())

    def first_shared_group(self, user_id):
        user_id = str(user_id)
        for group_id, name in self.groups:
            if user_id in self.group_members[group_id]:
                return {'id': group_id, 'name': name}
        return None


def is_visible(post, ctx, feed_filter='all'):
    """
    Whether ``post`` shows on the viewer's feed under ``feed_filter``.

    ``post`` needs ``user_id``, ``visibility`` and ``selected_groups``.
    """
    author_id = str(post.user_id)
    if author_id == ctx.viewer_id:
        return True
    if feed_filter == 'mine':
        return False

    visibility = post.visibility
    in_selected = bool(
        set(parse_selected_groups(post.selected_groups)) & ctx.group_ids)

    if feed_filter == 'friends':
        return ctx.is_friend(author_id) and visibility in (
            Intention.FRIENDS, Intention.FRIENDS_AND_GROUPS)

    if feed_filter == 'groups':
        if visibility == Intention.CERTAIN_GROUPS:
            return in_selected
        return ctx.shares_group(author_id) and visibility in (
            Intention.FRIENDS_AND_GROUPS, Intention.CERTAIN_GROUPS)

    if visibility == Intention.JUST_ME:
        return False
    if visibility == Intention.FRIENDS:
        return ctx.is_friend(author_id)
    if visibility == Intention.CERTAIN_GROUPS:
        return in_selected
    if visibility == Intention.FRIENDS_AND_GROUPS:
        return ctx.is_friend(author_id) or ctx.shares_group(author_id)
    return False


class FeedService:
    """Feed construction for a viewer."""

    @staticmethod
    def friend_ids(user):
        """Ids of accepted friends, in either direction, as strings."""
        rows = Friendship.objects.involving(user).accepted().values_list(
            'user_1_id', 'user_2_id')
        return {
            str(b) if a == user.id else str(a)
            for a, b in rows
        }

    @classmethod
    def build_context(cls, user):
        memberships = (
            GroupMember.objects.filter(user=user)
            .select_related('group')
            .order_by('joined_at')
        )
        groups = [(str(m.group_id), m.group.name) for m in memberships]
        group_members = {group_id: set() for group_id, _ in groups}
        rows = GroupMember.objects.filter(
            group_id__in=[m.group_id for m in memberships]
        ).values_list('group_id', 'user_id')
        for group_id, user_id in rows:
            group_members[str(group_id)].add(str(user_id))

        return FeedContext(
            viewer_id=str(user.id),
            friend_ids=cls.friend_ids(user),
            group_members=group_members,
            groups=groups,
        )

    @staticmethod
    def annotate(queryset, user):
        """Add ``likes_count``, ``comments_count`` and ``is_liked``."""
        content_type = ContentType.objects.get_for_model(queryset.model)
        liked = Like.objects.filter(
            content_type=content_type, object_id=OuterRef('pk'), user=user)
        return queryset.annotate(
            likes_count=Count('likes', distinct=True),
            comments_count=Count('comments', distinct=True),
            is_liked=Exists(liked),
        )

    @staticmethod
    def _group_posts(ctx):
        """
        "Certain Groups" intentions whose selection may name one of the
        viewer's groups. Matched on the stored text so legacy string
        selections are caught too; ``is_visible`` makes the final call.
        """
        if not ctx.group_ids:
            return Q(pk__in=[])
        selected = Q()
        for group_id in ctx.group_ids:
            selected |= Q(selected_groups__icontains=group_id)
        return Q(visibility=Intention.CERTAIN_GROUPS) & selected

    @classmethod
    def get_feed(cls, user, feed_filter='all', post_type=None, church=None):
        """
        Intentions visible to ``user``, newest first.

        ``church`` narrows the feed to intentions shared with that church.
        Each returned intention carries the engagement annotations and a
        ``group_info`` attribute (the first group shared with the author,
        or None).
        """
        if feed_filter not in FEED_FILTERS:
            feed_filter = 'all'
        ctx = cls.build_context(user)

        queryset = Intention.objects.select_related('user')
        if church is not None:
            queryset = queryset.filter(church=church)
        if feed_filter == 'mine':
            queryset = queryset.filter(user=user)
        else:
            co_members = set().union(*ctx.group_members.values()) if ctx.group_members else set()
            candidates = {ctx.viewer_id} | ctx.friend_ids | co_members
            queryset = queryset.filter(Q(user_id__in=candidates) | cls._group_posts(ctx))
        if post_type:
            queryset = queryset.filter(type=post_type)
        queryset = cls.annotate(queryset, user).order_by('-created_at')

        posts = [post for post in queryset if is_visible(post, ctx, feed_filter)]
        for post in posts:
            post.group_info = cls._group_info(post, ctx, feed_filter)

        logger.debug(
            "Feed built",
            user_id=ctx.viewer_id,
            filter=feed_filter,
            type=post_type,
            church_id=str(church.pk) if church is not None else None,
            count=len(posts),
        )
        return posts

    @staticmethod
    def _group_info(post, ctx, feed_filter):
        if not ctx.groups:
            return None
        author_id = str(post.user_id)
        if author_id == ctx.viewer_id:
            return None
        if feed_filter == 'groups' or not ctx.is_friend(author_id):
            return ctx.first_shared_group(author_id)
        return None

    @classmethod
    def can_view(cls, user, intention):
        return is_visible(intention, cls.build_context(user))
