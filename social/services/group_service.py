"""
Prayer group membership rules.
"""

from django.db import IntegrityError, transaction
from rest_framework.exceptions import PermissionDenied, ValidationError
import structlog

from core.exceptions import AlreadyMemberError, NotMemberError

from ..models import GroupMember
from .feed_service import FeedService

logger = structlog.get_logger(__name__)


class GroupService:

    @staticmethod
    def _check_friends(user, member_ids):
        """Members can only be added from the acting user's friends."""
        if not member_ids:
            return []
        member_ids = {str(m) for m in member_ids if str(m) != str(user.id)}
        not_friends = member_ids - FeedService.friend_ids(user)
        if not_friends:
            raise ValidationError(
                {'member_ids': "Members can only be added from your friends."})
        return sorted(member_ids)

    @classmethod
    @transaction.atomic
    def create_group(cls, serializer, user, member_ids=None):
        """Create a group; the creator becomes admin, ``member_ids`` become members."""
        member_ids = cls._check_friends(user, member_ids)
        group = serializer.save(created_by=user)
        GroupMember.objects.create(group=group, user=user, role='admin')
        GroupMember.objects.bulk_create([
            GroupMember(group=group, user_id=member_id, role='member')
            for member_id in member_ids
        ])
        logger.info(
            "Group created",
            group_id=str(group.id),
            user_id=str(user.id),
            members=len(member_ids) + 1,
        )
        return group

    @staticmethod
    def join(group, user):
        try:
            with transaction.atomic():
                membership = GroupMember.objects.create(group=group, user=user, role='member')
        except IntegrityError:
            raise AlreadyMemberError("You are already a member of this group.")
        logger.info("Joined group", group_id=str(group.id), user_id=str(user.id))
        return membership

    @staticmethod
    def leave(group, user):
        deleted, _ = GroupMember.objects.filter(group=group, user=user).delete()
        if not deleted:
            raise NotMemberError("You are not a member of this group.")
        logger.info("Left group", group_id=str(group.id), user_id=str(user.id))

    @classmethod
    def add_members(cls, group, acting_user, member_ids):
        if not group.is_admin(acting_user):
            raise PermissionDenied("Only group admins can add members.")
        member_ids = cls._check_friends(acting_user, member_ids)
        existing = {
            str(uid) for uid in group.memberships.values_list('user_id', flat=True)
        }
        new_rows = [
            GroupMember(group=group, user_id=member_id, role='member')
            for member_id in member_ids
            if member_id not in existing
        ]
        GroupMember.objects.bulk_create(new_rows)
        logger.info("Group members added", group_id=str(group.id), added=len(new_rows))
        return len(new_rows)

    @staticmethod
    def remove_members(group, acting_user, member_ids):
        if not group.is_admin(acting_user):
            raise PermissionDenied("Only group admins can remove members.")
        member_ids = {str(m) for m in member_ids or []}
        if str(acting_user.id) in member_ids:
            raise ValidationError({'member_ids': "Use leave to remove yourself."})
        deleted, _ = group.memberships.filter(user_id__in=member_ids).delete()
        logger.info("Group members removed", group_id=str(group.id), removed=deleted)
        return deleted

    @staticmethod
    def groups_for(user):
        return (
            GroupMember.objects.filter(user=user)
            .select_related('group')
            .order_by('group__name')
        )
