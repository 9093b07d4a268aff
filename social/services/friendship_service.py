"""
Friend requests and friendships.
"""

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
import structlog

from core.exceptions import ProblemDetailException

from ..models import Friendship

logger = structlog.get_logger(__name__)

User = get_user_model()


class FriendRequestExists(ProblemDetailException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'A friend request already exists between you and this user.'
    default_code = 'friend_request_exists'
    default_title = 'Already Requested'


class FriendshipService:

    @staticmethod
    def send_request(user, friend_id):
        """Send a friend request from ``user`` to ``friend_id``."""
        if str(friend_id) == str(user.id):
            raise ValidationError({'user_id': "You cannot send a friend request to yourself."})
        friend = User.objects.filter(id=friend_id, is_active=True).first()
        if friend is None:
            raise NotFound("User not found.")

        existing = Friendship.objects.between(user, friend)
        if existing.exclude(status=Friendship.DECLINED).exists():
            raise FriendRequestExists()

        try:
            with transaction.atomic():
                existing.filter(status=Friendship.DECLINED).delete()
                friendship = Friendship.objects.create(
                    user_1=user, user_2=friend, status=Friendship.PENDING)
        except IntegrityError:
            raise FriendRequestExists()

        logger.info("Friend request sent", user_id=str(user.id), friend_id=str(friend.id))
        return friendship

    @staticmethod
    def _respond(friendship, user, new_status):
        if friendship.user_2_id != user.id:
            raise PermissionDenied("Only the recipient can respond to a friend request.")
        if friendship.status != Friendship.PENDING:
            raise ValidationError({'detail': "This friend request is no longer pending."})
        friendship.status = new_status
        friendship.save(update_fields=['status', 'updated_at'])
        logger.info(
            "Friend request answered",
            friendship_id=str(friendship.id),
            status=new_status,
        )
        return friendship

    @classmethod
    def accept(cls, friendship, user):
        return cls._respond(friendship, user, Friendship.ACCEPTED)

    @classmethod
    def decline(cls, friendship, user):
        return cls._respond(friendship, user, Friendship.DECLINED)

    @staticmethod
    def remove(friendship, user):
        """Cancel an outgoing request or end a friendship."""
        if user.id not in (friendship.user_1_id, friendship.user_2_id):
            raise PermissionDenied("You are not part of this friendship.")
        if friendship.status == Friendship.PENDING and friendship.user_1_id != user.id:
            raise PermissionDenied("Decline the request instead of cancelling it.")
        logger.info(
            "Friendship removed",
            friendship_id=str(friendship.id),
            status=friendship.status,
            user_id=str(user.id),
        )
        friendship.delete()

    @staticmethod
    def friends(user):
        return (
            Friendship.objects.involving(user).accepted()
            .select_related('user_1', 'user_2')
        )

    @staticmethod
    def incoming(user):
        return Friendship.objects.pending().filter(user_2=user).select_related('user_1', 'user_2')

    @staticmethod
    def outgoing(user):
        return Friendship.objects.pending().filter(user_1=user).select_related('user_1', 'user_2')
