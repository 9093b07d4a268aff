"""
Membership service for churches.

Registering, joining and leaving churches and changing member roles.
Views call into this module so the membership rules live in one place.
"""

from django.db import IntegrityError, transaction
from rest_framework.exceptions import PermissionDenied, ValidationError
import structlog

from core.exceptions import AlreadyMemberError, NotMemberError

from .models import Church, ChurchMember

logger = structlog.get_logger(__name__)


class ChurchMembershipService:
    """Membership operations on churches."""

    @classmethod
    @transaction.atomic
    def register_church(cls, serializer, user):
        """Create a church from a validated serializer; the creator becomes owner."""
        church = serializer.save(created_by=user)
        ChurchMember.objects.create(church=church, user=user, role='owner')
        logger.info("Church registered", church_id=str(church.id), user_id=str(user.id))
        return church

    @classmethod
    def join(cls, church, user):
        """
        Add ``user`` to ``church`` as a member.

        Raises:
            AlreadyMemberError: the user already has a membership row.
        """
        if ChurchMember.objects.filter(church=church, user=user).exists():
            raise AlreadyMemberError("You are already a member of this church.")

        try:
            with transaction.atomic():
                membership = ChurchMember.objects.create(
                    church=church, user=user, role='member')
        except IntegrityError:
            # Concurrent join for the same pair
            raise AlreadyMemberError("You are already a member of this church.")

        logger.info("Joined church", church_id=str(church.id), user_id=str(user.id))
        return membership

    @classmethod
    def leave(cls, church, user):
        """Remove the user's membership. Owners cannot leave their church."""
        membership = ChurchMember.objects.filter(church=church, user=user).first()
        if membership is None:
            raise NotMemberError("You are not a member of this church.")
        if membership.role == 'owner':
            raise ValidationError(
                {'detail': "The church owner cannot leave the church."})

        membership.delete()
        logger.info("Left church", church_id=str(church.id), user_id=str(user.id))

    @classmethod
    def set_role(cls, church, acting_user, member_user_id, role):
        """Change a member's role. Only the church owner may do this."""
        if church.role_of(acting_user) != 'owner':
            raise PermissionDenied("Only the church owner can change member roles.")

        valid_roles = dict(ChurchMember.ROLE_CHOICES)
        if role not in valid_roles:
            raise ValidationError({'role': f"Invalid role '{role}'."})

        membership = ChurchMember.objects.filter(
            church=church, user_id=member_user_id).first()
        if membership is None:
            raise NotMemberError("That user is not a member of this church.")
        if membership.user_id == acting_user.id and role != 'owner':
            raise ValidationError(
                {'role': "The owner cannot demote themselves."})

        membership.role = role
        membership.save(update_fields=['role'])
        logger.info(
            "Church member role changed",
            church_id=str(church.id),
            member_id=str(member_user_id),
            role=role,
            changed_by=str(acting_user.id),
        )
        return membership

    @staticmethod
    def memberships_for(user):
        """The user's church memberships, ordered by church name."""
        return (
            ChurchMember.objects.filter(user=user)
            .select_related('church')
            .order_by('church__name')
        )
