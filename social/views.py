"""
Social views: community feed, intentions, culture posts, comments, likes,
friends and prayer groups.
"""

import logging
import uuid

from django.contrib.contenttypes.models import ContentType
from django.db import IntegrityError, transaction
from django.db.models import Count, OuterRef, Subquery
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import filters, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from churches.models import Church, ChurchMember
from core.api_tags import APITags
from core.serializers import MessageResponseSerializer
from core.throttling import (
    BurstProtectionThrottle,
    CommentCreateThrottle,
    LikeToggleThrottle,
    PostCreateThrottle,
)

from .models import Comment, CulturePost, Friendship, Group, GroupMember, Intention, Like
from .permissions import IsAuthorOrReadOnly, IsGroupAdminOrReadOnly
from .serializers import (
    CommentSerializer,
    CulturePostSerializer,
    FriendRequestSerializer,
    FriendRequestsResponseSerializer,
    FriendshipSerializer,
    GroupMemberSerializer,
    GroupMembersUpdateSerializer,
    GroupSerializer,
    IntentionSerializer,
    LikeToggleResponseSerializer,
)
from .services import FeedService, FriendshipService, GroupService, header_title
from .services.feed_service import FEED_FILTERS

logger = logging.getLogger(__name__)


class EngagementActionsMixin:
    """
    ``like`` and ``comments`` actions for viewsets over engageable content.

    Anyone who can see the item may like it or comment on it; the author
    check of the viewset covers edits and deletes only.
    """

    def get_throttles(self):
        if self.action == 'like':
            return [LikeToggleThrottle()]
        if self.action == 'comments' and self.request.method == 'POST':
            return [CommentCreateThrottle(), BurstProtectionThrottle()]
        if self.action == 'create':
            return [PostCreateThrottle(), BurstProtectionThrottle()]
        return super().get_throttles()

    def _content_type(self):
        return ContentType.objects.get_for_model(self.get_queryset().model)

    @extend_schema(
        summary="Toggle like",
        description="Like the item, or remove the like if already liked.",
        request=None,
        responses={200: LikeToggleResponseSerializer},
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def like(self, request, pk=None):
        obj = self.get_object()
        content_type = self._content_type()
        existing = Like.objects.filter(
            user=request.user, content_type=content_type, object_id=obj.pk)
        if existing.exists():
            existing.delete()
            liked = False
        else:
            try:
                with transaction.atomic():
                    Like.objects.create(
                        user=request.user, content_type=content_type, object_id=obj.pk)
            except IntegrityError:
                # Double tap; the like already exists
                pass
            liked = True

        likes_count = Like.objects.filter(content_type=content_type, object_id=obj.pk).count()
        logger.info(
            f"Like toggled on {content_type.model} {obj.pk}",
            extra={'user_id': str(request.user.id), 'liked': liked},
        )
        return Response({'liked': liked, 'likes_count': likes_count})

    @extend_schema(
        summary="List or add comments",
        description="GET lists comments newest first; POST adds a comment.",
        request=CommentSerializer,
        responses={200: CommentSerializer(many=True), 201: CommentSerializer},
    )
    @action(detail=True, methods=['get', 'post'], permission_classes=[IsAuthenticated])
    def comments(self, request, pk=None):
        obj = self.get_object()
        content_type = self._content_type()

        if request.method == 'POST':
            serializer = CommentSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            serializer.save(user=request.user, content_type=content_type, object_id=obj.pk)
            return Response(serializer.data, status=status.HTTP_201_CREATED)

        comments = (
            Comment.objects.filter(content_type=content_type, object_id=obj.pk)
            .select_related('user')
            .order_by('-created_at')
        )
        page = self.paginate_queryset(comments)
        if page is not None:
            return self.get_paginated_response(CommentSerializer(page, many=True).data)
        return Response(CommentSerializer(comments, many=True).data)


@extend_schema(
    summary="Community feed",
    description=(
        "Intentions visible to the current user, newest first. "
        "`filter` is one of all, mine, friends, groups; `type` narrows by "
        "resolution, prayer or goal; `church` limits the feed to intentions "
        "shared with a church the user belongs to. The response carries a "
        "`title` for the header."
    ),
    tags=[APITags.FEED],
    parameters=[
        OpenApiParameter('filter', OpenApiTypes.STR, enum=list(FEED_FILTERS)),
        OpenApiParameter('type', OpenApiTypes.STR,
                         enum=[choice for choice, _ in Intention.TYPE_CHOICES]),
        OpenApiParameter('church', OpenApiTypes.UUID),
    ],
    responses={200: IntentionSerializer(many=True)},
)
class FeedViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = IntentionSerializer
    permission_classes = [IsAuthenticated]

    def get_church(self):
        church_id = self.request.query_params.get('church')
        if not church_id:
            return None
        try:
            church_id = uuid.UUID(church_id)
        except ValueError:
            raise ValidationError({'church': ["Must be a valid church id."]})
        church = get_object_or_404(Church, pk=church_id)
        if not ChurchMember.objects.filter(church=church, user=self.request.user).exists():
            raise PermissionDenied("Only members of this church can view its intentions.")
        return church

    def list(self, request, *args, **kwargs):
        feed_filter = request.query_params.get('filter', 'all')
        if feed_filter not in FEED_FILTERS:
            feed_filter = 'all'
        posts = FeedService.get_feed(
            request.user,
            feed_filter=feed_filter,
            post_type=request.query_params.get('type') or None,
            church=self.get_church(),
        )

        page = self.paginate_queryset(posts)
        if page is not None:
            response = self.get_paginated_response(self.get_serializer(page, many=True).data)
        else:
            response = Response({'results': self.get_serializer(posts, many=True).data})
        response.data['title'] = header_title(feed_filter)
        response.data['filter'] = feed_filter
        return response


@extend_schema_view(
    list=extend_schema(summary="My intentions", tags=[APITags.FEED]),
    create=extend_schema(summary="Share an intention", tags=[APITags.FEED]),
    retrieve=extend_schema(summary="Get intention", tags=[APITags.FEED]),
    update=extend_schema(summary="Update intention", tags=[APITags.FEED]),
    partial_update=extend_schema(summary="Partially update intention", tags=[APITags.FEED]),
    destroy=extend_schema(summary="Delete intention", tags=[APITags.FEED]),
    like=extend_schema(tags=[APITags.FEED]),
    comments=extend_schema(tags=[APITags.FEED]),
)
class IntentionViewSet(EngagementActionsMixin, viewsets.ModelViewSet):
    """
    Intentions. Listing returns the user's own; detail routes are open to
    anyone the intention is visible to.
    """

    serializer_class = IntentionSerializer
    permission_classes = [IsAuthenticated, IsAuthorOrReadOnly]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['type', 'visibility']

    def get_queryset(self):
        queryset = Intention.objects.select_related('user')
        if self.action == 'list':
            queryset = queryset.filter(user=self.request.user)
        return FeedService.annotate(queryset, self.request.user).order_by('-created_at')

    def get_object(self):
        obj = super().get_object()
        if not FeedService.can_view(self.request.user, obj):
            raise NotFound()
        return obj

    def perform_create(self, serializer):
        intention = serializer.save(user=self.request.user)
        logger.info(
            f"Intention created: {intention.id}",
            extra={'user_id': str(self.request.user.id), 'visibility': intention.visibility},
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        intention = self.get_queryset().get(pk=serializer.instance.pk)
        return Response(self.get_serializer(intention).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    list=extend_schema(
        summary="List culture posts",
        description="Filter by `category`; search title, excerpt and author.",
        tags=[APITags.CULTURE],
    ),
    create=extend_schema(summary="Create culture post", tags=[APITags.CULTURE]),
    retrieve=extend_schema(summary="Get culture post", tags=[APITags.CULTURE]),
    update=extend_schema(summary="Update culture post", tags=[APITags.CULTURE]),
    partial_update=extend_schema(summary="Partially update culture post", tags=[APITags.CULTURE]),
    destroy=extend_schema(summary="Delete culture post", tags=[APITags.CULTURE]),
    like=extend_schema(tags=[APITags.CULTURE]),
    comments=extend_schema(tags=[APITags.CULTURE]),
)
class CulturePostViewSet(EngagementActionsMixin, viewsets.ModelViewSet):
    serializer_class = CulturePostSerializer
    permission_classes = [IsAuthenticated, IsAuthorOrReadOnly]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ['category']
    search_fields = ['title', 'excerpt', 'author_name']

    def get_queryset(self):
        queryset = CulturePost.objects.select_related('user')
        return FeedService.annotate(queryset, self.request.user).order_by('-created_at')

    def perform_create(self, serializer):
        author_name = serializer.validated_data.get('author_name') or self.request.user.full_name
        serializer.save(user=self.request.user, author_name=author_name)


@extend_schema_view(
    destroy=extend_schema(summary="Delete comment", tags=[APITags.SOCIAL]),
)
class CommentViewSet(mixins.DestroyModelMixin, viewsets.GenericViewSet):
    """Comments are listed and created through their post; this deletes your own."""

    serializer_class = CommentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Comment.objects.filter(user=self.request.user)


@extend_schema_view(
    list=extend_schema(
        summary="List friends",
        description="Accepted friendships of the current user.",
        tags=[APITags.SOCIAL],
    ),
    create=extend_schema(
        summary="Send friend request",
        request=FriendRequestSerializer,
        responses={201: FriendshipSerializer},
        tags=[APITags.SOCIAL],
    ),
    destroy=extend_schema(
        summary="Remove friend or cancel request",
        tags=[APITags.SOCIAL],
    ),
)
class FriendshipViewSet(mixins.ListModelMixin, mixins.DestroyModelMixin,
                        viewsets.GenericViewSet):
    serializer_class = FriendshipSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        if self.action == 'list':
            return FriendshipService.friends(self.request.user)
        return Friendship.objects.involving(self.request.user).select_related('user_1', 'user_2')

    def get_throttles(self):
        if self.action == 'create':
            return [BurstProtectionThrottle()]
        return super().get_throttles()

    def create(self, request, *args, **kwargs):
        serializer = FriendRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        friendship = FriendshipService.send_request(
            request.user, serializer.validated_data['user_id'])
        return Response(self.get_serializer(friendship).data, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        FriendshipService.remove(instance, self.request.user)

    @extend_schema(
        summary="Pending friend requests",
        tags=[APITags.SOCIAL],
        responses={200: FriendRequestsResponseSerializer},
    )
    @action(detail=False, methods=['get'])
    def requests(self, request):
        context = self.get_serializer_context()
        return Response({
            'incoming': FriendshipSerializer(
                FriendshipService.incoming(request.user), many=True, context=context).data,
            'outgoing': FriendshipSerializer(
                FriendshipService.outgoing(request.user), many=True, context=context).data,
        })

    @extend_schema(summary="Accept friend request", tags=[APITags.SOCIAL], request=None)
    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        friendship = FriendshipService.accept(self.get_object(), request.user)
        return Response(self.get_serializer(friendship).data)

    @extend_schema(summary="Decline friend request", tags=[APITags.SOCIAL], request=None)
    @action(detail=True, methods=['post'])
    def decline(self, request, pk=None):
        friendship = FriendshipService.decline(self.get_object(), request.user)
        return Response(self.get_serializer(friendship).data)


@extend_schema_view(
    list=extend_schema(
        summary="List groups",
        description="Groups the user belongs to. Pass `?scope=all` to browse every group.",
        tags=[APITags.SOCIAL],
    ),
    create=extend_schema(
        summary="Create group",
        description="The creator becomes admin; `member_ids` (friends) join as members.",
        tags=[APITags.SOCIAL],
    ),
    retrieve=extend_schema(summary="Get group", tags=[APITags.SOCIAL]),
    update=extend_schema(summary="Update group", tags=[APITags.SOCIAL]),
    partial_update=extend_schema(summary="Partially update group", tags=[APITags.SOCIAL]),
    destroy=extend_schema(summary="Delete group", tags=[APITags.SOCIAL]),
)
class GroupViewSet(viewsets.ModelViewSet):
    serializer_class = GroupSerializer
    permission_classes = [IsAuthenticated, IsGroupAdminOrReadOnly]
    filter_backends = [filters.SearchFilter]
    search_fields = ['name', 'description']

    def get_queryset(self):
        user = self.request.user
        my_role = GroupMember.objects.filter(
            group=OuterRef('pk'), user=user).values('role')[:1]
        queryset = Group.objects.annotate(
            member_count=Count('memberships', distinct=True),
            my_role=Subquery(my_role),
        ).order_by('name')
        if self.action == 'list' and self.request.query_params.get('scope') != 'all':
            queryset = queryset.filter(memberships__user=user)
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        group = GroupService.create_group(
            serializer, request.user, serializer.validated_data.get('member_ids'))
        group = self.get_queryset().get(pk=group.pk)
        return Response(self.get_serializer(group).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Join group",
        tags=[APITags.SOCIAL],
        request=None,
        responses={201: GroupMemberSerializer},
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def join(self, request, pk=None):
        membership = GroupService.join(self.get_object(), request.user)
        return Response(GroupMemberSerializer(membership).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Leave group",
        tags=[APITags.SOCIAL],
        request=None,
        responses={200: MessageResponseSerializer},
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def leave(self, request, pk=None):
        GroupService.leave(self.get_object(), request.user)
        return Response({'message': "You have left the group."})

    @extend_schema(
        summary="Group members",
        description=(
            "GET lists members. POST adds friends and DELETE removes members; "
            "both require group admin."
        ),
        tags=[APITags.SOCIAL],
        request=GroupMembersUpdateSerializer,
        responses={200: GroupMemberSerializer(many=True)},
    )
    @action(detail=True, methods=['get', 'post', 'delete'],
            permission_classes=[IsAuthenticated])
    def members(self, request, pk=None):
        group = self.get_object()
        if request.method != 'GET':
            serializer = GroupMembersUpdateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            member_ids = serializer.validated_data['member_ids']
            if request.method == 'POST':
                GroupService.add_members(group, request.user, member_ids)
            else:
                GroupService.remove_members(group, request.user, member_ids)

        memberships = group.memberships.select_related('user').order_by('joined_at')
        return Response(GroupMemberSerializer(memberships, many=True).data)
