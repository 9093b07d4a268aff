"""
Church views: directory, membership and Bible studies.
"""

from django.db.models import Count, OuterRef, Subquery
from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.api_tags import APITags
from core.serializers import MessageResponseSerializer

from .models import BibleStudy, Church, ChurchMember
from .permissions import IsChurchManager, IsChurchOwner
from .serializers import (
    BibleStudySerializer,
    ChurchMemberSerializer,
    ChurchSerializer,
    MyChurchSerializer,
    SetRoleSerializer,
)
from .services import ChurchMembershipService


@extend_schema_view(
    list=extend_schema(
        summary="List churches",
        description="Search churches by name, address or category; filter by category.",
        tags=[APITags.CHURCHES],
    ),
    create=extend_schema(
        summary="Register a church",
        description="Register a new church. The creator becomes its owner.",
        tags=[APITags.CHURCHES],
    ),
    retrieve=extend_schema(
        summary="Get church details",
        description="Church details with member count and the viewer's role.",
        tags=[APITags.CHURCHES],
    ),
    update=extend_schema(
        summary="Update church",
        description="Only church admins and owners can update.",
        tags=[APITags.CHURCHES],
    ),
    partial_update=extend_schema(
        summary="Partially update church",
        description="Only church admins and owners can update.",
        tags=[APITags.CHURCHES],
    ),
    destroy=extend_schema(
        summary="Delete church",
        description="Only the church owner can delete.",
        tags=[APITags.CHURCHES],
    ),
)
class ChurchViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the church directory and memberships.
    """

    serializer_class = ChurchSerializer
    permission_classes = [IsAuthenticated, IsChurchManager]
    filter_backends = [DjangoFilterBackend,
                       filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['category']
    search_fields = ['name', 'address', 'category']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_queryset(self):
        """Churches annotated with member count and the viewer's role."""
        my_role = ChurchMember.objects.filter(
            church=OuterRef('pk'), user=self.request.user
        ).values('role')[:1]
        return Church.objects.annotate(
            member_count=Count('memberships', distinct=True),
            my_role=Subquery(my_role),
        )

    def get_permissions(self):
        if self.action == 'destroy':
            return [IsAuthenticated(), IsChurchOwner()]
        return super().get_permissions()

    def perform_create(self, serializer):
        ChurchMembershipService.register_church(serializer, self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        church = self.get_queryset().get(pk=serializer.instance.pk)
        return Response(self.get_serializer(church).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Join church",
        description="Join a church as a member. Joining twice returns 409.",
        tags=[APITags.CHURCHES],
        request=None,
        responses={201: ChurchMemberSerializer},
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def join(self, request, pk=None):
        church = self.get_object()
        membership = ChurchMembershipService.join(church, request.user)
        return Response(ChurchMemberSerializer(membership).data,
                        status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Leave church",
        description="Leave a church. The owner cannot leave.",
        tags=[APITags.CHURCHES],
        request=None,
        responses={200: MessageResponseSerializer},
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def leave(self, request, pk=None):
        church = self.get_object()
        ChurchMembershipService.leave(church, request.user)
        return Response({'message': "You have left the church."})

    @extend_schema(
        summary="List church members",
        tags=[APITags.CHURCHES],
        responses={200: ChurchMemberSerializer(many=True)},
    )
    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        church = self.get_object()
        memberships = church.memberships.select_related('user').order_by('joined_at')
        page = self.paginate_queryset(memberships)
        if page is not None:
            return self.get_paginated_response(
                ChurchMemberSerializer(page, many=True).data)
        return Response(ChurchMemberSerializer(memberships, many=True).data)

    @extend_schema(
        summary="My churches",
        description="Churches the current user belongs to, with their role.",
        tags=[APITags.CHURCHES],
        responses={200: MyChurchSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def mine(self, request):
        memberships = ChurchMembershipService.memberships_for(request.user)
        return Response(MyChurchSerializer(memberships, many=True).data)

    @extend_schema(
        summary="Change member role",
        description="Change a member's role. Owner only.",
        tags=[APITags.CHURCHES],
        request=SetRoleSerializer,
        responses={200: ChurchMemberSerializer},
    )
    @action(detail=True, methods=['post'], url_path='set-role',
            permission_classes=[IsAuthenticated])
    def set_role(self, request, pk=None):
        church = self.get_object()
        serializer = SetRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        membership = ChurchMembershipService.set_role(
            church,
            request.user,
            serializer.validated_data['user_id'],
            serializer.validated_data['role'],
        )
        return Response(ChurchMemberSerializer(membership).data)


@extend_schema_view(
    list=extend_schema(
        summary="List Bible studies",
        description="Bible studies, newest date first. Filter with `?church=<id>`.",
        tags=[APITags.BIBLE_STUDIES],
    ),
    create=extend_schema(summary="Create Bible study", tags=[APITags.BIBLE_STUDIES]),
    retrieve=extend_schema(summary="Get Bible study", tags=[APITags.BIBLE_STUDIES]),
    update=extend_schema(summary="Update Bible study", tags=[APITags.BIBLE_STUDIES]),
    partial_update=extend_schema(summary="Partially update Bible study", tags=[APITags.BIBLE_STUDIES]),
    destroy=extend_schema(summary="Delete Bible study", tags=[APITags.BIBLE_STUDIES]),
)
class BibleStudyViewSet(viewsets.ModelViewSet):
    """
    ViewSet for church Bible studies. Writes require church admin/owner.
    """

    queryset = BibleStudy.objects.select_related('church')
    serializer_class = BibleStudySerializer
    permission_classes = [IsAuthenticated, IsChurchManager]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['church', 'is_recurring']

    def get_queryset(self):
        return super().get_queryset().order_by('-date', '-created_at')

    def perform_create(self, serializer):
        church = serializer.validated_data['church']
        if not church.is_manager(self.request.user):
            raise PermissionDenied(IsChurchManager.message)
        serializer.save()
