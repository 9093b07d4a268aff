"""
Serializers for the social app.
"""

from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from authentication.serializers import UserSummarySerializer

from .models import Comment, CulturePost, Friendship, Group, GroupMember, Intention
from .utils import format_number, parse_selected_groups

User = get_user_model()


class EngagementFieldsMixin(serializers.Serializer):
    """Counts and like state from FeedService.annotate, with query fallbacks."""

    likes_count = serializers.SerializerMethodField()
    comments_count = serializers.SerializerMethodField()
    is_liked = serializers.SerializerMethodField()
    likes_display = serializers.SerializerMethodField()
    comments_display = serializers.SerializerMethodField()

    @extend_schema_field(serializers.IntegerField())
    def get_likes_count(self, obj):
        if hasattr(obj, 'likes_count'):
            return obj.likes_count
        return obj.likes.count()

    @extend_schema_field(serializers.IntegerField())
    def get_comments_count(self, obj):
        if hasattr(obj, 'comments_count'):
            return obj.comments_count
        return obj.comments.count()

    @extend_schema_field(serializers.BooleanField())
    def get_is_liked(self, obj):
        if hasattr(obj, 'is_liked'):
            return obj.is_liked
        request = self.context.get('request')
        if not request or not request.user.is_authenticated:
            return False
        return obj.likes.filter(user=request.user).exists()

    @extend_schema_field(serializers.CharField())
    def get_likes_display(self, obj):
        return format_number(self.get_likes_count(obj))

    @extend_schema_field(serializers.CharField())
    def get_comments_display(self, obj):
        return format_number(self.get_comments_count(obj))


class SelectedGroupsField(serializers.Field):
    """List of group ids; legacy string encodings are accepted on input."""

    def to_representation(self, value):
        return parse_selected_groups(value)

    def to_internal_value(self, data):
        if not isinstance(data, (list, tuple, str)):
            raise serializers.ValidationError("Expected a list of group ids.")
        return parse_selected_groups(data)


class IntentionSerializer(EngagementFieldsMixin, serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    selected_groups = SelectedGroupsField(required=False)
    group_info = serializers.SerializerMethodField()

    class Meta:
        model = Intention
        fields = [
            'id', 'user', 'title', 'description', 'type', 'visibility',
            'selected_groups', 'church', 'created_at', 'updated_at',
            'likes_count', 'comments_count', 'is_liked',
            'likes_display', 'comments_display', 'group_info',
        ]
        read_only_fields = ['id', 'user', 'created_at', 'updated_at']

    def get_group_info(self, obj):
        return getattr(obj, 'group_info', None)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError("Title cannot be blank.")
        return value.strip()

    def validate(self, attrs):
        visibility = attrs.get(
            'visibility', getattr(self.instance, 'visibility', Intention.FRIENDS))
        selected = attrs.get(
            'selected_groups', getattr(self.instance, 'selected_groups', []))
        if visibility == Intention.CERTAIN_GROUPS and not selected:
            raise serializers.ValidationError(
                {'selected_groups': "Select at least one group."})
        if visibility != Intention.CERTAIN_GROUPS:
            attrs['selected_groups'] = []
        return attrs


class CulturePostSerializer(EngagementFieldsMixin, serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = CulturePost
        fields = [
            'id', 'title', 'excerpt', 'image_url', 'video_link', 'category',
            'author_name', 'user', 'created_at',
            'likes_count', 'comments_count', 'is_liked',
            'likes_display', 'comments_display',
        ]
        read_only_fields = ['id', 'user', 'created_at']


class CommentSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'user', 'content', 'created_at', 'updated_at']
        read_only_fields = ['id', 'user', 'created_at', 'updated_at']

    def validate_content(self, value):
        if not value or not value.strip():
            raise serializers.ValidationError("Comment cannot be blank.")
        return value.strip()


class LikeToggleResponseSerializer(serializers.Serializer):
    liked = serializers.BooleanField()
    likes_count = serializers.IntegerField()


class FriendshipSerializer(serializers.ModelSerializer):
    """A friendship row, shown from the viewer's side."""

    friend = serializers.SerializerMethodField()
    direction = serializers.SerializerMethodField()

    class Meta:
        model = Friendship
        fields = ['id', 'friend', 'status', 'direction', 'created_at']
        read_only_fields = fields

    def _viewer(self):
        request = self.context.get('request')
        return request.user if request else None

    @extend_schema_field(UserSummarySerializer)
    def get_friend(self, obj):
        viewer = self._viewer()
        other = obj.other(viewer) if viewer else obj.user_2
        return UserSummarySerializer(other).data

    @extend_schema_field(serializers.ChoiceField(choices=['incoming', 'outgoing']))
    def get_direction(self, obj):
        viewer = self._viewer()
        return 'outgoing' if viewer and obj.user_1_id == viewer.id else 'incoming'


class FriendRequestSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()


class FriendRequestsResponseSerializer(serializers.Serializer):
    incoming = FriendshipSerializer(many=True)
    outgoing = FriendshipSerializer(many=True)


class GroupMemberSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = GroupMember
        fields = ['id', 'user', 'role', 'joined_at']
        read_only_fields = fields


class GroupSerializer(serializers.ModelSerializer):
    member_ids = serializers.ListField(
        child=serializers.UUIDField(),
        write_only=True,
        required=False,
        help_text="Friends to add as members on creation",
    )
    member_count = serializers.SerializerMethodField()
    my_role = serializers.SerializerMethodField()

    class Meta:
        model = Group
        fields = [
            'id', 'name', 'description', 'church', 'created_by', 'created_at',
            'member_ids', 'member_count', 'my_role',
        ]
        read_only_fields = ['id', 'created_by', 'created_at']

    def validate_name(self, value):
        name = value.strip()
        if not name:
            raise serializers.ValidationError("Group name cannot be blank.")
        duplicates = Group.objects.filter(name__iexact=name)
        if self.instance is not None:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise serializers.ValidationError("A group with that name already exists.")
        return name

    @extend_schema_field(serializers.IntegerField())
    def get_member_count(self, obj):
        if hasattr(obj, 'member_count'):
            return obj.member_count
        return obj.memberships.count()

    @extend_schema_field(serializers.CharField(allow_null=True))
    def get_my_role(self, obj):
        if hasattr(obj, 'my_role'):
            return obj.my_role
        request = self.context.get('request')
        if not request:
            return None
        return obj.role_of(request.user)

    def create(self, validated_data):
        validated_data.pop('member_ids', None)
        return super().create(validated_data)

    def update(self, instance, validated_data):
        validated_data.pop('member_ids', None)
        return super().update(instance, validated_data)


class GroupMembersUpdateSerializer(serializers.Serializer):
    member_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
