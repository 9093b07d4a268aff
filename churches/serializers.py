"""
Church serializers for DRF API endpoints.
"""

from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from authentication.serializers import UserSummarySerializer
from core.storage import BIBLE_IMAGES, CHURCH_IMAGES, MediaStorageService

from .models import BibleStudy, Church, ChurchMember


class ChurchSerializer(serializers.ModelSerializer):
    """Church with its member count and the viewer's role."""

    member_count = serializers.SerializerMethodField()
    my_role = serializers.SerializerMethodField()

    class Meta:
        model = Church
        fields = [
            'id', 'name', 'category', 'description', 'founded',
            'phone', 'email', 'website', 'mass_schedule', 'image',
            'address', 'lat', 'lng', 'member_count', 'my_role',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_image(self, value):
        return MediaStorageService.resolve_url(CHURCH_IMAGES, value) or ''

    @extend_schema_field(serializers.IntegerField())
    def get_member_count(self, obj):
        annotated = getattr(obj, 'member_count', None)
        if annotated is not None:
            return annotated
        return obj.memberships.count()

    @extend_schema_field(serializers.CharField(allow_null=True))
    def get_my_role(self, obj):
        if hasattr(obj, 'my_role'):
            return obj.my_role
        request = self.context.get('request')
        return obj.role_of(request.user) if request else None


class ChurchSummarySerializer(serializers.ModelSerializer):
    """Compact church representation for membership lists."""

    class Meta:
        model = Church
        fields = ['id', 'name', 'category', 'image', 'address']
        read_only_fields = fields


class ChurchMemberSerializer(serializers.ModelSerializer):
    """A church member and their role."""

    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = ChurchMember
        fields = ['id', 'user', 'role', 'joined_at']
        read_only_fields = fields


class MyChurchSerializer(serializers.ModelSerializer):
    """One of the viewer's churches with the viewer's role."""

    church = ChurchSummarySerializer(read_only=True)

    class Meta:
        model = ChurchMember
        fields = ['id', 'church', 'role', 'joined_at']
        read_only_fields = fields


class SetRoleSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    role = serializers.ChoiceField(choices=ChurchMember.ROLE_CHOICES)


class BibleStudySerializer(serializers.ModelSerializer):
    """Bible study session; blank description and leader get defaults."""

    class Meta:
        model = BibleStudy
        fields = [
            'id', 'church', 'date', 'time', 'image', 'created_by',
            'description', 'location', 'is_recurring', 'created_at',
        ]
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {
            'created_by': {'required': False, 'allow_blank': True},
            'description': {'required': False, 'allow_blank': True},
        }

    def validate_image(self, value):
        return MediaStorageService.resolve_url(BIBLE_IMAGES, value) or ''

    def validate(self, attrs):
        # Church cannot be moved once the study exists
        if self.instance is not None and 'church' in attrs \
                and attrs['church'] != self.instance.church:
            raise serializers.ValidationError(
                {'church': "A Bible study cannot be moved to another church."})
        return attrs
