"""
Serializers for Saint Central authentication.
"""

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

User = get_user_model()


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Create an account from email and password.

    Accepts ``confirmPassword`` as an alias of ``password_confirm`` for the
    mobile client.
    """
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        max_length=128,
        help_text="Password must be at least 8 characters long"
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=False,
        help_text="Must match password field"
    )
    confirmPassword = serializers.CharField(
        write_only=True,
        required=False,
        help_text="Alternative field name for password confirmation"
    )

    class Meta:
        model = User
        fields = (
            'email', 'password', 'password_confirm', 'confirmPassword',
            'first_name', 'last_name', 'denomination',
        )
        extra_kwargs = {
            'email': {'required': True},
        }

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError(
                "An account with this email already exists.")
        return value

    def validate(self, attrs):
        password = attrs.get('password')
        password_confirm = attrs.pop('password_confirm', None) or attrs.pop('confirmPassword', None)
        attrs.pop('confirmPassword', None)

        if password_confirm is not None and password != password_confirm:
            raise serializers.ValidationError({
                'password_confirm': "Passwords do not match"
            })

        try:
            validate_password(password, user=User(email=attrs.get('email', '')))
        except ValidationError as e:
            raise serializers.ValidationError({'password': e.messages})

        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class UserSerializer(serializers.ModelSerializer):
    """The signed-in user's own profile."""
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = (
            'id', 'email', 'first_name', 'last_name', 'full_name',
            'denomination', 'date_joined',
        )
        read_only_fields = ('id', 'email', 'date_joined')


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Public author summary embedded in posts, comments and member lists.
    """
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = ('id', 'first_name', 'last_name', 'full_name')
        read_only_fields = fields


class AuthResponseSerializer(serializers.Serializer):
    """
    Serializer for registration response with tokens.
    """
    access = serializers.CharField(
        help_text="JWT access token for API authentication"
    )
    refresh = serializers.CharField(
        help_text="JWT refresh token for token renewal"
    )
    user = serializers.SerializerMethodField()

    @extend_schema_field(UserSerializer)
    def get_user(self, obj):
        return UserSerializer(obj['user']).data
