"""
Core serializers for common request and response types.
"""

from rest_framework import serializers


class MessageResponseSerializer(serializers.Serializer):
    """Serializer for simple message responses."""
    message = serializers.CharField(help_text="Response message")


class ImageUploadSerializer(serializers.Serializer):
    """Multipart image upload into a storage bucket."""
    file = serializers.FileField(help_text="Image file (jpeg, png, webp or gif)")


class MediaObjectSerializer(serializers.Serializer):
    """Stored media object."""
    bucket = serializers.CharField()
    path = serializers.CharField()
    public_url = serializers.CharField()
