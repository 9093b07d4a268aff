"""
Permission classes for social content.
"""

from rest_framework import permissions


class IsAuthorOrReadOnly(permissions.BasePermission):
    """
    Only the author (``obj.user``) can change or delete the object.
    """

    message = "You can only modify your own content."

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.user_id == request.user.id


class IsGroupAdminOrReadOnly(permissions.BasePermission):
    message = "Only group admins can perform this action."

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.is_admin(request.user)
