"""
Permission classes for churches.

Managing church content requires an ``admin`` or ``owner`` membership.
"""

from rest_framework import permissions


class IsChurchManager(permissions.BasePermission):
    """
    Object permission for a church, or any object with a ``church``.

    - Read: any authenticated user
    - Write: church admin or owner
    """

    message = "Only church admins and owners can perform this action."

    def has_permission(self, request, view):
        return request.user and request.user.is_authenticated

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        church = getattr(obj, 'church', obj)
        return church.is_manager(request.user)


class IsChurchOwner(permissions.BasePermission):
    """Object permission restricted to the church owner."""

    message = "Only the church owner can perform this action."

    def has_permission(self, request, view):
        return request.user and request.user.is_authenticated

    def has_object_permission(self, request, view, obj):
        church = getattr(obj, 'church', obj)
        return church.role_of(request.user) == 'owner'
