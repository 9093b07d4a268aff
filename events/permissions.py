"""
Permission classes for church events.
"""

from rest_framework import permissions


class CanEditEvent(permissions.BasePermission):
    """
    - Read: any authenticated user
    - Update/Delete: the event creator or a church admin/owner
    """

    message = "Only the event creator or church admins and owners can change this event."

    def has_permission(self, request, view):
        return request.user and request.user.is_authenticated

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.can_edit(request.user)
