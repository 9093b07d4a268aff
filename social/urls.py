"""
Social app URL configuration.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    CommentViewSet,
    CulturePostViewSet,
    FeedViewSet,
    FriendshipViewSet,
    GroupViewSet,
    IntentionViewSet,
)

router = DefaultRouter()
router.register(r'feed', FeedViewSet, basename='feed')
router.register(r'intentions', IntentionViewSet, basename='intention')
router.register(r'culture-posts', CulturePostViewSet, basename='culture-post')
router.register(r'comments', CommentViewSet, basename='comment')
router.register(r'friends', FriendshipViewSet, basename='friendship')
router.register(r'groups', GroupViewSet, basename='group')

app_name = 'social'

urlpatterns = [
    path('', include(router.urls)),
]
