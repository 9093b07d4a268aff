from .feed_service import FeedContext, FeedService, header_title, is_visible
from .friendship_service import FriendshipService
from .group_service import GroupService

__all__ = [
    'FeedContext',
    'FeedService',
    'FriendshipService',
    'GroupService',
    'header_title',
    'is_visible',
]
