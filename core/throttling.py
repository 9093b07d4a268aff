"""
Throttling classes for the Saint Central platform.

Implements rate limiting to prevent spam and abuse on write-heavy endpoints.
Rates live in REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] under each scope.
"""

from rest_framework.throttling import UserRateThrottle, AnonRateThrottle


class RegistrationThrottle(AnonRateThrottle):
    """Throttle for account registration."""
    scope = 'registration'


class PostCreateThrottle(UserRateThrottle):
    """Throttle for creating feed intentions and culture posts."""
    scope = 'post_create'


class CommentCreateThrottle(UserRateThrottle):
    """Throttle for creating comments."""
    scope = 'comment_create'


class LikeToggleThrottle(UserRateThrottle):
    """Throttle for liking and unliking."""
    scope = 'like_toggle'


class UploadThrottle(UserRateThrottle):
    """Throttle for image uploads into storage buckets."""
    scope = 'upload'


class BurstProtectionThrottle(UserRateThrottle):
    """
    Short burst protection.

    Prevents rapid-fire spam attacks.
    """
    scope = 'burst'
