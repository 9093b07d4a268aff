"""
Unified API Documentation Tags for the Saint Central platform.

This module provides a single source of truth for all API documentation tags
to prevent duplicate sections in the OpenAPI/Swagger documentation.
"""


class APITags:
    """
    Unified API tags for consistent documentation organization.

    Usage:
        @extend_schema(tags=[APITags.CHURCHES])
        def my_view(request):
            pass
    """

    AUTHENTICATION = "Authentication"  # Registration, tokens, current user
    CHURCHES = "Churches"  # Churches, memberships, roles
    BIBLE_STUDIES = "Bible Studies"
    EVENTS = "Events"  # Church events and calendar
    FEED = "Feed"  # Intentions feed, likes, comments
    SOCIAL = "Social"  # Friends and groups
    CULTURE = "Culture & Testimonies"
    ROSARY = "Rosary"  # Mysteries, prayer statistics, settings
    MEDIA = "Media"  # Image uploads
    SYSTEM_HEALTH = "System Health"  # Health checks, status endpoints


TAG_DESCRIPTIONS = {
    APITags.AUTHENTICATION: "User registration, JWT tokens and the current user",
    APITags.CHURCHES: "Church directory, membership and member roles",
    APITags.BIBLE_STUDIES: "Bible study times published by churches",
    APITags.EVENTS: "Church events, recurrence and month calendars",
    APITags.FEED: "Community feed of intentions with likes and comments",
    APITags.SOCIAL: "Friend requests and prayer groups",
    APITags.CULTURE: "Culture and testimony articles",
    APITags.ROSARY: "Guided rosary, prayer statistics and settings",
    APITags.MEDIA: "Image uploads into storage buckets",
    APITags.SYSTEM_HEALTH: "Health checks and system status for load balancers",
}


def get_api_tags_metadata():
    """
    Returns OpenAPI tags metadata for Spectacular configuration.

    Add this to your SPECTACULAR_SETTINGS:
    TAGS = get_api_tags_metadata()
    """
    return [
        {'name': name, 'description': description}
        for name, description in TAG_DESCRIPTIONS.items()
    ]
