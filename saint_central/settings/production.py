"""
Production settings for saint_central project.

Security hardening, PostgreSQL via DATABASE_URL, WhiteNoise static files
and Sentry error reporting.
"""

import logging

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from .base import *

# ============================================================================
# SECRET KEY VALIDATION
# ============================================================================

if SECRET_KEY.startswith('django-insecure-'):
    raise ValueError(
        "Production SECRET_KEY must not use the default insecure key. "
        "Please set a proper SECRET_KEY environment variable."
    )

if len(SECRET_KEY) < 32:
    raise ValueError(
        "Production SECRET_KEY must be at least 32 characters long for security. "
        f"Current length: {len(SECRET_KEY)}"
    )

# ============================================================================
# MIDDLEWARE - Production
# ============================================================================

MIDDLEWARE.insert(
    MIDDLEWARE.index('django.middleware.security.SecurityMiddleware') + 1,
    'whitenoise.middleware.WhiteNoiseMiddleware',
)

# ============================================================================
# PRODUCTION SECURITY
# ============================================================================

DEBUG = False

SECURE_SSL_REDIRECT = config('SECURE_SSL_REDIRECT', default=True, cast=bool)
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_CONTENT_TYPE_NOSNIFF = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
X_FRAME_OPTIONS = 'DENY'

# ============================================================================
# DATABASE - Production (PostgreSQL)
# ============================================================================

DATABASE_URL = config('DATABASE_URL', default='')

if DATABASE_URL:
    import dj_database_url
    DATABASES = {
        'default': dj_database_url.parse(
            DATABASE_URL,
            conn_max_age=60,
        )
    }
    DATABASES['default']['OPTIONS'] = {
        'sslmode': 'prefer',
    }

# ============================================================================
# STATIC FILES - Production
# ============================================================================

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# ============================================================================
# LOGGING - Production
# ============================================================================

LOGGING['root']['handlers'] = ['structured_console']
LOGGING['loggers']['django']['handlers'] = ['structured_console']

# ============================================================================
# SENTRY
# ============================================================================

SENTRY_DSN = config('SENTRY_DSN', default='')

if SENTRY_DSN:
    sentry_logging = LoggingIntegration(
        level=logging.INFO,
        event_level=logging.ERROR
    )

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[
            DjangoIntegration(
                transaction_style='url',
                middleware_spans=True,
                signals_spans=True,
            ),
            sentry_logging,
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,
        environment=config('SENTRY_ENVIRONMENT', default='production'),
        release=config('RELEASE_SHA', default='unknown'),
    )

# ============================================================================
# API THROTTLING - Production (Strict)
# ============================================================================

REST_FRAMEWORK['DEFAULT_THROTTLE_RATES'] = {
    'anon': '60/hour',
    'user': '1000/hour',
    'registration': '5/hour',
    'post_create': '20/hour',
    'comment_create': '50/hour',
    'like_toggle': '100/hour',
    'upload': '20/hour',
    'burst': '20/min',
}
