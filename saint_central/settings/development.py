"""
Development settings for saint_central project.

This file contains settings specific to local development.
"""

from .base import *

# ============================================================================
# DEBUG & DEVELOPMENT
# ============================================================================

DEBUG = True
ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# Expo dev client and web preview
CORS_ALLOWED_ORIGINS = [
    'http://localhost:8081',
    'http://localhost:19006',
]

# ============================================================================
# CACHE - Development
# ============================================================================

if not config('USE_REDIS', default=False, cast=bool):
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        }
    }

# ============================================================================
# LOGGING - Development
# ============================================================================

LOGGING['loggers']['saint_central']['handlers'] = ['console']
LOGGING['loggers']['performance']['handlers'] = ['console']

# Show SQL when troubleshooting queries
if config('LOG_SQL', default=False, cast=bool):
    LOGGING['loggers']['django.db.backends'] = {
        'handlers': ['console'],
        'level': 'DEBUG',
        'propagate': False,
    }
