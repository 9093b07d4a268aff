"""
ASGI config for saint_central project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'saint_central.settings')

application = get_asgi_application()
