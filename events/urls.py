"""
Events app URL configuration.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ChurchEventViewSet

router = DefaultRouter()
router.register(r'events', ChurchEventViewSet, basename='event')

app_name = 'events'

urlpatterns = [
    path('', include(router.urls)),
]
