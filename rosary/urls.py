"""
Rosary app URL configuration.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views

router = DefaultRouter()
router.register(r'sessions', views.PrayerSessionViewSet, basename='session')

app_name = 'rosary'

urlpatterns = [
    path('mysteries/', views.mysteries_view, name='mysteries'),
    path('today/', views.today_view, name='today'),
    path('options/', views.options_view, name='options'),
    path('settings/', views.RosarySettingsView.as_view(), name='settings'),
    path('settings/reset/', views.reset_settings_view, name='settings-reset'),
    path('audio/', views.audio_track_view, name='audio-track'),
    path('audio/voice-swap/', views.voice_swap_view, name='voice-swap'),
    path('', include(router.urls)),
]
