"""
Authentication URL configuration.
"""

from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views import me_view, register_view

app_name = 'authentication'

urlpatterns = [
    path('register/', register_view, name='register'),
    path('token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('me/', me_view, name='me'),
]
