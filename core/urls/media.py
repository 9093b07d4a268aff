"""
Media upload URL configuration.
"""

from django.urls import path

from ..views import MediaUploadView

app_name = 'media'

urlpatterns = [
    path('<slug:bucket>/', MediaUploadView.as_view(), name='upload'),
]
