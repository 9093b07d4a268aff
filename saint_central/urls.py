"""
URL configuration for the saint_central project.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'),
         name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API Routes
    path('api/v1/auth/', include('authentication.urls')),
    path('api/v1/', include('churches.urls')),
    path('api/v1/', include('events.urls')),
    path('api/v1/social/', include('social.urls')),
    path('api/v1/rosary/', include('rosary.urls')),
    path('api/v1/media/', include('core.urls.media')),
    path('api/v1/health/', include('core.urls.health')),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL,
                          document_root=settings.MEDIA_ROOT)
