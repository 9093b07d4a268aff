"""
Churches app URL configuration.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import BibleStudyViewSet, ChurchViewSet

router = DefaultRouter()
router.register(r'churches', ChurchViewSet, basename='church')
router.register(r'bible-studies', BibleStudyViewSet, basename='bible-study')

app_name = 'churches'

urlpatterns = [
    path('', include(router.urls)),
]
