"""
Django admin configuration for church events.
"""

from django.contrib import admin

from .models import ChurchEvent


@admin.register(ChurchEvent)
class ChurchEventAdmin(admin.ModelAdmin):
    list_display = ['title', 'church', 'time', 'is_recurring', 'recurrence_type', 'is_deleted']
    list_filter = ['is_recurring', 'recurrence_type', 'is_deleted']
    search_fields = ['title', 'excerpt', 'author_name', 'church__name']
    raw_id_fields = ['church', 'created_by']
    date_hierarchy = 'time'
    readonly_fields = ['created_at', 'updated_at', 'deleted_at']
