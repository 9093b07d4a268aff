"""
Django admin configuration for churches.
"""

from django.contrib import admin

from .models import BibleStudy, Church, ChurchMember


class ChurchMemberInline(admin.TabularInline):
    model = ChurchMember
    extra = 0
    raw_id_fields = ['user']
    readonly_fields = ['joined_at']


@admin.register(Church)
class ChurchAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'address', 'created_at']
    list_filter = ['category']
    search_fields = ['name', 'address', 'category']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [ChurchMemberInline]


@admin.register(ChurchMember)
class ChurchMemberAdmin(admin.ModelAdmin):
    list_display = ['user', 'church', 'role', 'joined_at']
    list_filter = ['role']
    search_fields = ['user__email', 'church__name']
    raw_id_fields = ['user', 'church']


@admin.register(BibleStudy)
class BibleStudyAdmin(admin.ModelAdmin):
    list_display = ['church', 'date', 'time', 'created_by', 'is_recurring']
    list_filter = ['is_recurring', 'date']
    search_fields = ['church__name', 'description', 'created_by']
    date_hierarchy = 'date'
