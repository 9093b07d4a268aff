"""
Django admin configuration for social content.
"""

from django.contrib import admin

from .models import Comment, CulturePost, Friendship, Group, GroupMember, Intention, Like


class GroupMemberInline(admin.TabularInline):
    model = GroupMember
    extra = 0
    raw_id_fields = ['user']
    readonly_fields = ['joined_at']


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ['name', 'church', 'created_by', 'created_at']
    search_fields = ['name', 'description']
    raw_id_fields = ['church', 'created_by']
    inlines = [GroupMemberInline]


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ['user_1', 'user_2', 'status', 'created_at']
    list_filter = ['status']
    search_fields = ['user_1__email', 'user_2__email']
    raw_id_fields = ['user_1', 'user_2']


@admin.register(Intention)
class IntentionAdmin(admin.ModelAdmin):
    list_display = ['title', 'user', 'type', 'visibility', 'created_at']
    list_filter = ['type', 'visibility']
    search_fields = ['title', 'description', 'user__email']
    raw_id_fields = ['user', 'church']
    date_hierarchy = 'created_at'


@admin.register(CulturePost)
class CulturePostAdmin(admin.ModelAdmin):
    list_display = ['title', 'category', 'author_name', 'created_at']
    list_filter = ['category']
    search_fields = ['title', 'excerpt', 'author_name']
    raw_id_fields = ['user']


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ['user', 'content_type', 'object_id', 'created_at']
    list_filter = ['content_type']
    search_fields = ['content', 'user__email']
    raw_id_fields = ['user']


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ['user', 'content_type', 'object_id', 'created_at']
    list_filter = ['content_type']
    raw_id_fields = ['user']
