import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
        ('churches', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Group',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, verbose_name='group name')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('church', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='groups', to='churches.church')),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_prayer_groups', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Group',
                'verbose_name_plural': 'Groups',
                'db_table': 'groups',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='GroupMember',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('role', models.CharField(choices=[('admin', 'Admin'), ('member', 'Member')], default='member', max_length=20, verbose_name='role')),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('group', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='social.group')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prayer_group_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Group Member',
                'verbose_name_plural': 'Group Members',
                'db_table': 'group_members',
                'ordering': ['joined_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('group', 'user'), name='unique_group_membership'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Friendship',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('declined', 'Declined')], default='pending', max_length=10, verbose_name='status')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user_1', models.ForeignKey(db_column='user_id_1', help_text='User who sent the request', on_delete=django.db.models.deletion.CASCADE, related_name='friend_requests_sent', to=settings.AUTH_USER_MODEL)),
                ('user_2', models.ForeignKey(db_column='user_id_2', help_text='User who received the request', on_delete=django.db.models.deletion.CASCADE, related_name='friend_requests_received', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Friendship',
                'verbose_name_plural': 'Friendships',
                'db_table': 'friends',
                'ordering': ['-created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('user_1', 'user_2'), name='unique_friend_request'),
                    models.CheckConstraint(condition=models.Q(('user_1', models.F('user_2')), _negated=True), name='no_self_friendship'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Intention',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200, verbose_name='title')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('type', models.CharField(choices=[('resolution', 'Resolution'), ('prayer', 'Prayer'), ('goal', 'Goal')], default='prayer', max_length=20, verbose_name='type')),
                ('visibility', models.CharField(choices=[('Just Me', 'Just Me'), ('Friends', 'Friends'), ('Certain Groups', 'Certain Groups'), ('Friends & Groups', 'Friends & Groups')], default='Friends', max_length=20, verbose_name='visibility')),
                ('selected_groups', models.JSONField(blank=True, default=list, help_text='Group ids that may see a "Certain Groups" intention', verbose_name='selected groups')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('church', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='intentions', to='churches.church')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='intentions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Intention',
                'verbose_name_plural': 'Intentions',
                'db_table': 'intentions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', '-created_at'], name='intentions_user_id_8f1c2a_idx'),
                    models.Index(fields=['visibility'], name='intentions_visibil_3b7d90_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CulturePost',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200, verbose_name='title')),
                ('excerpt', models.TextField(verbose_name='excerpt')),
                ('image_url', models.CharField(blank=True, max_length=500, null=True, verbose_name='image URL')),
                ('video_link', models.URLField(blank=True, max_length=500, null=True, verbose_name='video link')),
                ('category', models.CharField(blank=True, max_length=100, verbose_name='category')),
                ('author_name', models.CharField(blank=True, max_length=200, verbose_name='author name')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='culture_posts', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Culture Post',
                'verbose_name_plural': 'Culture Posts',
                'db_table': 'culture_posts',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('object_id', models.UUIDField(db_column='commentable_id')),
                ('content', models.TextField(validators=[django.core.validators.MinLengthValidator(1)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('content_type', models.ForeignKey(db_column='commentable_type', on_delete=django.db.models.deletion.CASCADE, to='contenttypes.contenttype')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='social_comments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Comment',
                'verbose_name_plural': 'Comments',
                'db_table': 'comments',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['content_type', 'object_id'], name='comments_commentable_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Like',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('object_id', models.UUIDField(db_column='likeable_id')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('content_type', models.ForeignKey(db_column='likeable_type', on_delete=django.db.models.deletion.CASCADE, to='contenttypes.contenttype')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='likes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Like',
                'verbose_name_plural': 'Likes',
                'db_table': 'likes',
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'content_type', 'object_id'), name='unique_like_per_user'),
                ],
                'indexes': [
                    models.Index(fields=['content_type', 'object_id'], name='likes_likeable_idx'),
                ],
            },
        ),
    ]
