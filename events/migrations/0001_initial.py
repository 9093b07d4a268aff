import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('churches', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ChurchEvent',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200, verbose_name='title')),
                ('excerpt', models.TextField(verbose_name='description')),
                ('image_url', models.CharField(blank=True, max_length=500, null=True, verbose_name='image URL')),
                ('video_link', models.URLField(blank=True, max_length=500, null=True, verbose_name='video link')),
                ('time', models.DateTimeField(verbose_name='time')),
                ('author_name', models.CharField(blank=True, max_length=200, verbose_name='author name')),
                ('event_location', models.CharField(blank=True, max_length=300, verbose_name='location')),
                ('is_recurring', models.BooleanField(default=False, verbose_name='recurring')),
                ('recurrence_type', models.CharField(blank=True, choices=[('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly'), ('yearly', 'Yearly')], max_length=10, null=True, verbose_name='recurrence type')),
                ('recurrence_interval', models.PositiveIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(1)], verbose_name='recurrence interval')),
                ('recurrence_days_of_week', models.JSONField(blank=True, help_text='Weekday numbers, 0 = Sunday ... 6 = Saturday', null=True, verbose_name='recurrence days of week')),
                ('recurrence_end_date', models.DateTimeField(blank=True, null=True, verbose_name='recurrence end date')),
                ('is_deleted', models.BooleanField(default=False)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('church', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='events', to='churches.church')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Church Event',
                'verbose_name_plural': 'Church Events',
                'db_table': 'church_events',
                'ordering': ['time'],
                'indexes': [
                    models.Index(fields=['church', 'time'], name='church_even_church__5e0a7c_idx'),
                    models.Index(fields=['is_deleted'], name='church_even_is_dele_2f4c1d_idx'),
                ],
            },
        ),
    ]
