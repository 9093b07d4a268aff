import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='RosarySettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('voice_guide', models.CharField(choices=[('Francis', 'Francis'), ('Claire', 'Claire'), ('Thomas', 'Thomas'), ('Maria', 'Maria')], default='Francis', max_length=20, verbose_name='voice guide')),
                ('duration', models.CharField(choices=[('15 min', '15 min'), ('20 min', '20 min'), ('25 min', '25 min'), ('30 min', '30 min')], default='20 min', max_length=10, verbose_name='audio duration')),
                ('language', models.CharField(choices=[('en', 'English'), ('es', 'Spanish'), ('la', 'Latin'), ('it', 'Italian'), ('fr', 'French'), ('pl', 'Polish'), ('pt', 'Portuguese')], default='en', max_length=5, verbose_name='language')),
                ('theme', models.CharField(choices=[('Standard', 'Standard'), ('Tranquil', 'Tranquil'), ('Traditional', 'Traditional'), ('Peaceful', 'Peaceful'), ('Desert', 'Desert')], default='Standard', max_length=20, verbose_name='theme')),
                ('auto_play_next', models.BooleanField(default=True)),
                ('show_images', models.BooleanField(default=True)),
                ('text_size', models.PositiveSmallIntegerField(default=50, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ('vibration_enabled', models.BooleanField(default=True)),
                ('allow_screen_dimming', models.BooleanField(default=False)),
                ('background_ambience', models.BooleanField(default=True)),
                ('reminders', models.BooleanField(default=False)),
                ('notifications_enabled', models.BooleanField(default=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='rosary_settings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Rosary Settings',
                'verbose_name_plural': 'Rosary Settings',
                'db_table': 'rosary_settings',
            },
        ),
        migrations.CreateModel(
            name='PrayerSession',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('mystery', models.CharField(choices=[('JOYFUL', 'Joyful Mysteries'), ('SORROWFUL', 'Sorrowful Mysteries'), ('GLORIOUS', 'Glorious Mysteries'), ('LUMINOUS', 'Luminous Mysteries')], max_length=10, verbose_name='mystery')),
                ('prayed_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='prayed at')),
                ('duration_minutes', models.PositiveIntegerField(default=0, verbose_name='duration (minutes)')),
                ('intention', models.TextField(blank=True, verbose_name='intention')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prayer_sessions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Prayer Session',
                'verbose_name_plural': 'Prayer Sessions',
                'db_table': 'prayer_sessions',
                'ordering': ['-prayed_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'mystery', 'prayed_at'), name='unique_prayer_session'),
                ],
                'indexes': [
                    models.Index(fields=['user', '-prayed_at'], name='prayer_sess_user_id_4e1a9c_idx'),
                ],
            },
        ),
    ]
