import uuid

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
            name='Church',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200, verbose_name='name')),
                ('category', models.CharField(blank=True, help_text='Church category, e.g. "Catholic Church"', max_length=100, verbose_name='category')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('founded', models.CharField(blank=True, max_length=50, verbose_name='founded')),
                ('phone', models.CharField(blank=True, max_length=50, verbose_name='phone')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='email')),
                ('website', models.URLField(blank=True, verbose_name='website')),
                ('mass_schedule', models.TextField(blank=True, verbose_name='mass schedule')),
                ('image', models.CharField(blank=True, max_length=500, verbose_name='image')),
                ('address', models.CharField(blank=True, max_length=300, verbose_name='address')),
                ('lat', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True, verbose_name='latitude')),
                ('lng', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True, verbose_name='longitude')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_churches', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Church',
                'verbose_name_plural': 'Churches',
                'db_table': 'churches',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['category'], name='churches_categor_3c1f0b_idx'),
                    models.Index(fields=['name'], name='churches_name_8d2e41_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BibleStudy',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(verbose_name='date')),
                ('time', models.CharField(help_text='Display time, e.g. "7:00 PM"', max_length=50, verbose_name='time')),
                ('image', models.CharField(blank=True, max_length=500, verbose_name='image')),
                ('created_by', models.CharField(blank=True, default='Bible Study Leader', max_length=200, verbose_name='leader')),
                ('description', models.TextField(blank=True, default='Bible Study', verbose_name='description')),
                ('location', models.CharField(blank=True, max_length=300, verbose_name='location')),
                ('is_recurring', models.BooleanField(default=False, verbose_name='recurring')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('church', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bible_studies', to='churches.church')),
            ],
            options={
                'verbose_name': 'Bible Study',
                'verbose_name_plural': 'Bible Studies',
                'db_table': 'bible_study_times',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='ChurchMember',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('role', models.CharField(choices=[('member', 'Member'), ('admin', 'Admin'), ('owner', 'Owner')], default='member', max_length=20, verbose_name='role')),
                ('joined_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='joined at')),
                ('church', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='churches.church')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='church_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Church Member',
                'verbose_name_plural': 'Church Members',
                'db_table': 'church_members',
                'ordering': ['joined_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('church', 'user'), name='unique_church_membership'),
                ],
            },
        ),
    ]
