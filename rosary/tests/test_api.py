"""
API tests for rosary endpoints.
"""

import datetime
from unittest import mock

from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from authentication.tests.factories import UserFactory
from rosary.models import PrayerSession, RosarySettings

from .factories import PrayerSessionFactory, prayed_on


class MysteryAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_mysteries_have_five_each(self):
        response = self.client.get(reverse('rosary:mysteries'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([m['key'] for m in response.data],
                         ['JOYFUL', 'SORROWFUL', 'GLORIOUS', 'LUMINOUS'])
        self.assertTrue(all(len(m['mysteries']) == 5 for m in response.data))

    @override_settings(ROSARY_AUDIO_BASE_URL='https://audio.test/rosary/')
    def test_today_uses_weekday_and_voice(self):
        RosarySettings.objects.create(user=self.user, voice_guide='Claire')
        thursday = datetime.date(2024, 3, 14)

        with mock.patch('rosary.views.timezone.localdate', return_value=thursday):
            response = self.client.get(reverse('rosary:today'))

        self.assertEqual(response.data['key'], 'LUMINOUS')
        self.assertEqual(response.data['audio_url'], 'https://audio.test/rosary/claire/luminous.mp3')

    def test_options(self):
        response = self.client.get(reverse('rosary:options'))

        self.assertEqual(len(response.data['voice_guides']), 4)
        self.assertEqual(len(response.data['languages']), 7)


class PrayerSessionAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_record_session(self):
        response = self.client.post(reverse('rosary:session-list'), {
            'mystery': 'SORROWFUL',
            'duration_minutes': 18,
            'intention': 'For my family',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['mystery_name'], 'Sorrowful Mysteries')
        self.assertTrue(PrayerSession.objects.filter(user=self.user, duration_minutes=18).exists())

    def test_history_only_own_and_filtered(self):
        PrayerSessionFactory(user=self.user, mystery='JOYFUL')
        PrayerSessionFactory(user=self.user, mystery='GLORIOUS')
        PrayerSessionFactory(mystery='GLORIOUS')
        PrayerSessionFactory(
            user=self.user, mystery='GLORIOUS',
            prayed_at=timezone.now() - datetime.timedelta(days=40))

        response = self.client.get(
            reverse('rosary:session-list'), {'range': 'month', 'mystery': 'GLORIOUS'})

        self.assertEqual(len(response.data['results']), 1)

    def test_invalid_range_rejected(self):
        response = self.client.get(reverse('rosary:session-list'), {'range': 'decade'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_statistics(self):
        today = timezone.localdate()
        prayed_on(self.user, today, minutes=20)
        prayed_on(self.user, today - datetime.timedelta(days=1), mystery='LUMINOUS', minutes=25)
        prayed_on(self.user, today - datetime.timedelta(days=5), minutes=20)

        response = self.client.get(reverse('rosary:session-statistics'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['streak_days'], 2)
        self.assertEqual(response.data['longest_streak'], 2)
        self.assertEqual(response.data['total_prayers'], 3)
        self.assertEqual(response.data['total_prayer_time'], 65)
        self.assertEqual(response.data['total_prayer_time_display'], '1 hr 5 min')
        self.assertEqual(len(response.data['weekly']), 7)
        self.assertEqual(response.data['weekly'][-1]['count'], 1)
        self.assertEqual(len(response.data['monthly']), 12)

    def test_import_history(self):
        blob = {
            'prayerHistory': [
                {'date': '2024-03-01T10:00:00.000Z', 'mysteryKey': 'JOYFUL', 'duration': 20},
                {'date': '2024-03-02T10:00:00.000Z', 'mysteryKey': 'sorrowful', 'duration': 15},
            ],
            'prayerStatistics': {'streakDays': 99, 'totalPrayers': 99},
        }
        url = reverse('rosary:session-import-history')

        response = self.client.post(url, blob, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['imported'], 2)
        self.assertEqual(response.data['statistics']['total_prayers'], 2)

        response = self.client.post(url, blob, format='json')
        self.assertEqual(response.data['imported'], 0)

    def test_import_rejects_unknown_mystery(self):
        response = self.client.post(reverse('rosary:session-import-history'), {
            'prayerHistory': [{'date': '2024-03-01', 'mysteryKey': 'MERRY'}],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(PrayerSession.objects.exists())


class RosarySettingsAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_defaults_created_on_read(self):
        response = self.client.get(reverse('rosary:settings'))

        self.assertEqual(response.data['voice_guide'], 'Francis')
        self.assertEqual(response.data['duration'], '20 min')
        self.assertEqual(response.data['text_size'], 50)
        self.assertTrue(RosarySettings.objects.filter(user=self.user).exists())

    def test_update_and_reset(self):
        response = self.client.patch(reverse('rosary:settings'), {
            'voice_guide': 'Maria',
            'text_size': 80,
            'reminders': True,
        }, format='json')
        self.assertEqual(response.data['voice_guide'], 'Maria')

        response = self.client.post(reverse('rosary:settings-reset'))

        self.assertEqual(response.data['voice_guide'], 'Francis')
        self.assertEqual(response.data['text_size'], 50)
        self.assertFalse(response.data['reminders'])

    def test_text_size_bounded(self):
        response = self.client.patch(
            reverse('rosary:settings'), {'text_size': 101}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


@override_settings(ROSARY_AUDIO_BASE_URL='https://audio.test/rosary')
class AudioAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_track_for_voice(self):
        response = self.client.get(
            reverse('rosary:audio-track'), {'mystery': 'GLORIOUS', 'voice': 'Thomas'})

        self.assertEqual(response.data['url'], 'https://audio.test/rosary/thomas/glorious.mp3')

    def test_track_defaults_to_settings_voice(self):
        RosarySettings.objects.create(user=self.user, voice_guide='Claire')

        response = self.client.get(reverse('rosary:audio-track'), {'mystery': 'INTRODUCTION'})

        self.assertEqual(response.data['voice'], 'Claire')

    def test_voice_swap_keeps_relative_position(self):
        response = self.client.post(reverse('rosary:voice-swap'), {
            'mystery': 'JOYFUL',
            'voice': 'Maria',
            'position_ms': 300_000,
            'duration_ms': 1_200_000,
            'playing': True,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['url'], 'https://audio.test/rosary/maria/joyful.mp3')
        self.assertEqual(response.data['resume_fraction'], 0.25)
        self.assertTrue(response.data['resume_playing'])
