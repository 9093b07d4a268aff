"""
API tests for church event endpoints.
"""

import datetime

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.tests.factories import UserFactory
from churches.tests.factories import ChurchMemberFactory, create_church_with_owner
from events.models import ChurchEvent

from .factories import ChurchEventFactory, WeeklyEventFactory

UTC = datetime.timezone.utc


class ChurchEventListAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.church, self.owner = create_church_with_owner()
        self.user = UserFactory()
        self.client.force_authenticate(user=self.user)

    def test_list_ordered_by_time_and_hides_deleted(self):
        later = ChurchEventFactory(church=self.church, time=datetime.datetime(2024, 5, 1, tzinfo=UTC))
        earlier = ChurchEventFactory(church=self.church, time=datetime.datetime(2024, 4, 1, tzinfo=UTC))
        ChurchEventFactory(church=self.church, is_deleted=True)
        ChurchEventFactory()

        response = self.client.get(reverse('events:event-list'), {'church': str(self.church.id)})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [e['id'] for e in response.data['results']]
        self.assertEqual(ids, [str(earlier.id), str(later.id)])

    def test_search_q_matches_title_excerpt_and_author(self):
        ChurchEventFactory(church=self.church, title='Choir rehearsal')
        ChurchEventFactory(church=self.church, excerpt='Bring your CHOIR folder')
        ChurchEventFactory(church=self.church, author_name='Choirmaster Ann')
        ChurchEventFactory(church=self.church, title='Potluck')

        response = self.client.get(
            reverse('events:event-list'), {'church': str(self.church.id), 'q': 'choir'})

        self.assertEqual(len(response.data['results']), 3)

    def test_display_fields(self):
        ChurchEventFactory(
            church=self.church,
            title='Youth Night',
            video_link='https://youtu.be/dQw4w9WgXcQ',
            image_url=None,
        )

        response = self.client.get(reverse('events:event-list'), {'church': str(self.church.id)})

        event = response.data['results'][0]
        self.assertEqual(event['icon'], 'message-circle')
        self.assertEqual(event['video_thumbnail'], 'https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg')
        self.assertTrue(event['display_image'].startswith('https://via.placeholder.com/'))
        self.assertFalse(event['can_edit'])


class ChurchEventWriteAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.church, self.owner = create_church_with_owner()
        self.admin = ChurchMemberFactory(church=self.church, role='admin').user
        self.member = ChurchMemberFactory(church=self.church).user

    def payload(self, **overrides):
        data = {
            'church': str(self.church.id),
            'title': 'Sunday Mass',
            'excerpt': 'Weekly parish mass',
            'time': '2024-03-03T09:00:00Z',
        }
        data.update(overrides)
        return data

    def test_admin_creates_event(self):
        self.client.force_authenticate(user=self.admin)

        response = self.client.post(reverse('events:event-list'), self.payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        event = ChurchEvent.objects.get(id=response.data['id'])
        self.assertEqual(event.created_by, self.admin)
        self.assertEqual(event.author_name, self.admin.full_name)

    def test_member_cannot_create(self):
        self.client.force_authenticate(user=self.member)

        response = self.client.post(reverse('events:event-list'), self.payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(ChurchEvent.objects.exists())

    def test_title_and_excerpt_required(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(
            reverse('events:event-list'), self.payload(title='  ', excerpt=''), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        names = {p['name'] for p in response.data['invalid_params']}
        self.assertEqual(names, {'title', 'excerpt'})

    def test_recurrence_cleared_when_not_recurring(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(reverse('events:event-list'), self.payload(
            is_recurring=False, recurrence_type='weekly', recurrence_interval=2,
            recurrence_days_of_week=[0]), format='json')

        event = ChurchEvent.objects.get(id=response.data['id'])
        self.assertIsNone(event.recurrence_type)
        self.assertIsNone(event.recurrence_interval)
        self.assertIsNone(event.recurrence_days_of_week)

    def test_legacy_packed_days_accepted(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(reverse('events:event-list'), self.payload(
            is_recurring=True, recurrence_type='weekly', recurrence_days_of_week=135), format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['recurrence_days_of_week'], [1, 3, 5])
        self.assertEqual(response.data['recurrence_interval'], 1)

    def test_days_dropped_for_monthly(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(reverse('events:event-list'), self.payload(
            is_recurring=True, recurrence_type='monthly', recurrence_days_of_week=[2]), format='json')

        self.assertIsNone(response.data['recurrence_days_of_week'])

    def test_creator_can_edit_own_event(self):
        event = ChurchEventFactory(church=self.church, created_by=self.member)
        self.client.force_authenticate(user=self.member)

        response = self.client.patch(
            reverse('events:event-detail', args=[event.id]), {'title': 'Renamed'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['title'], 'Renamed')

    def test_other_member_cannot_edit(self):
        event = ChurchEventFactory(church=self.church, created_by=self.admin)
        self.client.force_authenticate(user=self.member)

        response = self.client.patch(
            reverse('events:event-detail', args=[event.id]), {'title': 'Renamed'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_is_soft(self):
        event = ChurchEventFactory(church=self.church)
        self.client.force_authenticate(user=self.admin)

        response = self.client.delete(reverse('events:event-detail', args=[event.id]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        event.refresh_from_db()
        self.assertTrue(event.is_deleted)
        self.assertIsNotNone(event.deleted_at)


class CalendarAPITest(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.church, self.owner = create_church_with_owner()
        self.client.force_authenticate(user=self.owner)

    def test_month_grid_with_recurring_event(self):
        WeeklyEventFactory(
            church=self.church,
            time=datetime.datetime(2024, 3, 4, 10, tzinfo=UTC),
            recurrence_days_of_week=[1],
        )

        response = self.client.get(reverse('events:event-calendar'), {
            'church': str(self.church.id), 'year': 2024, 'month': 3,
        })

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 42)
        with_events = [d['date'] for d in response.data if d['events']]
        self.assertEqual(with_events, ['2024-03-04', '2024-03-11', '2024-03-18', '2024-03-25', '2024-04-01'])
        self.assertEqual(response.data[5]['day_of_month'], 1)

    def test_invalid_month(self):
        response = self.client.get(reverse('events:event-calendar'), {
            'church': str(self.church.id), 'year': 2024, 'month': 13,
        })
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_church(self):
        response = self.client.get(reverse('events:event-calendar'), {
            'church': '00000000-0000-0000-0000-000000000000', 'year': 2024, 'month': 3,
        })
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_day_lists_occurrences(self):
        event = WeeklyEventFactory(church=self.church, recurrence_days_of_week=[1])

        response = self.client.get(reverse('events:event-day'), {
            'church': str(self.church.id), 'date': '2024-03-11',
        })

        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['event']['id'], str(event.id))
        self.assertTrue(response.data[0]['starts_at'].startswith('2024-03-11T10:00'))
