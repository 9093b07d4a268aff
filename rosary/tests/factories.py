"""
Factory Boy factories for rosary testing.
"""

import datetime

import factory
from django.utils import timezone
from factory.django import DjangoModelFactory

from authentication.tests.factories import UserFactory
from rosary.models import PrayerSession


class PrayerSessionFactory(DjangoModelFactory):

    class Meta:
        model = PrayerSession

    user = factory.SubFactory(UserFactory)
    mystery = 'JOYFUL'
    duration_minutes = 20
    prayed_at = factory.Sequence(
        lambda n: timezone.now() - datetime.timedelta(seconds=n + 1))


def prayed_on(user, day, mystery='JOYFUL', minutes=20, hour=9):
    """A session at ``hour`` local time on ``day``."""
    moment = timezone.make_aware(datetime.datetime.combine(day, datetime.time(hour)))
    return PrayerSessionFactory(user=user, mystery=mystery, duration_minutes=minutes,
                                prayed_at=moment)
