"""
Factory Boy factories for church event testing.
"""

import datetime

import factory
from factory.django import DjangoModelFactory

from churches.tests.factories import ChurchFactory
from events.models import ChurchEvent


class ChurchEventFactory(DjangoModelFactory):
    """Factory for ChurchEvent model."""

    class Meta:
        model = ChurchEvent

    church = factory.SubFactory(ChurchFactory)
    title = factory.Sequence(lambda n: f"Parish Event {n}")
    excerpt = factory.Faker('sentence')
    time = datetime.datetime(2024, 3, 4, 10, 0, tzinfo=datetime.timezone.utc)
    author_name = 'Parish Office'
    is_recurring = False


class WeeklyEventFactory(ChurchEventFactory):
    is_recurring = True
    recurrence_type = 'weekly'
    recurrence_interval = 1
    recurrence_days_of_week = [1]
