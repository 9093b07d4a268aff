"""
Factory Boy factories for church testing.
"""

import datetime

import factory
from factory.django import DjangoModelFactory

from authentication.tests.factories import UserFactory
from churches.models import BibleStudy, Church, ChurchMember


class ChurchFactory(DjangoModelFactory):
    """Factory for Church model."""

    class Meta:
        model = Church

    name = factory.Sequence(lambda n: f"St. Test Parish {n}")
    category = 'Catholic Church'
    description = factory.Faker('sentence')
    address = factory.Faker('address')
    mass_schedule = 'Sun 9:00 AM, 11:00 AM'


class ChurchMemberFactory(DjangoModelFactory):
    """Factory for ChurchMember model."""

    class Meta:
        model = ChurchMember

    church = factory.SubFactory(ChurchFactory)
    user = factory.SubFactory(UserFactory)
    role = 'member'


class BibleStudyFactory(DjangoModelFactory):
    """Factory for BibleStudy model."""

    class Meta:
        model = BibleStudy

    church = factory.SubFactory(ChurchFactory)
    date = factory.LazyFunction(datetime.date.today)
    time = '7:00 PM'
    location = 'Parish Hall'


def create_church_with_owner(**church_kwargs):
    """Create a church and an owner membership; returns (church, owner)."""
    church = ChurchFactory(**church_kwargs)
    owner = UserFactory()
    ChurchMemberFactory(church=church, user=owner, role='owner')
    return church, owner
