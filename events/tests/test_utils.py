"""
Tests for event presentation helpers.
"""

import datetime

import pytest

from events.utils import (
    PLACEHOLDER_IMAGE_URL,
    decode_days_of_week,
    describe_recurrence,
    encode_days_of_week,
    event_icon_and_color,
    image_url_or_placeholder,
    video_thumbnail,
)

from .factories import ChurchEventFactory


class TestEventIconAndColor:

    @pytest.mark.parametrize('title,icon,color', [
        ('Wednesday Bible Study', 'book', '#4299E1'),
        ('Sunday Worship', 'home', '#38B2AC'),
        ('Young Adults Meetup', 'message-circle', '#ECC94B'),
        ('Men\'s Prayer Breakfast', 'coffee', '#F56565'),
        ('Finance Committee', 'users', '#9F7AEA'),
        ('Choir Practice', 'music', '#ED8936'),
        ('Food Bank Outreach', 'heart', '#ED64A6'),
        ('Parish Picnic', 'calendar', '#718096'),
    ])
    def test_keyword_classification(self, title, icon, color):
        assert event_icon_and_color(title) == {'icon': icon, 'color': color}

    def test_first_matching_rule_wins(self):
        # "study" (book) is checked before "prayer" (coffee)
        assert event_icon_and_color('Prayer and Study Night')['icon'] == 'book'

    def test_blank_title(self):
        assert event_icon_and_color(None)['icon'] == 'calendar'


class TestVideoThumbnail:

    @pytest.mark.parametrize('url', [
        'https://www.youtube.com/watch?v=dQw4w9WgXcQ',
        'https://youtu.be/dQw4w9WgXcQ',
        'https://www.youtube.com/embed/dQw4w9WgXcQ?start=3',
        'https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ',
    ])
    def test_extracts_id(self, url):
        assert video_thumbnail(url) == 'https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg'

    def test_rejects_short_id(self):
        assert video_thumbnail('https://youtu.be/abc') is None

    def test_empty(self):
        assert video_thumbnail('') is None
        assert video_thumbnail(None) is None


def test_image_url_or_placeholder():
    assert image_url_or_placeholder(None) == PLACEHOLDER_IMAGE_URL
    assert image_url_or_placeholder('https://x/y.jpg') == 'https://x/y.jpg'


class TestDaysOfWeekEncoding:

    def test_decode_packed_integer(self):
        assert decode_days_of_week(135) == [1, 3, 5]
        assert decode_days_of_week('246') == [2, 4, 6]

    def test_decode_list_sorts_and_dedupes(self):
        assert decode_days_of_week([5, 1, 5]) == [1, 5]

    def test_decode_empty(self):
        assert decode_days_of_week(None) is None
        assert decode_days_of_week([]) is None

    def test_decode_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            decode_days_of_week([7])
        with pytest.raises(ValueError):
            decode_days_of_week(18)

    def test_encode(self):
        assert encode_days_of_week([1, 3, 5]) == 135
        assert encode_days_of_week([]) is None


class TestDescribeRecurrence:

    def test_weekly_with_days_interval_and_end(self):
        event = ChurchEventFactory.build(
            is_recurring=True,
            recurrence_type='weekly',
            recurrence_interval=2,
            recurrence_days_of_week=[1, 3],
            recurrence_end_date=datetime.datetime(2024, 6, 1, tzinfo=datetime.timezone.utc),
        )
        assert describe_recurrence(event) == (
            'Repeats weekly on Mon, Wed every 2 weeks until 2024-06-01')

    def test_non_recurring(self):
        assert describe_recurrence(ChurchEventFactory.build()) == ''
