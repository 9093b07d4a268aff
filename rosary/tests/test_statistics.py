"""
Tests for prayer streaks, chart series and formatting.
"""

import datetime

import pytest

from rosary.constants import mystery_of_the_day
from rosary.services import (
    current_streak,
    format_prayer_time,
    longest_streak,
    monthly_counts,
    mystery_distribution,
    streak_history,
    weekly_counts,
)
from rosary.services.statistics import range_start

TODAY = datetime.date(2024, 3, 15)


def days_ago(*offsets):
    return [TODAY - datetime.timedelta(days=o) for o in offsets]


class TestStreaks:

    def test_streak_ending_today(self):
        assert current_streak(days_ago(0, 1, 2), TODAY) == 3

    def test_streak_ending_yesterday_still_counts(self):
        assert current_streak(days_ago(1, 2), TODAY) == 2

    def test_gap_breaks_streak(self):
        assert current_streak(days_ago(2, 3, 4), TODAY) == 0

    def test_multiple_prayers_same_day_count_once(self):
        assert current_streak(days_ago(0, 0, 1), TODAY) == 2

    def test_empty(self):
        assert current_streak([], TODAY) == 0
        assert longest_streak([]) == 0

    def test_longest_streak(self):
        assert longest_streak(days_ago(0, 5, 6, 7, 8, 10)) == 4

    def test_streak_history(self):
        assert streak_history(days_ago(4, 3, 1, 0)) == [1, 2, 1, 2]


class TestSeries:

    def test_weekly_counts_labels_and_counts(self):
        series = weekly_counts(days_ago(0, 0, 3, 9), TODAY)

        assert [p['label'] for p in series] == [
            '03/09', '03/10', '03/11', '03/12', '03/13', '03/14', '03/15']
        assert [p['count'] for p in series] == [0, 0, 0, 1, 0, 0, 2]

    def test_monthly_counts_span_twelve_months(self):
        days = [datetime.date(2024, 3, 1), datetime.date(2023, 4, 30), datetime.date(2023, 3, 31)]

        series = monthly_counts(days, TODAY)

        assert series[0]['label'] == '04/23'
        assert series[-1]['label'] == '03/24'
        assert len(series) == 12
        assert series[0]['count'] == 1
        assert series[-1]['count'] == 1

    def test_mystery_distribution_in_catalogue_order(self):
        result = mystery_distribution(['GLORIOUS', 'JOYFUL', 'GLORIOUS'])

        assert [(d['name'], d['count']) for d in result] == [
            ('Joyful', 1), ('Sorrowful', 0), ('Glorious', 2), ('Luminous', 0)]
        assert result[0]['color'] == '#0ACF83'


class TestRanges:

    NOW = datetime.datetime(2024, 3, 31, 12, 0, tzinfo=datetime.timezone.utc)

    def test_week(self):
        assert range_start('week', self.NOW) == self.NOW - datetime.timedelta(days=7)

    def test_month_clamps_to_month_end(self):
        assert range_start('month', self.NOW).date() == datetime.date(2024, 2, 29)

    def test_year(self):
        assert range_start('year', self.NOW).date() == datetime.date(2023, 3, 31)

    def test_all(self):
        assert range_start('all', self.NOW) is None


@pytest.mark.parametrize('minutes, expected', [
    (0, '0 min'),
    (45, '45 min'),
    (60, '1 hr'),
    (135, '2 hr 15 min'),
])
def test_format_prayer_time(minutes, expected):
    assert format_prayer_time(minutes) == expected


@pytest.mark.parametrize('day, expected', [
    (datetime.date(2024, 3, 11), 'JOYFUL'),     # Monday
    (datetime.date(2024, 3, 12), 'SORROWFUL'),
    (datetime.date(2024, 3, 13), 'GLORIOUS'),
    (datetime.date(2024, 3, 14), 'LUMINOUS'),
    (datetime.date(2024, 3, 15), 'SORROWFUL'),
    (datetime.date(2024, 3, 16), 'JOYFUL'),
    (datetime.date(2024, 3, 17), 'GLORIOUS'),   # Sunday
])
def test_mystery_of_the_day(day, expected):
    assert mystery_of_the_day(day) == expected
