"""
Tests for month calendar generation and recurring event expansion.
"""

import datetime

from events.services import (
    events_for_day,
    expand_occurrences,
    generate_calendar_month,
    sunday_weekday,
)

from .factories import ChurchEventFactory, WeeklyEventFactory

UTC = datetime.timezone.utc


def at(year, month, day, hour=10):
    return datetime.datetime(year, month, day, hour, 0, tzinfo=UTC)


def dates(occurrences):
    return [occurrence.date() for occurrence in occurrences]


class TestGenerateCalendarMonth:

    def test_leading_and_trailing_fill(self):
        # 1 March 2024 is a Friday
        days = generate_calendar_month(2024, 3, [], today=datetime.date(2024, 3, 15))

        assert len(days) == 42
        assert days[0]['date'] == datetime.date(2024, 2, 25)
        assert days[0]['day_of_week'] == 0
        assert not days[0]['is_current_month']
        assert days[5]['date'] == datetime.date(2024, 3, 1)
        assert days[5]['is_current_month']
        assert days[-1]['date'] == datetime.date(2024, 4, 6)
        assert [d['is_today'] for d in days].count(True) == 1
        assert days[19]['is_today']

    def test_no_trailing_days_when_month_ends_on_saturday(self):
        # 31 August 2024 is a Saturday
        days = generate_calendar_month(2024, 8, [], today=datetime.date(2000, 1, 1))

        assert len(days) == 35
        assert days[0]['date'] == datetime.date(2024, 7, 28)
        assert days[-1]['date'] == datetime.date(2024, 8, 31)
        assert days[-1]['is_current_month']

    def test_month_starting_sunday_has_no_leading_days(self):
        # February 2015 starts on Sunday and has exactly four weeks
        days = generate_calendar_month(2015, 2, [], today=datetime.date(2000, 1, 1))

        assert len(days) == 28
        assert all(d['is_current_month'] for d in days)

    def test_every_grid_is_whole_weeks(self):
        for month in range(1, 13):
            days = generate_calendar_month(2025, month, [], today=datetime.date(2025, 1, 1))
            assert len(days) % 7 == 0
            assert days[0]['day_of_week'] == 0
            assert days[-1]['day_of_week'] == 6

    def test_events_placed_on_their_day(self):
        event = ChurchEventFactory.build(time=at(2024, 3, 10, 18))
        days = generate_calendar_month(2024, 3, [event], today=datetime.date(2024, 3, 1))

        by_date = {d['date']: d['events'] for d in days}
        assert [e['event'] for e in by_date[datetime.date(2024, 3, 10)]] == [event]
        assert sum(len(d['events']) for d in days) == 1

    def test_recurring_events_fill_adjacent_month_days(self):
        event = WeeklyEventFactory.build(time=at(2024, 2, 5), recurrence_days_of_week=[0])
        days = generate_calendar_month(2024, 3, [event], today=datetime.date(2024, 3, 1))

        sundays = [d['date'] for d in days if d['events']]
        assert sundays == [
            datetime.date(2024, 2, 25),
            datetime.date(2024, 3, 3),
            datetime.date(2024, 3, 10),
            datetime.date(2024, 3, 17),
            datetime.date(2024, 3, 24),
            datetime.date(2024, 3, 31),
        ]


class TestExpandOccurrences:

    def test_single_event_inside_and_outside_window(self):
        event = ChurchEventFactory.build(time=at(2024, 3, 4))
        assert dates(expand_occurrences(event, datetime.date(2024, 3, 1), datetime.date(2024, 3, 31))) == [
            datetime.date(2024, 3, 4)]
        assert expand_occurrences(event, datetime.date(2024, 4, 1), datetime.date(2024, 4, 30)) == []

    def test_weekly_days(self):
        event = WeeklyEventFactory.build(time=at(2024, 3, 4), recurrence_days_of_week=[1, 3])
        result = expand_occurrences(event, datetime.date(2024, 3, 1), datetime.date(2024, 3, 17))

        assert dates(result) == [
            datetime.date(2024, 3, 4),
            datetime.date(2024, 3, 6),
            datetime.date(2024, 3, 11),
            datetime.date(2024, 3, 13),
        ]
        assert all(o.hour == 10 for o in result)

    def test_weekly_every_other_week(self):
        event = WeeklyEventFactory.build(time=at(2024, 3, 4), recurrence_interval=2)
        result = expand_occurrences(event, datetime.date(2024, 3, 1), datetime.date(2024, 3, 31))
        assert dates(result) == [datetime.date(2024, 3, 4), datetime.date(2024, 3, 18)]

    def test_weekly_skips_days_before_first_occurrence(self):
        # starts on a Wednesday but repeats on Mondays
        event = WeeklyEventFactory.build(time=at(2024, 3, 6), recurrence_days_of_week=[1])
        result = expand_occurrences(event, datetime.date(2024, 3, 1), datetime.date(2024, 3, 12))
        assert dates(result) == [datetime.date(2024, 3, 11)]

    def test_weekly_defaults_to_start_weekday(self):
        event = WeeklyEventFactory.build(time=at(2024, 3, 6), recurrence_days_of_week=None)
        result = expand_occurrences(event, datetime.date(2024, 3, 1), datetime.date(2024, 3, 20))
        assert dates(result) == [datetime.date(2024, 3, 6), datetime.date(2024, 3, 13), datetime.date(2024, 3, 20)]

    def test_daily_interval(self):
        event = ChurchEventFactory.build(
            time=at(2024, 3, 1), is_recurring=True, recurrence_type='daily', recurrence_interval=3)
        result = expand_occurrences(event, datetime.date(2024, 3, 5), datetime.date(2024, 3, 12))
        assert dates(result) == [datetime.date(2024, 3, 7), datetime.date(2024, 3, 10)]

    def test_end_date_is_inclusive(self):
        event = ChurchEventFactory.build(
            time=at(2024, 3, 1), is_recurring=True, recurrence_type='daily',
            recurrence_end_date=at(2024, 3, 3, 23))
        result = expand_occurrences(event, datetime.date(2024, 2, 1), datetime.date(2024, 3, 31))
        assert dates(result) == [
            datetime.date(2024, 3, 1), datetime.date(2024, 3, 2), datetime.date(2024, 3, 3)]

    def test_monthly_skips_short_months(self):
        event = ChurchEventFactory.build(
            time=at(2024, 1, 31), is_recurring=True, recurrence_type='monthly')
        result = expand_occurrences(event, datetime.date(2024, 1, 1), datetime.date(2024, 6, 30))
        assert dates(result) == [
            datetime.date(2024, 1, 31), datetime.date(2024, 3, 31), datetime.date(2024, 5, 31)]

    def test_yearly_leap_day(self):
        event = ChurchEventFactory.build(
            time=at(2024, 2, 29), is_recurring=True, recurrence_type='yearly')
        result = expand_occurrences(event, datetime.date(2024, 1, 1), datetime.date(2028, 12, 31))
        assert dates(result) == [datetime.date(2024, 2, 29), datetime.date(2028, 2, 29)]


def test_events_for_day_sorted_by_time():
    late = ChurchEventFactory.build(time=at(2024, 3, 4, 19))
    early = WeeklyEventFactory.build(time=at(2024, 2, 26, 8))

    entries = events_for_day(datetime.date(2024, 3, 4), [late, early])

    assert [e['event'] for e in entries] == [early, late]


def test_sunday_weekday():
    assert sunday_weekday(datetime.date(2024, 3, 3)) == 0
    assert sunday_weekday(datetime.date(2024, 3, 9)) == 6
