"""
Month calendar generation and recurring event expansion.

Weeks start on Sunday and weekday numbers are Sunday-based (0 = Sunday,
6 = Saturday). Event times are placed on calendar days by their date in
the active Django time zone.
"""

import calendar
import datetime

from django.utils import timezone


def sunday_weekday(day):
    """Weekday number of a date with 0 = Sunday."""
    return day.isoweekday() % 7


def _local(value):
    if timezone.is_aware(value):
        return timezone.localtime(value)
    return value


def _add_months(year, month, count):
    index = year * 12 + (month - 1) + count
    return index // 12, index % 12 + 1


def _on_date(base, day):
    """``base`` moved to ``day`` keeping its wall-clock time."""
    return base.replace(year=day.year, month=day.month, day=day.day)


def expand_occurrences(event, start, end):
    """
    Return the local start times of ``event`` between ``start`` and ``end``.

    ``start`` and ``end`` are dates, both inclusive. Non-recurring events
    yield at most their own time. Recurring events repeat every
    ``recurrence_interval`` (default 1) days, weeks, months or years from
    the first occurrence and stop after ``recurrence_end_date`` (inclusive).
    Weekly events fall on each weekday of ``recurrence_days_of_week``, or
    the first occurrence's weekday when no days are given. Monthly and
    yearly events skip periods that lack the day (31st, 29 February).
    """
    base = _local(event.time)
    base_date = base.date()

    if not event.is_recurring or not event.recurrence_type:
        return [base] if start <= base_date <= end else []

    last = end
    if event.recurrence_end_date:
        end_date = event.recurrence_end_date
        if isinstance(end_date, datetime.datetime):
            end_date = _local(end_date).date()
        last = min(last, end_date)
    first = max(start, base_date)
    if first > last:
        return []

    interval = max(event.recurrence_interval or 1, 1)
    kind = event.recurrence_type
    dates = []

    if kind == 'daily':
        offset = (first - base_date).days
        step = -(-offset // interval)
        day = base_date + datetime.timedelta(days=step * interval)
        while day <= last:
            dates.append(day)
            day += datetime.timedelta(days=interval)

    elif kind == 'weekly':
        weekdays = event.recurrence_days_of_week or [sunday_weekday(base_date)]
        week_start = base_date - datetime.timedelta(days=sunday_weekday(base_date))
        skip = max((first - week_start).days // 7 // interval, 0)
        week = week_start + datetime.timedelta(weeks=skip * interval)
        while week <= last:
            for weekday in sorted(set(weekdays)):
                day = week + datetime.timedelta(days=weekday)
                if base_date <= day and first <= day <= last:
                    dates.append(day)
            week += datetime.timedelta(weeks=interval)

    elif kind in ('monthly', 'yearly'):
        months = interval if kind == 'monthly' else interval * 12
        count = 0
        while True:
            year, month = _add_months(base_date.year, base_date.month, count * months)
            if datetime.date(year, month, 1) > last:
                break
            if base_date.day <= calendar.monthrange(year, month)[1]:
                day = datetime.date(year, month, base_date.day)
                if first <= day <= last:
                    dates.append(day)
            count += 1

    return [_on_date(base, day) for day in dates]


def events_for_day(day, events):
    """
    Occurrences of ``events`` on the local date ``day``, sorted by time.

    Each entry is ``{'event': event, 'starts_at': datetime}``.
    """
    entries = []
    for event in events:
        for starts_at in expand_occurrences(event, day, day):
            entries.append({'event': event, 'starts_at': starts_at})
    entries.sort(key=lambda entry: entry['starts_at'])
    return entries


def generate_calendar_month(year, month, events, today=None):
    """
    Build the Sunday-first grid for ``year``/``month``.

    Leading days of the previous month fill the first week, then every day
    of the month, then days of the next month until the grid length is a
    multiple of 7. Each day is a dict with ``date``, ``day_of_month``,
    ``day_of_week`` (0 = Sunday), ``is_current_month``, ``is_today`` and
    ``events`` (see :func:`events_for_day`).
    """
    if today is None:
        today = timezone.localdate()

    first = datetime.date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    grid_start = first - datetime.timedelta(days=sunday_weekday(first))

    length = sunday_weekday(first) + days_in_month
    if length % 7:
        length += 7 - length % 7
    grid_end = grid_start + datetime.timedelta(days=length - 1)

    by_date = {}
    for event in events:
        for starts_at in expand_occurrences(event, grid_start, grid_end):
            by_date.setdefault(starts_at.date(), []).append(
                {'event': event, 'starts_at': starts_at})

    days = []
    for index in range(length):
        day = grid_start + datetime.timedelta(days=index)
        entries = sorted(by_date.get(day, []), key=lambda entry: entry['starts_at'])
        days.append({
            'date': day,
            'day_of_month': day.day,
            'day_of_week': sunday_weekday(day),
            'is_current_month': day.month == month,
            'is_today': day == today,
            'events': entries,
        })
    return days
