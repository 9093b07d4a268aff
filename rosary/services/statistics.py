"""
Prayer statistics.

Streaks and chart series are computed from the user's prayer sessions,
bucketed by local calendar day (``TIME_ZONE``). A streak is a run of
consecutive days with at least one prayer; the current streak counts back
from today, or from yesterday when today has no prayer yet.
"""

import calendar
import datetime

from django.db import transaction
from django.utils.dateparse import parse_date, parse_datetime
from django.utils import timezone
from rest_framework.exceptions import ValidationError
import structlog

from ..constants import MYSTERIES
from ..models import PrayerSession

logger = structlog.get_logger(__name__)

HISTORY_RANGES = ('week', 'month', 'year', 'all')
STREAK_HISTORY_DAYS = 30


def local_day(value):
    return timezone.localtime(value).date()


def current_streak(days, today):
    """Length of the run of prayer days ending today or yesterday."""
    days = set(days)
    anchor = today if today in days else today - datetime.timedelta(days=1)
    streak = 0
    while anchor in days:
        streak += 1
        anchor -= datetime.timedelta(days=1)
    return streak


def longest_streak(days):
    best = run = 0
    previous = None
    for day in sorted(set(days)):
        if previous is not None and day - previous == datetime.timedelta(days=1):
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


def streak_history(days):
    """Streak length reached on each prayer day, oldest first, last 30 only."""
    history = []
    run = 0
    previous = None
    for day in sorted(set(days)):
        if previous is not None and day - previous == datetime.timedelta(days=1):
            run += 1
        else:
            run = 1
        history.append(run)
        previous = day
    return history[-STREAK_HISTORY_DAYS:]


def weekly_counts(days, today):
    """Prayer counts for the seven days ending ``today`` labelled ``MM/DD``."""
    series = []
    for offset in range(6, -1, -1):
        day = today - datetime.timedelta(days=offset)
        series.append({
            'label': day.strftime('%m/%d'),
            'date': day,
            'count': sum(1 for d in days if d == day),
        })
    return series


def _shift_months(day, months):
    month_index = day.year * 12 + day.month - 1 + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, min(day.day, last_day))


def monthly_counts(days, today):
    """Prayer counts for the twelve months ending with today's, labelled ``MM/YY``."""
    series = []
    for offset in range(11, -1, -1):
        month = _shift_months(today.replace(day=1), -offset)
        series.append({
            'label': month.strftime('%m/%y'),
            'month': month.strftime('%Y-%m'),
            'count': sum(1 for d in days if (d.year, d.month) == (month.year, month.month)),
        })
    return series


def mystery_distribution(mysteries):
    """Count of sessions per mystery, in catalogue order."""
    mysteries = list(mysteries)
    return [
        {
            'key': key,
            'name': info['short_name'],
            'count': mysteries.count(key),
            'color': info['color'],
        }
        for key, info in MYSTERIES.items()
    ]


def range_start(time_range, now):
    """Earliest ``prayed_at`` included by a history range, or None for all."""
    if time_range == 'week':
        return now - datetime.timedelta(days=7)
    if time_range == 'month':
        return now.replace(**_date_kwargs(_shift_months(now.date(), -1)))
    if time_range == 'year':
        return now.replace(**_date_kwargs(_shift_months(now.date(), -12)))
    return None


def _date_kwargs(day):
    return {'year': day.year, 'month': day.month, 'day': day.day}


def filter_history(queryset, time_range='all', mystery=None, now=None):
    if time_range not in HISTORY_RANGES:
        raise ValidationError({'range': f"Expected one of: {', '.join(HISTORY_RANGES)}."})
    start = range_start(time_range, now or timezone.localtime())
    if start is not None:
        queryset = queryset.filter(prayed_at__gte=start)
    if mystery:
        queryset = queryset.filter(mystery=mystery)
    return queryset


def _parse_moment(value):
    """ISO datetime or date string; a bare date means local midnight."""
    if not isinstance(value, str):
        return None
    try:
        moment = parse_datetime(value)
        if moment is None:
            day = parse_date(value)
            if day is None:
                return None
            moment = datetime.datetime.combine(day, datetime.time())
    except ValueError:
        return None
    return moment


def format_prayer_time(minutes):
    """``45`` -> ``"45 min"``, ``120`` -> ``"2 hr"``, ``135`` -> ``"2 hr 15 min"``."""
    hours, remaining = divmod(int(minutes or 0), 60)
    if hours == 0:
        return f"{remaining} min"
    if remaining == 0:
        return f"{hours} hr"
    return f"{hours} hr {remaining} min"


class PrayerStatisticsService:
    """Statistics and history import for a user's prayer sessions."""

    @staticmethod
    def record(user, mystery, duration_minutes=0, intention='', prayed_at=None):
        session = PrayerSession.objects.create(
            user=user,
            mystery=mystery,
            duration_minutes=duration_minutes,
            intention=intention,
            prayed_at=prayed_at or timezone.now(),
        )
        logger.info(
            "Prayer session recorded",
            user_id=str(user.id),
            mystery=mystery,
            duration_minutes=duration_minutes,
        )
        return session

    @staticmethod
    def statistics(user, today=None):
        today = today or timezone.localdate()
        sessions = list(
            PrayerSession.objects.filter(user=user)
            .order_by('prayed_at')
            .values_list('prayed_at', 'mystery', 'duration_minutes')
        )
        days = [local_day(prayed_at) for prayed_at, _, _ in sessions]
        total_minutes = sum(minutes for _, _, minutes in sessions)

        return {
            'streak_days': current_streak(days, today),
            'longest_streak': longest_streak(days),
            'total_prayers': len(sessions),
            'total_prayer_time': total_minutes,
            'total_prayer_time_display': format_prayer_time(total_minutes),
            'last_prayed': sessions[-1][0] if sessions else None,
            'streak_history': streak_history(days),
            'weekly': weekly_counts(days, today),
            'monthly': monthly_counts(days, today),
            'mystery_distribution': mystery_distribution(m for _, m, _ in sessions),
        }

    @staticmethod
    def _parse_history_item(index, item):
        if not isinstance(item, dict):
            raise ValidationError({'prayerHistory': f"Item {index} is not an object."})
        mystery = str(item.get('mysteryKey') or item.get('mystery') or '').upper()
        if mystery not in MYSTERIES:
            raise ValidationError(
                {'prayerHistory': f"Item {index} has an unknown mystery '{mystery}'."})
        prayed_at = _parse_moment(item.get('date'))
        if prayed_at is None:
            raise ValidationError({'prayerHistory': f"Item {index} has an invalid date."})
        if timezone.is_naive(prayed_at):
            prayed_at = timezone.make_aware(prayed_at)
        try:
            duration = max(int(item.get('duration') or 0), 0)
        except (TypeError, ValueError):
            duration = 0
        return {
            'mystery': mystery,
            'prayed_at': prayed_at,
            'duration_minutes': duration,
            'intention': str(item.get('intention') or ''),
        }

    @classmethod
    def import_history(cls, user, blob):
        """
        Import sessions from a client statistics blob.

        The blob carries ``prayerHistory``, a list of ``{date, mysteryKey,
        duration, intention}`` items. Sessions already stored are skipped.
        The client's own ``prayerStatistics`` counters are not trusted; the
        statistics returned are recomputed.
        """
        history = blob.get('prayerHistory') or []
        if not isinstance(history, list):
            raise ValidationError({'prayerHistory': "Expected a list."})

        rows = [cls._parse_history_item(i, item) for i, item in enumerate(history)]
        with transaction.atomic():
            before = PrayerSession.objects.filter(user=user).count()
            PrayerSession.objects.bulk_create(
                [PrayerSession(user=user, **row) for row in rows],
                ignore_conflicts=True,
            )
            imported = PrayerSession.objects.filter(user=user).count() - before

        logger.info(
            "Prayer history imported",
            user_id=str(user.id),
            received=len(rows),
            imported=imported,
        )
        return imported
