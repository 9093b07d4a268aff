"""
Services for the events app.
"""

from .calendar import (
    events_for_day,
    expand_occurrences,
    generate_calendar_month,
    sunday_weekday,
)

__all__ = [
    'events_for_day',
    'expand_occurrences',
    'generate_calendar_month',
    'sunday_weekday',
]
