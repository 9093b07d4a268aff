"""
Presentation helpers for church events.
"""

import re

PLACEHOLDER_IMAGE_URL = 'https://via.placeholder.com/400x200?text=Church+Event'

YOUTUBE_ID_RE = re.compile(r'^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*')

DAY_NAMES = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']
DAY_INITIALS = ['S', 'M', 'T', 'W', 'T', 'F', 'S']

# (keywords, icon, colour); first match wins
EVENT_STYLES = [
    (('bible', 'study'), 'book', '#4299E1'),
    (('sunday', 'service', 'worship'), 'home', '#38B2AC'),
    (('youth', 'meetup', 'young'), 'message-circle', '#ECC94B'),
    (('prayer', 'breakfast'), 'coffee', '#F56565'),
    (('meeting', 'committee'), 'users', '#9F7AEA'),
    (('music', 'choir', 'practice'), 'music', '#ED8936'),
    (('volunteer', 'serve', 'outreach'), 'heart', '#ED64A6'),
]
DEFAULT_EVENT_STYLE = {'icon': 'calendar', 'color': '#718096'}

RECURRENCE_UNITS = {
    'daily': 'days',
    'weekly': 'weeks',
    'monthly': 'months',
    'yearly': 'years',
}


def event_icon_and_color(title):
    """Pick an icon name and colour from keywords in the event title."""
    lowered = (title or '').lower()
    for keywords, icon, color in EVENT_STYLES:
        if any(keyword in lowered for keyword in keywords):
            return {'icon': icon, 'color': color}
    return dict(DEFAULT_EVENT_STYLE)


def video_thumbnail(url):
    """
    Return the YouTube thumbnail URL for a video link.

    None when the link is empty or does not carry an 11 character video id.
    """
    if not url:
        return None
    match = YOUTUBE_ID_RE.match(url)
    if match and len(match.group(2)) == 11:
        return f"https://img.youtube.com/vi/{match.group(2)}/mqdefault.jpg"
    return None


def image_url_or_placeholder(url):
    return url or PLACEHOLDER_IMAGE_URL


def day_name(day, short=False):
    """Name of a weekday number (0 = Sunday)."""
    return (DAY_INITIALS if short else DAY_NAMES)[day]


def decode_days_of_week(value):
    """
    Normalise a weekday list.

    Accepts a list of ints, or the legacy packed integer form where each
    decimal digit is a weekday (``135`` -> ``[1, 3, 5]``). Returns a sorted,
    de-duplicated list, or None for empty input.

    Raises:
        ValueError: a weekday is outside 0..6 or the value is not a list
            or integer.
    """
    if value is None or value == '' or value == []:
        return None
    if isinstance(value, bool):
        raise ValueError("Days of week must be a list or an integer.")
    if isinstance(value, int):
        days = [int(digit) for digit in str(value)]
    elif isinstance(value, str) and value.isdigit():
        days = [int(digit) for digit in value]
    elif isinstance(value, (list, tuple)):
        days = [int(day) for day in value]
    else:
        raise ValueError("Days of week must be a list or an integer.")

    if any(day < 0 or day > 6 for day in days):
        raise ValueError("Days of week must be between 0 (Sunday) and 6 (Saturday).")
    return sorted(set(days)) or None


def encode_days_of_week(days):
    """Pack a weekday list into the legacy integer form (``[1, 3, 5]`` -> ``135``)."""
    if not days:
        return None
    return int(''.join(str(day) for day in days))


def describe_recurrence(event):
    """Human readable recurrence summary, e.g. "Repeats weekly on Mon, Wed"."""
    if not event.is_recurring or not event.recurrence_type:
        return ''

    if event.recurrence_type == 'weekly' and event.recurrence_days_of_week:
        text = "Repeats weekly on " + ", ".join(
            day_name(day) for day in event.recurrence_days_of_week)
    else:
        text = f"Repeats {event.recurrence_type}"

    interval = event.recurrence_interval or 1
    if interval > 1:
        text += f" every {interval} {RECURRENCE_UNITS[event.recurrence_type]}"
    if event.recurrence_end_date:
        text += f" until {event.recurrence_end_date.date().isoformat()}"
    return text
