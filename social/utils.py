"""
Formatting and parsing helpers for social content.
"""

import json


def format_number(value):
    """
    Compact display for counts: ``1500`` -> ``"1.5K"``, ``2300000`` -> ``"2.3M"``.
    """
    if value is None:
        return '0'
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(value)


def parse_selected_groups(value):
    """
    Normalise a ``selected_groups`` value into a list of group id strings.

    Older rows store the list as text, either JSON (``'["a","b"]'``) or a
    bracketed comma list (``'{a,b}'`` / ``'[a, b]'``).
    """
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    if not isinstance(value, str):
        return []

    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        return [str(item) for item in parsed]

    stripped = value.strip().strip('[]{}')
    return [
        part.strip().strip('"\'')
        for part in stripped.split(',')
        if part.strip().strip('"\'')
    ]
