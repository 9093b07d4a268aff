"""
Audio track resolution for narrated rosaries.
"""

from django.conf import settings
from rest_framework.exceptions import ValidationError

from ..constants import INTRODUCTION, MYSTERIES, VOICE_GUIDES, find_option
from ..player import RosaryPlayer


def audio_track(mystery, voice=None):
    """
    URL of the narrated track for ``mystery`` in ``voice``.

    Unknown voices fall back to the first guide.
    """
    mystery = (mystery or '').upper()
    if mystery != INTRODUCTION and mystery not in MYSTERIES:
        raise ValidationError({'mystery': f"Unknown mystery '{mystery}'."})
    guide = find_option(VOICE_GUIDES, 'name', voice) or VOICE_GUIDES[0]
    base_url = settings.ROSARY_AUDIO_BASE_URL.rstrip('/')
    return {
        'mystery': mystery,
        'voice': guide['name'],
        'url': f"{base_url}/{guide['name'].lower()}/{mystery.lower()}.mp3",
    }


def swap_voice(mystery, voice, position_ms, duration_ms, playing=False):
    """
    Resolve the new voice's track and the relative position to resume at.

    The client seeks to ``resume_fraction * new_duration`` once the new
    track reports its duration.
    """
    current = audio_track(mystery)
    player = RosaryPlayer()
    player.load(current['url'])
    player.on_loaded(duration_ms)
    if playing:
        player.play()
    # Stop short of the end so a playing track is not marked completed
    player.tick(min(position_ms, max(duration_ms - 1, 0)))

    track = audio_track(mystery, voice)
    fraction = player.change_voice(track['url'])
    return {
        **track,
        'resume_fraction': fraction,
        'resume_percentage': fraction * 100,
        'resume_playing': player.resumes_playing,
    }
