"""
Rosary audio player state machine.

Models the narrated-rosary player the mobile client drives: loading a
track, play/pause, seeking (by drag or by 10 second skips), playback rate,
progress reporting, and swapping the narrating voice mid-prayer while
keeping the listener at the same relative position.

The player holds no audio itself. Callers feed it events from the real
media backend (``on_loaded`` once a track's duration is known, ``tick`` on
position updates) and read back the state, position and pending seek.
"""

import enum

import structlog

from .constants import PLAYBACK_RATES

logger = structlog.get_logger(__name__)

SKIP_MS = 10_000


class PlayerState(str, enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    PLAYING = 'playing'
    PAUSED = 'paused'
    SEEKING = 'seeking'
    COMPLETED = 'completed'


class PlayerStateError(Exception):
    """Operation not allowed in the player's current state."""


SEEKABLE = (PlayerState.READY, PlayerState.PLAYING, PlayerState.PAUSED)


class RosaryPlayer:

    def __init__(self, prayer_count=0, rate=1.0):
        self.prayer_count = prayer_count
        self.state = PlayerState.IDLE
        self.track = None
        self.duration_ms = 0
        self.position_ms = 0
        self.seek_position_ms = 0
        self.rate = rate
        self._state_before_seek = None
        self._pending_seek_ms = None
        self._pending_fraction = None
        self._play_when_ready = False

    def _require(self, *states):
        if self.state not in states:
            raise PlayerStateError(
                f"Cannot do that while {self.state.value}; "
                f"expected one of {', '.join(s.value for s in states)}.")

    def _clamp(self, position_ms):
        return max(0, min(int(position_ms), self.duration_ms))

    # Loading

    def load(self, track, initial_seek_ms=None):
        """Start loading ``track``; ``initial_seek_ms`` applies once loaded."""
        self.track = track
        self.state = PlayerState.LOADING
        self.duration_ms = 0
        self.position_ms = 0
        self.seek_position_ms = 0
        self._state_before_seek = None
        self._pending_seek_ms = initial_seek_ms
        self._pending_fraction = None
        logger.debug("Loading rosary track", track=track, initial_seek_ms=initial_seek_ms)

    def on_loaded(self, duration_ms):
        """The media backend reports the loaded track's duration."""
        self._require(PlayerState.LOADING)
        self.duration_ms = max(0, int(duration_ms))
        self.state = PlayerState.READY

        if self._pending_fraction is not None:
            self.position_ms = self._clamp(self._pending_fraction * self.duration_ms)
        elif self._pending_seek_ms:
            self.position_ms = self._clamp(self._pending_seek_ms)
        self._pending_fraction = None
        self._pending_seek_ms = None

        if self._play_when_ready:
            self._play_when_ready = False
            self.state = PlayerState.PLAYING

    # Transport

    def play(self):
        if self.state == PlayerState.LOADING:
            self._play_when_ready = True
            return
        self._require(PlayerState.READY, PlayerState.PAUSED, PlayerState.PLAYING,
                      PlayerState.COMPLETED)
        if self.state == PlayerState.COMPLETED:
            self.position_ms = 0
        self.state = PlayerState.PLAYING

    def pause(self):
        if self.state == PlayerState.LOADING:
            self._play_when_ready = False
            return
        self._require(PlayerState.PLAYING, PlayerState.PAUSED)
        self.state = PlayerState.PAUSED

    def toggle(self):
        if self.state == PlayerState.PLAYING:
            self.pause()
        else:
            self.play()

    def set_rate(self, rate):
        if rate not in PLAYBACK_RATES:
            raise ValueError(f"Unsupported playback rate {rate}.")
        self.rate = rate

    # Seeking

    def seek_to(self, position_ms):
        if self.state == PlayerState.COMPLETED:
            self.state = PlayerState.PAUSED
        self._require(*SEEKABLE)
        self.position_ms = self._clamp(position_ms)
        return self.position_ms

    def skip_forward(self):
        return self.seek_to(self.position_ms + SKIP_MS)

    def skip_back(self):
        return self.seek_to(self.position_ms - SKIP_MS)

    def begin_seek(self):
        self._require(*SEEKABLE)
        self._state_before_seek = self.state
        self.seek_position_ms = self.position_ms
        self.state = PlayerState.SEEKING

    def update_seek(self, position_ms):
        self._require(PlayerState.SEEKING)
        self.seek_position_ms = self._clamp(position_ms)

    def end_seek(self):
        self._require(PlayerState.SEEKING)
        self.position_ms = self.seek_position_ms
        self.state = self._state_before_seek
        self._state_before_seek = None
        return self.position_ms

    # Progress

    def tick(self, position_ms):
        """Position update from the media backend while playing."""
        if self.state == PlayerState.SEEKING or not self.duration_ms:
            return
        self.position_ms = self._clamp(position_ms)
        if self.state == PlayerState.PLAYING and self.position_ms >= self.duration_ms:
            self.state = PlayerState.COMPLETED
            logger.debug("Rosary track completed", track=self.track)

    @property
    def progress_fraction(self):
        if not self.duration_ms:
            return 0.0
        position = (self.seek_position_ms if self.state == PlayerState.SEEKING
                    else self.position_ms)
        return position / self.duration_ms

    @property
    def progress_percentage(self):
        return self.progress_fraction * 100

    def current_prayer_index(self):
        """Index of the prayer being recited, splitting the track evenly."""
        if self.prayer_count <= 0:
            return 0
        return min(int(self.progress_fraction * self.prayer_count), self.prayer_count - 1)

    # Voice swap

    def change_voice(self, track):
        """
        Swap to another narrator's ``track`` at the same relative position.

        The new track's duration is unknown until ``on_loaded``; the captured
        fraction is applied then. A playing player resumes playing.
        """
        fraction = self.progress_fraction
        state = self._state_before_seek if self.state == PlayerState.SEEKING else self.state
        was_playing = state == PlayerState.PLAYING or self._play_when_ready

        self.load(track)
        self._pending_fraction = fraction
        self._play_when_ready = was_playing
        logger.info("Rosary voice changed", track=track, fraction=round(fraction, 4),
                    resume_playing=was_playing)
        return fraction

    @property
    def pending_fraction(self):
        return self._pending_fraction

    @property
    def resumes_playing(self):
        return self._play_when_ready


def format_time(milliseconds):
    """``65000`` -> ``"1:05"``."""
    total_seconds = int(milliseconds or 0) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
