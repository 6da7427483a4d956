"""Sound clips and players that play them on mixer channels.

A :class:`Sound` holds a loaded clip; clips loaded from files are cached, so
loading the same file twice gives the same clip.  A :class:`SoundPlayer`
plays one sound at a time on a free mixer channel.  Its :class:`PlayMode`
decides what happens when it is asked to play while a sound is playing.
"""

from __future__ import annotations

import math
import os
import threading
from enum import Enum
from pathlib import Path

import pygame

_SEARCH_PATH = (".", "sounds")
_DEFAULT_PARAMS = {"frequency": 44100, "size": -16, "channels": 2, "buffer": 2048}
_audio_params = dict(_DEFAULT_PARAMS)
_cache: dict[str, object] = {}
_owners: dict[int, "SoundPlayer"] = {}


def set_audio_params(frequency=44100, size=-16, channels=2, buffer=2048):
    """Set the mixer parameters, reopening the mixer if it is already open."""
    _audio_params.update(
        frequency=frequency, size=size, channels=channels, buffer=buffer
    )
    if pygame.mixer.get_init():
        pygame.mixer.quit()
        _cache.clear()
        _owners.clear()
        pygame.mixer.init(**_audio_params)


def _ensure_audio():
    if not pygame.mixer.get_init():
        pygame.mixer.init(**_audio_params)


def _find_sound_file(filename):
    candidate = Path(filename)
    if candidate.is_absolute():
        return candidate if candidate.is_file() else None
    for directory in _SEARCH_PATH:
        found = Path(directory) / candidate
        if found.is_file():
            return found
    return None


def _load(filename):
    """Load a clip through the cache; None if the file is missing or unreadable."""
    path = _find_sound_file(filename)
    if path is None:
        return None
    key = str(path.resolve())
    clip = _cache.get(key)
    if clip is None:
        try:
            clip = pygame.mixer.Sound(str(path))
        except pygame.error:
            return None
        _cache[key] = clip
    return clip


def _free_channel():
    """Index of the first idle channel, channel 0 if all are busy, None if none exist."""
    count = pygame.mixer.get_num_channels()
    if count <= 0:
        return None
    for index in range(count):
        if not pygame.mixer.Channel(index).get_busy():
            return index
    return 0


class PlayMode(Enum):
    """What a player does when asked to play."""

    TERMINATE_AND_PLAY = "terminate_and_play"  # always stop and play
    PLAY_IF_IDLE = "play_if_idle"              # only when nothing is playing
    PLAY_IF_NEW = "play_if_new"                # not if the same sound is playing
    PLAY_ONCE = "play_once"                    # not if it was the last sound played


class Sound:
    """A sound clip, loaded from a file or wrapping an existing mixer sound."""

    def __init__(self, source=None):
        _ensure_audio()
        self._music = None
        if source is None:
            return
        if isinstance(source, (str, os.PathLike)):
            self.load(source)
        else:
            self._music = source

    @property
    def music(self):
        """The mixer sound, or None if nothing is loaded."""
        return self._music

    def load(self, filename):
        """Load a clip found on the sound search path; a missing file loads nothing."""
        self.unload()
        self._music = _load(filename)

    def unload(self):
        """Forget the clip (it stays in the shared cache)."""
        self._music = None


class SoundPlayer:
    """Plays one sound at a time on a mixer channel."""

    def __init__(self, mode=PlayMode.TERMINATE_AND_PLAY):
        _ensure_audio()
        self.mode = mode
        self._channel = None
        self._sound = None
        self._paused = False
        self._timer = None

    def _channel_obj(self):
        return pygame.mixer.Channel(self._channel)

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _should_skip(self, sound, now, last):
        mode = self.mode
        if mode is PlayMode.PLAY_IF_IDLE and now is not None:
            return True
        if mode in (PlayMode.PLAY_IF_IDLE, PlayMode.PLAY_IF_NEW):
            return sound is not None and now is not None and sound.music is now.music
        if mode is PlayMode.PLAY_ONCE:
            return sound is not None and last is not None and sound.music is last.music
        return False

    def play(self, sound, repeats=0, fade_in=0):
        """Play ``sound``, repeating it ``repeats`` more times (-1: forever).

        With ``fade_in`` milliseconds, a playing sound fades out while the
        new one fades in.
        """
        now = self.is_playing()
        last = self.last_playing()
        if self._should_skip(sound, now, last):
            return

        if now is not None:
            if fade_in:
                self._channel_obj().fadeout(fade_in)
            else:
                self._channel_obj().stop()

        self._cancel_timer()
        self._paused = False
        self._sound = sound
        self._channel = None
        if sound is None or sound.music is None:
            return

        index = _free_channel()
        if index is None:
            return
        pygame.mixer.Channel(index).play(sound.music, loops=repeats, fade_ms=fade_in)
        self._channel = index
        _owners[index] = self

    def play_file(self, filename, repeats=0, fade_in=0):
        """Load a sound file and play it."""
        self.play(Sound(filename), repeats, fade_in)

    def is_playing(self):
        """The sound being played, or None."""
        if (
            self._channel is not None
            and self._sound is not None
            and _owners.get(self._channel) is self
            and self._channel_obj().get_busy()
        ):
            return self._sound
        self._channel = None
        return None

    def last_playing(self):
        """The sound most recently given to :meth:`play`."""
        return self._sound

    def pause(self):
        if self.is_playing() is not None:
            self._channel_obj().pause()
            self._paused = True

    def resume(self):
        if self.is_playing() is not None:
            self._channel_obj().unpause()
            self._paused = False

    def is_paused(self):
        return self._paused and self.is_playing() is not None

    def volume(self, vol):
        """Set the volume of the playing sound, 0.0 to 1.0."""
        if self.is_playing() is not None:
            self._channel_obj().set_volume(vol)

    def stop(self):
        if self.is_playing() is not None:
            self._channel_obj().stop()
        self._cancel_timer()
        self._channel = None
        self._paused = False

    def fade_out(self, ms):
        if self.is_playing() is not None:
            self._channel_obj().fadeout(ms)

    def expire(self, ms):
        """Stop the playing sound after ``ms`` milliseconds."""
        if self.is_playing() is None:
            return
        self._cancel_timer()
        index = self._channel

        def stop_later():
            if _owners.get(index) is self and self._channel == index:
                pygame.mixer.Channel(index).stop()

        self._timer = threading.Timer(max(ms, 0) / 1000.0, stop_later)
        self._timer.daemon = True
        self._timer.start()

    def set_position(self, angle, distance):
        """Place the sound: ``angle`` in degrees clockwise from the front,
        ``distance`` from 0 (near) to 255 (far)."""
        if not 0 <= distance <= 255:
            raise ValueError(f"distance out of range 0..255: {distance}")
        if self._channel is None:
            return
        gain = 1.0 - distance / 255.0
        pan = math.sin(math.radians(angle))
        left = gain * min(1.0, 1.0 - pan)
        right = gain * min(1.0, 1.0 + pan)
        self._channel_obj().set_volume(left, right)