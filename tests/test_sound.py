import time

import pygame
import pytest

from gfc import sound as snd
from gfc.sound import PlayMode, Sound, SoundPlayer, set_audio_params


class FakeClip:
    def __init__(self, path="clip"):
        self.path = path


class FakeChannel:
    def __init__(self, index):
        self.index = index
        self.busy = False
        self.sound = None
        self.loops = None
        self.fade_in = None
        self.faded_out = None
        self.paused = False
        self.volume = None
        self.plays = 0

    def play(self, sound, loops=0, maxtime=0, fade_ms=0):
        self.sound = sound
        self.loops = loops
        self.fade_in = fade_ms
        self.busy = True
        self.plays += 1

    def stop(self):
        self.busy = False

    def fadeout(self, ms):
        self.faded_out = ms

    def pause(self):
        self.paused = True

    def unpause(self):
        self.paused = False

    def set_volume(self, *values):
        self.volume = values

    def get_busy(self):
        return self.busy


class FakeMixer:
    def __init__(self, num_channels=4):
        self.initialised = False
        self.init_calls = []
        self.quit_calls = 0
        self.channels = {i: FakeChannel(i) for i in range(num_channels)}

    def init(self, frequency=44100, size=-16, channels=2, buffer=512, **kwargs):
        self.initialised = True
        self.init_calls.append((frequency, size, channels, buffer))

    def get_init(self):
        return (44100, -16, 2) if self.initialised else None

    def quit(self):
        self.initialised = False
        self.quit_calls += 1

    def get_num_channels(self):
        return len(self.channels)

    def channel(self, index):
        return self.channels[index]


@pytest.fixture
def mixer(monkeypatch):
    fake = FakeMixer()
    monkeypatch.setattr(pygame.mixer, "init", fake.init)
    monkeypatch.setattr(pygame.mixer, "get_init", fake.get_init)
    monkeypatch.setattr(pygame.mixer, "quit", fake.quit)
    monkeypatch.setattr(pygame.mixer, "get_num_channels", fake.get_num_channels)
    monkeypatch.setattr(pygame.mixer, "Channel", fake.channel)
    monkeypatch.setattr(pygame.mixer, "Sound", FakeClip)
    return fake


def test_sound_opens_the_mixer(mixer):
    sound = Sound()
    assert sound.music is None
    assert mixer.initialised
    assert len(mixer.init_calls) == 1


def test_sound_from_file_is_cached(mixer, tmp_path):
    path = tmp_path / "beep.wav"
    path.write_bytes(b"RIFF")
    first = Sound(str(path))
    second = Sound(path)
    assert first.music is second.music
    assert first.music.path == str(path)


def test_missing_file_loads_nothing(mixer, tmp_path):
    assert Sound(str(tmp_path / "absent.wav")).music is None


def test_attach_and_unload(mixer):
    clip = FakeClip()
    sound = Sound(clip)
    assert sound.music is clip
    sound.unload()
    assert sound.music is None


def test_load_replaces_clip(mixer, tmp_path):
    path = tmp_path / "a.wav"
    path.write_bytes(b"x")
    sound = Sound(FakeClip())
    sound.load(str(path))
    assert sound.music.path == str(path)


def test_play_starts_channel(mixer):
    player = SoundPlayer()
    sound = Sound(FakeClip())
    player.play(sound, 2)
    assert player.is_playing() is sound
    channel = mixer.channels[0]
    assert channel.sound is sound.music
    assert channel.loops == 2


def test_stop(mixer):
    player = SoundPlayer()
    player.play(Sound(FakeClip()))
    player.stop()
    assert player.is_playing() is None
    assert mixer.channels[0].busy is False


def test_play_none_plays_nothing(mixer):
    player = SoundPlayer()
    player.play(None)
    assert player.is_playing() is None
    assert player.last_playing() is None


def test_play_sound_without_clip(mixer):
    player = SoundPlayer()
    empty = Sound()
    player.play(empty)
    assert player.is_playing() is None
    assert player.last_playing() is empty


def test_terminate_and_play_restarts(mixer):
    player = SoundPlayer(PlayMode.TERMINATE_AND_PLAY)
    sound = Sound(FakeClip())
    player.play(sound)
    player.play(sound)
    assert mixer.channels[0].plays == 2
    assert player.is_playing() is sound


def test_play_if_idle_ignores_while_playing(mixer):
    player = SoundPlayer(PlayMode.PLAY_IF_IDLE)
    first = Sound(FakeClip("a"))
    second = Sound(FakeClip("b"))
    player.play(first)
    player.play(second)
    assert player.last_playing() is first
    player.stop()
    player.play(second)
    assert player.is_playing() is second


def test_play_if_new(mixer):
    player = SoundPlayer(PlayMode.PLAY_IF_NEW)
    first = Sound(FakeClip("a"))
    player.play(first)
    player.play(Sound(first.music))
    assert mixer.channels[0].plays == 1
    other = Sound(FakeClip("b"))
    player.play(other)
    assert player.is_playing() is other


def test_play_once(mixer):
    player = SoundPlayer(PlayMode.PLAY_ONCE)
    first = Sound(FakeClip("a"))
    player.play(first)
    player.stop()
    player.play(first)
    assert player.is_playing() is None
    assert sum(c.plays for c in mixer.channels.values()) == 1


def test_channel_taken_by_other_player(monkeypatch):
    fake = FakeMixer(num_channels=1)
    monkeypatch.setattr(pygame.mixer, "init", fake.init)
    monkeypatch.setattr(pygame.mixer, "get_init", fake.get_init)
    monkeypatch.setattr(pygame.mixer, "get_num_channels", fake.get_num_channels)
    monkeypatch.setattr(pygame.mixer, "Channel", fake.channel)
    a = SoundPlayer()
    b = SoundPlayer()
    a.play(Sound(FakeClip("a")))
    sound_b = Sound(FakeClip("b"))
    b.play(sound_b)
    assert a.is_playing() is None
    assert b.is_playing() is sound_b


def test_pause_and_resume(mixer):
    player = SoundPlayer()
    player.play(Sound(FakeClip()))
    player.pause()
    assert player.is_paused()
    assert mixer.channels[0].paused
    player.resume()
    assert not player.is_paused()
    assert not mixer.channels[0].paused


def test_volume_only_while_playing(mixer):
    player = SoundPlayer()
    player.volume(0.5)
    assert player.is_playing() is None
    assert mixer.channels[0].volume is None
    sound = Sound(FakeClip())
    player.play(sound)
    player.volume(0.5)
    assert player.is_playing() is sound
    assert mixer.channels[0].volume == (0.5,)


def test_fade_out(mixer):
    player = SoundPlayer()
    sound = Sound(FakeClip())
    player.play(sound)
    player.fade_out(300)
    assert player.last_playing() is sound
    assert mixer.channels[0].faded_out == 300


def test_fade_in_crossfades(mixer):
    player = SoundPlayer()
    player.play(Sound(FakeClip("a")))
    second = Sound(FakeClip("b"))
    player.play(second, 0, 250)
    assert mixer.channels[0].faded_out == 250
    assert mixer.channels[1].sound is second.music
    assert mixer.channels[1].fade_in == 250
    assert player.is_playing() is second


def test_play_file(mixer, tmp_path):
    path = tmp_path / "tune.ogg"
    path.write_bytes(b"x")
    player = SoundPlayer()
    player.play_file(str(path))
    assert player.is_playing().music.path == str(path)


def test_expire_stops_later(mixer):
    player = SoundPlayer()
    player.play(Sound(FakeClip()))
    player.expire(10)
    deadline = time.monotonic() + 2.0
    while player.is_playing() is not None and time.monotonic() < deadline:
        time.sleep(0.01)
    assert player.is_playing() is None


def test_set_position_pans(mixer):
    player = SoundPlayer()
    sound = Sound(FakeClip())
    player.play(sound)
    player.set_position(0, 0)
    assert player.is_playing() is sound
    left, right = mixer.channels[0].volume
    assert left == pytest.approx(right)
    player.set_position(90, 0)
    left, right = mixer.channels[0].volume
    assert right > left
    player.set_position(270, 0)
    left, right = mixer.channels[0].volume
    assert left > right


def test_set_position_distance_attenuates(mixer):
    player = SoundPlayer()
    sound = Sound(FakeClip())
    player.play(sound)
    player.set_position(0, 0)
    near = mixer.channels[0].volume
    player.set_position(0, 128)
    assert player.is_playing() is sound
    far = mixer.channels[0].volume
    assert far[0] < near[0]
    assert far[1] < near[1]


def test_set_position_rejects_distance(mixer):
    player = SoundPlayer()
    with pytest.raises(ValueError):
        player.set_position(0, 300)


def test_set_audio_params_reopens(mixer):
    sound = Sound()
    assert sound.music is None
    try:
        set_audio_params(22050, -16, 1, 1024)
        assert mixer.quit_calls == 1
        assert mixer.init_calls[-1] == (22050, -16, 1, 1024)
    finally:
        set_audio_params()
    assert mixer.init_calls[-1] == (
        snd._DEFAULT_PARAMS["frequency"],
        snd._DEFAULT_PARAMS["size"],
        snd._DEFAULT_PARAMS["channels"],
        snd._DEFAULT_PARAMS["buffer"],
    )