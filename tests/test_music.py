from pathlib import Path

import pytest

from artiframe.music import MusicPlayer, SoundChannel


@pytest.fixture
def track(tmp_path: Path) -> Path:
    path = tmp_path / "song.mp3"
    path.write_bytes(b"\x00" * 16)
    return path


def test_start_plays_the_given_track(track):
    player = MusicPlayer()
    player.start(track)
    assert player.channel.is_playing is True
    assert player.channel.path == track
    assert player.is_paused is False


def test_start_uses_default_path(track):
    player = MusicPlayer(default_path=track)
    player.start()
    assert player.channel.path == track
    assert player.channel.is_playing is True


def test_start_with_missing_file_does_not_play(tmp_path):
    player = MusicPlayer()
    player.start(tmp_path / "absent.mp3")
    assert player.channel.is_playing is False


def test_pause_keeps_channel_playing_but_paused(track):
    player = MusicPlayer()
    player.start(track)
    player.pause()
    assert player.is_paused is True
    assert player.channel.paused is True
    assert player.channel.is_playing is True


def test_resume_after_pause(track):
    player = MusicPlayer()
    player.start(track)
    player.pause()
    player.resume()
    assert player.is_paused is False
    assert player.channel.paused is False


def test_pause_without_music_does_nothing():
    player = MusicPlayer()
    player.pause()
    assert player.is_paused is False


def test_start_while_paused_resumes(track, tmp_path):
    player = MusicPlayer()
    player.start(track)
    player.pause()
    other = tmp_path / "other.mp3"
    other.write_bytes(b"\x01")
    player.start(other)
    assert player.is_paused is False
    assert player.channel.path == track


def test_restart_after_pause_plays_again(track):
    player = MusicPlayer()
    player.start(track)
    player.pause()
    player.restart()
    assert player.channel.is_playing is True
    assert player.channel.paused is False
    assert player.is_paused is False


def test_restart_when_nothing_plays_stays_silent():
    player = MusicPlayer()
    player.restart()
    assert player.channel.is_playing is False


def test_channel_load_stops_current(track):
    channel = SoundChannel()
    channel.load(track)
    channel.play()
    assert channel.load(track) is True
    assert channel.playing is False