"""Background music playback with start, pause, resume and restart."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

PathLike = Union[str, Path]

DEFAULT_TRACK = "music.mp3"


class SoundBackend(Protocol):
    """What the music player needs from a sound channel."""

    @property
    def is_playing(self) -> bool: ...

    def load(self, path: PathLike) -> bool: ...

    def play(self) -> None: ...

    def stop(self) -> None: ...

    def set_paused(self, paused: bool) -> None: ...


@dataclass
class SoundChannel:
    """A single sound channel: the loaded track and whether it plays or is paused.

    A paused track still counts as playing, as with a hardware channel that
    keeps its position.
    """

    path: Optional[Path] = None
    playing: bool = False
    paused: bool = False

    @property
    def is_playing(self) -> bool:
        return self.playing

    def load(self, path: PathLike) -> bool:
        """Load a track; loading stops the current one. Return whether it was found."""
        candidate = Path(path)
        self.path = candidate if candidate.is_file() else None
        self.playing = False
        self.paused = False
        return self.path is not None

    def play(self) -> None:
        """Play the loaded track from the start; without a track nothing happens."""
        if self.path is not None:
            self.playing = True
            self.paused = False

    def stop(self) -> None:
        self.playing = False
        self.paused = False

    def set_paused(self, paused: bool) -> None:
        if self.playing:
            self.paused = paused


class MusicPlayer:
    """Controls one music track and remembers whether it was paused."""

    def __init__(
        self,
        default_path: PathLike = DEFAULT_TRACK,
        channel: Optional[SoundBackend] = None,
    ) -> None:
        self.default_path = default_path
        self.channel: SoundBackend = channel if channel is not None else SoundChannel()
        self.is_paused = False

    def start(self, path: Optional[PathLike] = None) -> None:
        """Load and play a track, or resume it if it is paused."""
        if not self.channel.is_playing:
            self.channel.load(self.default_path if path is None else path)
            self.channel.play()
            self.is_paused = False
        elif self.is_paused:
            self.channel.set_paused(False)
            self.is_paused = False

    def pause(self) -> None:
        if self.channel.is_playing and not self.is_paused:
            self.channel.set_paused(True)
            self.is_paused = True

    def resume(self) -> None:
        if self.channel.is_playing and self.is_paused:
            self.channel.set_paused(False)
            self.is_paused = False

    def restart(self) -> None:
        """Play the current track again from the beginning."""
        if self.channel.is_playing or self.is_paused:
            self.channel.stop()
            self.channel.play()
            self.is_paused = False