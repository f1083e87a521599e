"""
Song: the tracked domain entity.

Every Song ever constructed is remembered by the Song class,
in construction order.
"""

from typing import Iterable, List, Optional

from jukebox.observability.hooks import ConsoleObserver, PlaybackObserver
from jukebox.registry.tracked import Remembered


class Song(Remembered):
    def __init__(self, name: str, artist: Optional[str] = None):
        self.name = name
        self.artist = artist

    def play(self) -> str:
        return f"Playing {self.name}"

    @classmethod
    def play_all(
        cls, observers: Optional[Iterable[PlaybackObserver]] = None
    ) -> List[str]:
        """
        Play every song in construction order.

        Each line is handed to every observer before the next song
        is played. Defaults to printing to the console.
        """
        if observers is None:
            observers = [ConsoleObserver()]
        observers = list(observers)

        def play_and_record(song):
            line = song.play()
            for observer in observers:
                observer.record(line)
            return line

        return cls.for_each(play_and_record)

    def __repr__(self) -> str:
        if self.artist:
            return f"Song({self.name!r}, artist={self.artist!r})"
        return f"Song({self.name!r})"
