from typing import Iterable, List, Optional

from jukebox.observability.hooks import ConsoleObserver, PlaybackObserver
from jukebox.registry.tracked import Remembered


class Artist(Remembered):
    """Second tracked type; its registry is independent of Song's."""

    def __init__(self, name: str):
        self.name = name

    def introduce(self) -> str:
        return f"Introducing {self.name}"

    @classmethod
    def introduce_all(
        cls, observers: Optional[Iterable[PlaybackObserver]] = None
    ) -> List[str]:
        observers = list(observers) if observers is not None else [ConsoleObserver()]

        def introduce_and_record(artist):
            line = artist.introduce()
            for observer in observers:
                observer.record(line)
            return line

        return cls.for_each(introduce_and_record)

    def __repr__(self) -> str:
        return f"Artist({self.name!r})"
