from .hooks import (
    PlaybackObserver,
    ConsoleObserver,
    FileObserver,
    MemoryObserver,
)
from .factory import build_observers

__all__ = [
    "PlaybackObserver",
    "ConsoleObserver",
    "FileObserver",
    "MemoryObserver",
    "build_observers",
]
