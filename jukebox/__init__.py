"""
Jukebox

Classes that remember every instance of themselves, in
construction order, with bulk operations over the lot.
"""

from .__version__ import __version__

from .registry import InstanceRegistry, RegistryMeta, Remembered
from .catalog import Song, Artist, load_playlist, build_songs
from .observability import (
    PlaybackObserver,
    ConsoleObserver,
    FileObserver,
    MemoryObserver,
    build_observers,
)

__all__ = [
    "__version__",
    "InstanceRegistry",
    "RegistryMeta",
    "Remembered",
    "Song",
    "Artist",
    "load_playlist",
    "build_songs",
    "PlaybackObserver",
    "ConsoleObserver",
    "FileObserver",
    "MemoryObserver",
    "build_observers",
]
