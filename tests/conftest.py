import pytest

from jukebox.catalog.song import Song
from jukebox.observability.hooks import MemoryObserver


@pytest.fixture
def song_cls():
    """
    A Song subclass created per test.

    Every class owns a fresh registry from the moment it is
    created, so this gives each test an empty Song registry.
    """
    class TrackedSong(Song):
        pass

    return TrackedSong


@pytest.fixture
def memory_observer():
    return MemoryObserver()
