from .song import Song
from .artist import Artist
from .playlist import load_playlist, build_songs

__all__ = [
    "Song",
    "Artist",
    "load_playlist",
    "build_songs",
]
