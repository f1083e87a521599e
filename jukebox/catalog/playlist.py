"""
Playlist loading.

A playlist is YAML, either a bare list or a mapping with a
`songs` key. Entries are song names or {name, artist} mappings:

    songs:
      - name: 99 Problems
        artist: Jay-Z
      - Thriller
"""

from pathlib import Path
from typing import Any, Dict, List, Type

import yaml

from jukebox.catalog.song import Song
from jukebox.utils.logger import get_logger

log = get_logger("jukebox-playlist")


def normalize_entry(entry: Any) -> Dict[str, Any]:
    if isinstance(entry, str):
        return {"name": entry, "artist": None}

    if isinstance(entry, dict) and "name" in entry:
        return {"name": entry["name"], "artist": entry.get("artist")}

    raise ValueError(f"Invalid playlist entry: {entry!r}")


def load_playlist(path) -> List[Dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Playlist file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        if "songs" not in data:
            raise ValueError(f"Playlist mapping has no 'songs' key: {path}")
        data = data["songs"] or []

    if not isinstance(data, list):
        raise ValueError("Playlist must be a YAML list or contain a 'songs' list")

    entries = [normalize_entry(entry) for entry in data]
    log.info("Loaded %d songs from %s", len(entries), path)
    return entries


def build_songs(
    entries: List[Any],
    song_cls: Type[Song] = Song,
) -> List[Song]:
    """Construct (and thereby register) one song per entry, in order."""
    songs = []
    for entry in entries:
        entry = normalize_entry(entry)
        songs.append(song_cls(entry["name"], artist=entry["artist"]))
    return songs
