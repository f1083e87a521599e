"""
Jukebox CLI

Load a playlist, construct its songs, and play every song
the Song class remembers, in construction order.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from jukebox.__version__ import __version__
from jukebox.catalog.playlist import build_songs, load_playlist
from jukebox.catalog.song import Song
from jukebox.config.loader import load_config, load_playback_config
from jukebox.observability.factory import build_observers

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PROGRAMMATIC ENTRY
# -------------------------------------------------
def run_playlist(
    playlist_path: Optional[str] = None,
    config_path: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> List[str]:
    """
    Construct the playlist's songs and play everything Song remembers.

    Songs come from the playlist file when given, otherwise from
    `playlist.songs` in the config. Returns the played lines.
    """
    final_config = config if config is not None else load_config(config_path)

    if playlist_path:
        entries = load_playlist(playlist_path)
    else:
        entries = (final_config.get("playlist") or {}).get("songs") or []

    songs = build_songs(entries)
    logger.info("Constructed %d songs (%d remembered)", len(songs), Song.count())

    playback = final_config.get("playback_config")
    if playback is None:
        playback = load_playback_config(final_config)
    observers = build_observers(playback.as_observer_config())

    return Song.play_all(observers=observers)


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Jukebox v{__version__}"
    )

    parser.add_argument("playlist", nargs="?", help="Playlist YAML file")
    parser.add_argument("--config", required=False, help="Path to config YAML")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"Jukebox v{__version__}")
        return 0

    config = load_config(args.config)

    # ---- LOGGING ----
    level = logging.DEBUG if args.verbose else config["playback_config"].log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    run_playlist(playlist_path=args.playlist, config=config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
