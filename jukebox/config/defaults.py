DEFAULT_CONFIG = {
    # -----------------------------
    # PLAYLIST (OPTIONAL)
    # -----------------------------
    # Songs listed here are played when no playlist file is given
    "playlist": {
        "songs": [],
    },

    # -----------------------------
    # PLAYBACK
    # -----------------------------
    "playback": {
        # console | file | memory
        "observers": [
            {"type": "console"},
        ],
    },

    # -----------------------------
    # LOGGING
    # -----------------------------
    "logging": {
        "level": "INFO",
    },
}
