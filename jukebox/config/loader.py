import yaml
import copy
from pathlib import Path

from .defaults import DEFAULT_CONFIG
from jukebox.config.playback_config import PlaybackConfig


# -------------------------------------------------
# PLAYBACK CONFIG LOADER
# -------------------------------------------------
def load_playback_config(cfg: dict) -> PlaybackConfig:
    observers = (cfg.get("playback") or {}).get("observers") or []

    if not isinstance(observers, list):
        raise ValueError("playback.observers must be a list")

    return PlaybackConfig(
        observers=observers,
        log_level=str((cfg.get("logging") or {}).get("level") or "INFO").upper(),
    )


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: str | None) -> dict:
    """
    Load and merge user config with defaults.

    Rules:
    - Defaults win for any section the user omits
    - User sections are merged one level deep
    - The typed playback view is always attached
    """

    # -------------------------------------------------
    # 1. Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    # -------------------------------------------------
    # 2. Merge with defaults
    # -------------------------------------------------
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(config.get(key), dict):
            # An empty section (`playback:`) loads as None
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"Config section '{key}' must be a mapping")
            config[key].update(value)
        else:
            config[key] = value

    # -------------------------------------------------
    # 3. Attach typed playback view
    # -------------------------------------------------
    config["playback_config"] = load_playback_config(config)

    return config
