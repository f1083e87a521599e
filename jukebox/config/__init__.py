from .loader import load_config
from .defaults import DEFAULT_CONFIG
from .playback_config import PlaybackConfig

__all__ = [
    "load_config",
    "DEFAULT_CONFIG",
    "PlaybackConfig",
]
