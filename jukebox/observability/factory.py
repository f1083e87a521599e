from jukebox.observability.hooks import (
    ConsoleObserver,
    FileObserver,
    MemoryObserver,
    PlaybackObserver,
)


def build_observers(config: dict) -> list[PlaybackObserver]:
    observers = []

    for obs in config.get("observers", []):
        obs_type = obs.get("type")

        if obs_type == "console":
            observers.append(ConsoleObserver())

        elif obs_type == "file":
            observers.append(
                FileObserver(path=obs.get("path", "playback_audit.jsonl"))
            )

        elif obs_type == "memory":
            observers.append(MemoryObserver())

        else:
            raise ValueError(f"Unknown observer type: {obs_type!r}")

    return observers
