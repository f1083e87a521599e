from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class PlaybackConfig:
    """
    Typed view of the `playback` and `logging` sections.

    - observers MUST always be a list
    - no shared mutable defaults
    """
    observers: List[Dict[str, Any]] = field(default_factory=list)
    log_level: str = "INFO"

    def observer_types(self) -> List[str]:
        return [obs.get("type") for obs in self.observers]

    def as_observer_config(self) -> Dict[str, Any]:
        return {"observers": list(self.observers)}
