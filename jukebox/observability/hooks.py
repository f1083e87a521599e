from abc import ABC, abstractmethod
from datetime import datetime, timezone
import json
from pathlib import Path
from typing import List


class PlaybackObserver(ABC):
    @abstractmethod
    def record(self, line: str):
        pass


class ConsoleObserver(PlaybackObserver):
    def record(self, line: str):
        print(line)


class FileObserver(PlaybackObserver):
    def __init__(self, path: str = "playback_audit.jsonl"):
        self.path = Path(path)

    def record(self, line: str):
        entry = {
            "line": line,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")


class MemoryObserver(PlaybackObserver):
    """Keeps every recorded line in order. Handy for tests and embedding."""

    def __init__(self):
        self.lines: List[str] = []

    def record(self, line: str):
        self.lines.append(line)
