"""
Instance Registry

Ordered, append-only collection of references to every
instance of a single class. One registry per class.
"""

import threading
from typing import Any, Iterator, Tuple


class InstanceRegistry:
    def __init__(self, owner_name: str):
        self.owner_name = owner_name
        self._entries = []
        self._lock = threading.Lock()

    # -------------------------------------------------
    # WRITE (construction only)
    # -------------------------------------------------
    def append(self, instance: Any) -> None:
        with self._lock:
            self._entries.append(instance)

    # -------------------------------------------------
    # READ (snapshots, never the live list)
    # -------------------------------------------------
    def snapshot(self) -> Tuple[Any, ...]:
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.snapshot())

    def __contains__(self, instance: Any) -> bool:
        return any(entry is instance for entry in self.snapshot())

    def __repr__(self) -> str:
        return f"InstanceRegistry(owner={self.owner_name!r}, size={len(self)})"
