import threading
from types import MappingProxyType
from typing import Mapping, Optional

from pkg.redis.connection import ManagedConnection


class ConnectionRegistry:
    """Key to connection mapping holding at most one connection per key.

    All access goes through a re-entrant lock, so the registry can be shared
    across threads and an ``end`` listener may remove entries from inside
    another registry call.
    """

    def __init__(self):
        self._connections: dict[str, ManagedConnection] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def snapshot(self) -> Mapping[str, ManagedConnection]:
        """Read-only copy of the current entries."""
        with self._lock:
            return MappingProxyType(dict(self._connections))

    def get(self, key: str) -> Optional[ManagedConnection]:
        with self._lock:
            return self._connections.get(key)

    def put(self, key: str, conn: ManagedConnection) -> Optional[ManagedConnection]:
        """Store ``conn`` under ``key``, returning the entry it replaced."""
        with self._lock:
            previous = self._connections.get(key)
            self._connections[key] = conn
            return previous

    def remove_by_name(self, name: Optional[str]) -> list[str]:
        """Remove every entry whose connection carries ``name``.

        Matching is on the stamped name, not identity, so a connection that
        was re-wrapped elsewhere still clears its slot.

        Returns:
            Removed keys
        """
        if name is None:
            return []

        with self._lock:
            removed = [
                key
                for key, conn in self._connections.items()
                if conn.name == name
            ]
            for key in removed:
                del self._connections[key]
            return removed

    def clear(self) -> list[ManagedConnection]:
        with self._lock:
            connections = list(self._connections.values())
            self._connections.clear()
            return connections

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._connections

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)


__all__ = ["ConnectionRegistry"]
