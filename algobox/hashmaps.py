"""Hash maps with separate chaining and with open addressing."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Any

_MISSING = object()
_DELETED = object()


class ChainedHashMap:
    """Hash map whose buckets hold lists of key/value pairs."""

    def __init__(self, buckets: int = 16, max_load: float = 0.75) -> None:
        if buckets < 1:
            raise ValueError("need at least one bucket")
        if max_load <= 0:
            raise ValueError("max_load must be positive")
        self._buckets: list[list[list[Any]]] = [[] for _ in range(buckets)]
        self._size = 0
        self._max_load = max_load

    def _bucket(self, key: Hashable) -> list[list[Any]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def _grow_if_needed(self) -> None:
        if (self._size + 1) / len(self._buckets) <= self._max_load:
            return
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry[0]).append(entry)

    def _find(self, key: Hashable) -> list[Any] | None:
        return next((e for e in self._bucket(key) if e[0] == key), None)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self._grow_if_needed()
        entry = self._find(key)
        if entry is not None:
            entry[1] = value
            return
        self._bucket(key).append([key, value])
        self._size += 1

    def __getitem__(self, key: Hashable) -> Any:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        entry = self._find(key)
        return default if entry is None else entry[1]

    def setdefault(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key``, inserting ``default`` when absent."""
        entry = self._find(key)
        if entry is not None:
            return entry[1]
        self._grow_if_needed()
        self._bucket(key).append([key, default])
        self._size += 1
        return default

    def remove(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for i, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[i]
                self._size -= 1
                return True
        return False

    def __delitem__(self, key: Hashable) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: Hashable) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Hashable]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(key, value)`` pairs in bucket order."""
        for bucket in self._buckets:
            for key, value in bucket:
                yield key, value


class OpenAddressingHashMap:
    """Hash map using open addressing with double hashing."""

    LOAD_FACTOR = 0.6

    def __init__(self, capacity: int = 17) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    def _probes(self, key: Hashable) -> Iterator[int]:
        cap = len(self._slots)
        h = hash(key)
        start = h % cap
        step = 1 + h % (cap - 1)
        for i in range(cap):
            yield (start + i * step) % cap

    def _locate(self, key: Hashable) -> int | None:
        for idx in self._probes(key):
            slot = self._slots[idx]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:
                return idx
        return None

    def _rehash(self) -> None:
        old = self._slots
        self._slots = [None] * (2 * len(old))
        self._size = 0
        for slot in old:
            if slot is not None and slot is not _DELETED:
                self[slot[0]] = slot[1]

    def __setitem__(self, key: Hashable, value: Any) -> None:
        if self._size / len(self._slots) >= self.LOAD_FACTOR:
            self._rehash()
        first_deleted: int | None = None
        for idx in self._probes(key):
            slot = self._slots[idx]
            if slot is None:
                target = idx if first_deleted is None else first_deleted
                self._slots[target] = (key, value)
                self._size += 1
                return
            if slot is _DELETED:
                if first_deleted is None:
                    first_deleted = idx
            elif slot[0] == key:
                self._slots[idx] = (key, value)
                return
        if first_deleted is not None:
            self._slots[first_deleted] = (key, value)
            self._size += 1
            return
        # The probe sequence missed every free slot; grow and try again.
        self._rehash()
        self[key] = value

    def __getitem__(self, key: Hashable) -> Any:
        idx = self._locate(key)
        if idx is None:
            raise KeyError(key)
        return self._slots[idx][1]

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key``, or ``default`` when absent."""
        idx = self._locate(key)
        return default if idx is None else self._slots[idx][1]

    def remove(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was present."""
        idx = self._locate(key)
        if idx is None:
            return False
        self._slots[idx] = _DELETED
        self._size -= 1
        return True

    def __delitem__(self, key: Hashable) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __contains__(self, key: Hashable) -> bool:
        return self._locate(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Hashable]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[Hashable, Any]]:
        """Yield ``(key, value)`` pairs in slot order."""
        for slot in self._slots:
            if slot is not None and slot is not _DELETED:
                yield slot