"""Integer hash tables using separate chaining and linear probing."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "TableFullError",
    "ChainedHashTable",
    "LinearProbingHashTable",
]


class TableFullError(OverflowError):
    """Raised when an open-addressing table has no free slot left."""

    def __init__(self, key: int) -> None:
        super().__init__(f"Hash table is full. Cannot insert {key}")
        self.key = key


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError("table size must be at least 1")
    return size


class ChainedHashTable:
    """A hash table whose slots hold chains of colliding keys.

    New keys are placed at the head of their chain.
    """

    def __init__(self, size: int = 10) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(_check_size(size))]

    @property
    def size(self) -> int:
        return len(self._buckets)

    def index_for(self, key: int) -> int:
        """Return the slot a key hashes to."""
        return key % len(self._buckets)

    def insert(self, key: int) -> int:
        """Insert a key and return the slot it was placed in."""
        index = self.index_for(key)
        self._buckets[index].insert(0, key)
        return index

    def search(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is absent."""
        index = self.index_for(key)
        return index if key in self._buckets[index] else None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def buckets(self) -> list[list[int]]:
        """Return a copy of every chain, head first."""
        return [list(bucket) for bucket in self._buckets]

    def render(self) -> str:
        """Return one line per slot describing its chain."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            chain = "".join(f" -> {key}" for key in bucket) if bucket else " NULL"
            lines.append(f"Index {index}:{chain}")
        return "\n".join(lines)


class LinearProbingHashTable:
    """An open-addressing hash table that probes the following slots in turn."""

    def __init__(self, size: int = 10) -> None:
        self._slots: list[int | None] = [None] * _check_size(size)

    @property
    def size(self) -> int:
        return len(self._slots)

    def index_for(self, key: int) -> int:
        """Return the home slot of a key."""
        return key % len(self._slots)

    def _probe(self, key: int) -> Iterator[int]:
        start = self.index_for(key)
        size = len(self._slots)
        for step in range(size):
            yield (start + step) % size

    def insert(self, key: int) -> int:
        """Insert a key and return the slot it was placed in."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError(key)

    def search(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot == key:
                return index
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)

    def slots(self) -> list[int | None]:
        """Return a copy of the slots; None marks an empty one."""
        return list(self._slots)

    def render(self) -> str:
        """Return one line per slot showing its key or ``Empty``."""
        return "\n".join(
            f"Index {index}: {'Empty' if slot is None else slot}"
            for index, slot in enumerate(self._slots)
        )